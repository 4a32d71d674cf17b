"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # MongoDB (no credentials in defaults - set MONGODB_URI for real deployments)
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "student_idea_management"
    # Server selection timeout; bounds the startup ping when MongoDB is down
    mongodb_timeout_ms: int = 5000

    # Abort startup when MongoDB is unreachable instead of serving failing requests
    fail_fast_on_db_error: bool = False

    # CORS (set as a JSON list in the environment)
    cors_origins: List[str] = [
        "http://localhost:3000",
        "https://student-idea-app.vercel.app",
    ]

    # Password hashing cost factor
    bcrypt_rounds: int = 10

    # App
    log_level: str = "INFO"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
