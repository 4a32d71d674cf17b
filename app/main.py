"""
Student Idea Platform - Main Application

FastAPI backend with:
- MongoDB for users, problems and solutions
- bcrypt password hashing
- CORS for the web frontend

Run: uvicorn app.main:app --reload
  or python -m app.main (uses HOST / PORT from the environment)
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import APIError, api_error_handler
from app.db import mongodb
from app.schemas.schemas import HealthResponse

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


# Create FastAPI app
app = FastAPI(
    title="Student Idea Platform",
    description="""
    Connects students with companies through posted problems.

    ## Features
    - **Accounts**: register and log in as `student` or `hr`
    - **Problems**: HR posts company problems, students browse the open ones
    - **Solutions**: student teams submit solutions, HR reviews them
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(APIError, api_error_handler)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
def startup_event():
    """Check MongoDB and create indexes on startup."""
    configure_logging()
    try:
        mongodb.get_mongo_client().admin.command("ping")
        mongodb.init_mongo_indexes()
        logger.info("Connected to MongoDB")
    except Exception:
        logger.exception("MongoDB connection failed")
        if settings.fail_fast_on_db_error:
            raise


@app.on_event("shutdown")
def shutdown_event():
    mongodb.close_mongo_client()


@app.get("/", tags=["Health"])
def root():
    return {"status": "Student Idea Platform API running"}


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    """MongoDB connectivity check."""
    connected = mongodb.test_mongo_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        mongodb="connected" if connected else "disconnected"
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
