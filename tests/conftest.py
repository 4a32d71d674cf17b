import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGODB_DB", "student_idea_test")

import mongomock  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db import mongodb  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def mongo_db(monkeypatch):
    monkeypatch.setattr(mongodb, "_client", mongomock.MongoClient(tz_aware=True))
    monkeypatch.setattr(mongodb, "_db", None)
    mongodb.init_mongo_indexes()
    return mongodb.get_mongo_db()


@pytest.fixture
def client(mongo_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    def _register(email: str, password: str = "s3cret-pass", role: str = "student") -> str:
        response = client.post("/api/register", json={"email": email, "password": password, "role": role})
        assert response.status_code == 200
        login = client.post("/api/login", json={"email": email, "password": password, "role": role})
        return login.json()["userId"]

    return _register
