"""
MongoDB Connection Utility

MongoDB stores every record of the platform:
- users: student and HR accounts (bcrypt password digests)
- problems: company problems posted by HR
- solutions: student team submissions for a problem

References between collections (problems.hrId, solutions.problemId,
solutions.studentId) are plain ObjectIds and are not enforced.
"""
import logging
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from app.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        # tz_aware: stored datetimes come back as UTC-aware, not naive
        _client = MongoClient(
            settings.mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
    return _client


def get_mongo_db() -> Database:
    """Get the application database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection (see COLLECTIONS)."""
    db = get_mongo_db()
    return db[name]


def close_mongo_client() -> None:
    """Close the client and forget the cached handles."""
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception:
        logger.exception("MongoDB connection failed")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "problems": "problems",
    "solutions": "solutions"
}


def init_mongo_indexes():
    """
    Create indexes. Call this once during app startup.

    The unique index on users.email is what actually guarantees email
    uniqueness under concurrent registrations.
    """
    db = get_mongo_db()

    db[COLLECTIONS["users"]].create_index("email", unique=True)
    db[COLLECTIONS["users"]].create_index([
        ("email", ASCENDING),
        ("role", ASCENDING)
    ])

    # Open problems, newest first
    db[COLLECTIONS["problems"]].create_index([
        ("status", ASCENDING),
        ("createdAt", DESCENDING)
    ])

    db[COLLECTIONS["solutions"]].create_index([("createdAt", DESCENDING)])
    db[COLLECTIONS["solutions"]].create_index("problemId")

    logger.info("MongoDB indexes created successfully")
