"""
Authentication Utility - password hashing and caller context.

Provides:
- Password hashing with bcrypt
- Optional caller identity headers (X-User-Id / X-User-Role)

Login issues no token. Clients remember the userId and role it returns
and may echo them back in the headers above; nothing here verifies them
beyond checking the record store.
"""

import logging
from typing import Optional
from bson import ObjectId
from fastapi import Header
from passlib.context import CryptContext
from pydantic import BaseModel

from app.core.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds
)


def hash_password(password: str) -> str:
    """Hash password with bcrypt (fresh random salt per call)."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash. A malformed hash never verifies."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be parsed")
        return False


class CallerContext(BaseModel):
    user_id: str
    role: Optional[str] = None


def get_caller_context(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Optional[CallerContext]:
    """
    FastAPI dependency - caller identity as remembered by the client.

    Usage:
        @router.post("/problems")
        def route(caller: Optional[CallerContext] = Depends(get_caller_context)):
            ...
    """
    if not x_user_id:
        return None
    return CallerContext(user_id=x_user_id, role=x_user_role)


def resolve_owner_id(caller: Optional[CallerContext], role: str, users) -> ObjectId:
    """
    Pick the owner reference for a new Problem/Solution.

    Returns the caller's id when it names an existing user of `role`,
    otherwise a freshly generated ObjectId.
    """
    if caller is None:
        return ObjectId()

    if caller.role and caller.role != role:
        logger.warning("Caller role %s does not match required role %s", caller.role, role)
        return ObjectId()

    if not ObjectId.is_valid(caller.user_id):
        logger.warning("Caller id %r is not a valid ObjectId", caller.user_id)
        return ObjectId()

    user = users.find_by_id_and_role(caller.user_id, role)
    if user is None:
        logger.warning("Caller %s is not a known %s user", caller.user_id, role)
        return ObjectId()

    return ObjectId(user["_id"])
