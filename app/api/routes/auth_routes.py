"""
Authentication Routes

POST /register - Register new student or HR account
POST /login - Check credentials and return role + user id (no token)
"""

import logging
from fastapi import APIRouter, Depends
from pymongo.errors import DuplicateKeyError

from app.api.deps import read_body
from app.core.auth import hash_password, verify_password
from app.core.errors import APIError, AuthError, ConflictError, InternalError, ValidationError
from app.services.mongo_service import UserService
from app.schemas.schemas import RegisterRequest, LoginRequest, LoginResponse, MessageResponse, ErrorResponse

router = APIRouter(
    tags=["Authentication"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
logger = logging.getLogger(__name__)


@router.post("/register", response_model=MessageResponse)
def register(body: dict = Depends(read_body)):
    """
    Register a new user account.

    Role must be "student" or "hr". After registration, call /login.
    """
    try:
        request = RegisterRequest.model_validate(body)
        logger.info("Registration attempt: email=%s role=%s", request.email, request.role)

        if not request.is_complete():
            raise ValidationError()

        users = UserService()
        if users.find_by_email(request.email):
            raise ConflictError()

        try:
            users.create(request.email, hash_password(request.password), request.role)
        except DuplicateKeyError as exc:
            # Lost a race with a concurrent registration for the same email
            raise ConflictError() from exc

        logger.info("Registration successful for: %s", request.email)
        return MessageResponse(message="Registration successful")

    except APIError:
        raise
    except Exception as exc:
        logger.exception("Server error during registration")
        raise InternalError("Server error") from exc


@router.post("/login", response_model=LoginResponse)
def login(body: dict = Depends(read_body)):
    """
    Check email + password for the given role.

    A student account cannot log in as hr (and vice versa) even with the
    right password. Every failure returns the same message.
    """
    try:
        request = LoginRequest.model_validate(body)
        if not (request.email and request.password and request.role):
            raise AuthError()

        user = UserService().find_by_credentials(request.email, request.role)
        if not user:
            raise AuthError()

        if not verify_password(request.password, user["password"]):
            raise AuthError()

        return LoginResponse(role=user["role"], userId=user["_id"])

    except APIError:
        raise
    except Exception as exc:
        logger.exception("Login error")
        raise InternalError("Server error") from exc
