"""
API error taxonomy.

Every handler failure is one of these. The app renders them as
{"error": "<message>"} with the matching status code, so no driver
detail or stack trace ever reaches the client.
"""

from fastapi import Request
from fastapi.responses import JSONResponse


class APIError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(APIError):
    """Required request fields are missing."""
    status_code = 400
    default_message = "All fields are required"


class ConflictError(APIError):
    """A unique field (User.email) is already taken."""
    status_code = 400
    default_message = "Email already exists"


class AuthError(APIError):
    """Credential or role mismatch at login. Same message for every cause."""
    status_code = 400
    default_message = "Invalid credentials"


class InternalError(APIError):
    status_code = 500


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
