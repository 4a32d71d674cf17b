"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas: what the client sends
- Document schemas: what is stored in MongoDB
- Response schemas: what the API returns
"""

from app.schemas.schemas import (
    UserRole,
    ProblemStatus,
    RegisterRequest,
    LoginRequest,
    LoginResponse,
    ProblemCreate,
    SolutionCreate,
    UserDocument,
    ProblemDocument,
    SolutionDocument,
    SolutionResponse,
    MessageResponse,
    ErrorResponse,
    HealthResponse,
)
