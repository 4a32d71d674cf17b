"""
Pydantic Schemas - Request/Response Validation

All schemas in one file for simplicity:
- Request schemas: what the API accepts (lenient, presence is checked in handlers)
- Document schemas: what gets written to MongoDB (strict, required fields)
- Response schemas: what the API returns
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Any, Union
from datetime import datetime, timezone
from enum import Enum
from bson import ObjectId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    hr = "hr"


class ProblemStatus(str, Enum):
    open = "open"
    closed = "closed"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.email and self.password and self.role)


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginResponse(BaseModel):
    message: str = "Login successful"
    role: str
    userId: str


# ============================================================
# PROBLEM / SOLUTION REQUEST SCHEMAS
# Values stay raw here; the document models below coerce them.
# ============================================================

class ProblemCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[Any] = None
    description: Optional[Any] = None
    budget: Optional[Any] = None
    deadline: Optional[Any] = None


class SolutionCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    problemId: Optional[Any] = None
    team_leader_name: Optional[Any] = None
    age: Optional[Any] = None
    total_members: Optional[Any] = None
    solution_description: Optional[Any] = None
    implementation_plan: Optional[Any] = None


# ============================================================
# DOCUMENT SCHEMAS (stored in MongoDB)
# ============================================================

def _to_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise ValueError(f"not a valid ObjectId: {value!r}")


class MongoDocument(BaseModel):
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_default=True,
        coerce_numbers_to_str=True
    )

    createdAt: datetime = Field(default_factory=utcnow)

    def to_mongo(self) -> dict:
        return self.model_dump()


class UserDocument(MongoDocument):
    email: str
    password: str
    role: UserRole


class ProblemDocument(MongoDocument):
    hrId: ObjectId
    title: str
    description: str
    budget: float
    deadline: datetime
    status: ProblemStatus = ProblemStatus.open

    @field_validator("hrId", mode="before")
    @classmethod
    def coerce_hr_id(cls, v):
        return _to_object_id(v)


class SolutionDocument(MongoDocument):
    problemId: ObjectId
    studentId: ObjectId
    teamLeaderName: str
    age: Union[int, float]
    totalMembers: Union[int, float]
    solutionDescription: str
    implementationPlan: str

    @field_validator("problemId", "studentId", mode="before")
    @classmethod
    def coerce_object_ids(cls, v):
        return _to_object_id(v)


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class SolutionResponse(BaseModel):
    """Flattened solution joined with its problem's title."""
    id: str
    problemTitle: str
    team_leader_name: str
    age: Union[int, float]
    total_members: Union[int, float]
    solution_description: str
    implementation_plan: str
    created_at: datetime


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    mongodb: str
