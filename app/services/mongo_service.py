"""
MongoDB Service - CRUD operations for the record store.

Collections in this database:
1. users     - student and HR accounts
2. problems  - company problems posted by HR
3. solutions - student team submissions for a problem

Documents are validated by the pydantic document models before insert,
so a missing or uncoercible field raises before anything is written.
There are no transactions and no cross-collection integrity checks.
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.collection import Collection

from app.db.mongodb import get_collection, COLLECTIONS
from app.schemas.schemas import UserDocument, ProblemDocument, SolutionDocument, ProblemStatus

# Newest first; _id breaks ties between records created in the same millisecond
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class DanglingReferenceError(LookupError):
    """A stored reference points at a record that does not exist."""


# ============================================================
# HELPER: Convert ObjectIds and datetimes for JSON serialization
# ============================================================

def as_utc(value: datetime) -> datetime:
    """Naive datetimes read from MongoDB are UTC; make that explicit."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return as_utc(value)
    return value


def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict (ObjectIds as str, datetimes in UTC)."""
    if doc is None:
        return None
    return {key: _serialize_value(value) for key, value in doc.items()}


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService:
    """
    Handles user accounts.
    Email is unique (enforced by the index from init_mongo_indexes).
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["users"])

    def create(self, email: str, password_hash: str, role: str) -> str:
        """
        Insert a user.

        Raises:
            pydantic.ValidationError: role is not student/hr
            pymongo.errors.DuplicateKeyError: email already stored
        """
        doc = UserDocument(email=email, password=password_hash, role=role)
        result = self.collection.insert_one(doc.to_mongo())
        return str(result.inserted_id)

    def find_by_email(self, email: str) -> Optional[dict]:
        return serialize_doc(self.collection.find_one({"email": email}))

    def find_by_credentials(self, email: str, role: str) -> Optional[dict]:
        """Role is part of the lookup key, not just a returned attribute."""
        return serialize_doc(self.collection.find_one({"email": email, "role": role}))

    def find_by_id_and_role(self, user_id: str, role: str) -> Optional[dict]:
        doc = self.collection.find_one({"_id": ObjectId(user_id), "role": role})
        return serialize_doc(doc)


# ============================================================
# PROBLEMS COLLECTION
# ============================================================

class ProblemService:
    """
    Handles company problems.
    Status is always "open"; nothing closes a problem.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["problems"])

    def create(
        self,
        hr_id: ObjectId,
        title: Any,
        description: Any,
        budget: Any,
        deadline: Any
    ) -> str:
        """
        Insert a problem.

        Args:
            hr_id: Owning HR reference (not checked against users)
            deadline: datetime or ISO date string, e.g. "2030-01-01"

        Returns:
            MongoDB ObjectId as string
        """
        doc = ProblemDocument(
            hrId=hr_id,
            title=title,
            description=description,
            budget=budget,
            deadline=deadline
        )
        result = self.collection.insert_one(doc.to_mongo())
        return str(result.inserted_id)

    def list_open(self) -> List[dict]:
        """All open problems, newest first. Unbounded."""
        cursor = self.collection.find({"status": ProblemStatus.open.value}).sort(NEWEST_FIRST)
        return serialize_docs(list(cursor))

    def get_titles(self, problem_ids: List[ObjectId]) -> Dict[ObjectId, str]:
        """Map problem id -> title for the ids that exist."""
        if not problem_ids:
            return {}
        cursor = self.collection.find(
            {"_id": {"$in": list(set(problem_ids))}},
            {"title": 1}
        )
        return {doc["_id"]: doc.get("title") for doc in cursor}


# ============================================================
# SOLUTIONS COLLECTION
# ============================================================

class SolutionService:
    """
    Handles student solutions.
    problemId is stored as given and only resolved when listing.
    """

    def __init__(self):
        self.collection: Collection = get_collection(COLLECTIONS["solutions"])
        self.problems = ProblemService()

    def create(
        self,
        problem_id: Any,
        student_id: ObjectId,
        team_leader_name: Any,
        age: Any,
        total_members: Any,
        solution_description: Any,
        implementation_plan: Any
    ) -> str:
        doc = SolutionDocument(
            problemId=problem_id,
            studentId=student_id,
            teamLeaderName=team_leader_name,
            age=age,
            totalMembers=total_members,
            solutionDescription=solution_description,
            implementationPlan=implementation_plan
        )
        result = self.collection.insert_one(doc.to_mongo())
        return str(result.inserted_id)

    def list_with_problem_titles(self) -> List[dict]:
        """
        All solutions, newest first, flattened with their problem's title.

        Raises:
            DanglingReferenceError: a solution's problemId does not resolve
        """
        solutions = list(self.collection.find().sort(NEWEST_FIRST))
        titles = self.problems.get_titles([s["problemId"] for s in solutions])

        formatted = []
        for solution in solutions:
            if solution["problemId"] not in titles:
                raise DanglingReferenceError(
                    f"solution {solution['_id']} references missing problem {solution['problemId']}"
                )
            formatted.append({
                "id": str(solution["_id"]),
                "problemTitle": titles[solution["problemId"]],
                "team_leader_name": solution["teamLeaderName"],
                "age": solution["age"],
                "total_members": solution["totalMembers"],
                "solution_description": solution["solutionDescription"],
                "implementation_plan": solution["implementationPlan"],
                "created_at": as_utc(solution["createdAt"]),
            })
        return formatted
