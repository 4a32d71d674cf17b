"""
Solution Routes

POST /solutions - Submit a team solution to a problem (students)
GET /solutions - List all solutions with their problem title (HR)
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends

from app.api.deps import read_body
from app.core.auth import CallerContext, get_caller_context, resolve_owner_id
from app.core.errors import InternalError
from app.services.mongo_service import SolutionService, UserService
from app.schemas.schemas import ErrorResponse, MessageResponse, SolutionCreate, SolutionResponse, UserRole

router = APIRouter(prefix="/solutions", tags=["Solutions"], responses={500: {"model": ErrorResponse}})
logger = logging.getLogger(__name__)


@router.post("", response_model=MessageResponse)
def submit_solution(
    body: dict = Depends(read_body),
    caller: Optional[CallerContext] = Depends(get_caller_context)
):
    """
    Submit a solution.

    problemId must be an ObjectId string but is not checked against
    existing problems.
    """
    try:
        data = SolutionCreate.model_validate(body)
        student_id = resolve_owner_id(caller, UserRole.student.value, UserService())

        solution_id = SolutionService().create(
            problem_id=data.problemId,
            student_id=student_id,
            team_leader_name=data.team_leader_name,
            age=data.age,
            total_members=data.total_members,
            solution_description=data.solution_description,
            implementation_plan=data.implementation_plan
        )
        logger.info("Solution %s submitted for problem %s", solution_id, data.problemId)
        return MessageResponse(message="Solution submitted successfully")

    except Exception as exc:
        logger.exception("Submit solution error")
        raise InternalError("Failed to submit solution") from exc


@router.get("", response_model=List[SolutionResponse])
def list_solutions():
    """All solutions, newest first, each with its problem's title."""
    try:
        return SolutionService().list_with_problem_titles()
    except Exception as exc:
        logger.exception("Get solutions error")
        raise InternalError("Failed to fetch solutions") from exc
