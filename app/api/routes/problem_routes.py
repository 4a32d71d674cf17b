"""
Problem Routes

POST /problems - Post a company problem (HR)
GET /problems - List open problems, newest first (students)
"""

import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends

from app.api.deps import read_body
from app.core.auth import CallerContext, get_caller_context, resolve_owner_id
from app.core.errors import InternalError
from app.services.mongo_service import ProblemService, UserService
from app.schemas.schemas import ErrorResponse, MessageResponse, ProblemCreate, UserRole

router = APIRouter(prefix="/problems", tags=["Problems"], responses={500: {"model": ErrorResponse}})
logger = logging.getLogger(__name__)


@router.post("", response_model=MessageResponse)
def create_problem(
    body: dict = Depends(read_body),
    caller: Optional[CallerContext] = Depends(get_caller_context)
):
    """
    Post a new problem with status "open".

    The HR owner is the caller when X-User-Id names an HR account,
    otherwise an unlinked generated id.
    """
    try:
        data = ProblemCreate.model_validate(body)
        hr_id = resolve_owner_id(caller, UserRole.hr.value, UserService())

        problem_id = ProblemService().create(
            hr_id=hr_id,
            title=data.title,
            description=data.description,
            budget=data.budget,
            deadline=data.deadline
        )
        logger.info("Problem %s posted by hr %s", problem_id, hr_id)
        return MessageResponse(message="Problem posted successfully")

    except Exception as exc:
        logger.exception("Post problem error")
        raise InternalError("Failed to post problem") from exc


@router.get("", response_model=List[Dict[str, Any]])
def list_problems():
    """List all open problems, most recent first. No pagination."""
    try:
        return ProblemService().list_open()
    except Exception as exc:
        logger.exception("Get problems error")
        raise InternalError("Failed to fetch problems") from exc
