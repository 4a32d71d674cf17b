"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.problem_routes import router as problem_router
from app.api.routes.solution_routes import router as solution_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(problem_router)
api_router.include_router(solution_router)
