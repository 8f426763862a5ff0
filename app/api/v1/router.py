"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import checklists, health, status_transitions

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(checklists.router, prefix="/checklists", tags=["checklists"])
api_router.include_router(
    status_transitions.router,
    prefix="/status-transitions",
    tags=["status-transitions"],
)
