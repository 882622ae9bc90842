"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from fitcoach.api.v1.endpoints import assignments, checkins, programs, recommendations, schedule

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    recommendations.router, prefix="/recommendations", tags=["Recommendations"]
)
api_router.include_router(
    assignments.router, prefix="/assignments", tags=["Program assignments"]
)
api_router.include_router(
    schedule.router,
    prefix="/sessions",
    tags=["Scheduled sessions"],
)
api_router.include_router(
    checkins.router, prefix="/checkins", tags=["Daily check-ins"]
)
api_router.include_router(
    programs.router, prefix="/programs", tags=["Programs"]
)
