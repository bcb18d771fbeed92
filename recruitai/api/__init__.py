"""
API Package

Central package for all API endpoints.

Note: Routers are imported lazily to avoid circular import issues with application services.
"""

from fastapi import APIRouter


def create_api_router() -> APIRouter:
    """Create the main API router with all v1 routes under ``/api/v1``."""
    from recruitai.api.v1.analytics import router as analytics_router
    from recruitai.api.v1.candidate_portal import router as candidate_portal_router
    from recruitai.api.v1.interviews import router as interviews_router
    from recruitai.api.v1.jobs import router as jobs_router
    from recruitai.api.v1.matching import router as matching_router
    from recruitai.api.v1.resumes import router as resumes_router

    api_router = APIRouter()
    for router in (
        jobs_router,
        resumes_router,
        matching_router,
        interviews_router,
        candidate_portal_router,
        analytics_router,
    ):
        api_router.include_router(router, prefix="/api/v1")
    return api_router
