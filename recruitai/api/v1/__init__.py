"""
API v1 Routes
"""

from .analytics import router as analytics_router
from .candidate_portal import router as candidate_portal_router
from .interviews import router as interviews_router
from .jobs import router as jobs_router
from .matching import router as matching_router
from .resumes import router as resumes_router

__all__ = [
    "analytics_router",
    "candidate_portal_router",
    "interviews_router",
    "jobs_router",
    "matching_router",
    "resumes_router",
]
