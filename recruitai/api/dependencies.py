"""
API-specific dependencies for application services with dependency injection.

This module provides FastAPI dependency injection helpers for application services,
bridging the API layer with the hexagonal architecture's application services.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException

from recruitai.application.analytics_service import AnalyticsApplicationService
from recruitai.application.interview_service import InterviewApplicationService
from recruitai.application.job_service import JobApplicationService
from recruitai.application.matching_config_service import MatchingConfigService
from recruitai.application.matching_service import MatchingApplicationService
from recruitai.application.resume_service import ResumeApplicationService
from recruitai.domain.exceptions import (
    AuthorizationError,
    ConfigurationError,
    DomainException,
    InterviewExpiredError,
    InterviewStateError,
    NotFoundError,
    ProcessingError,
    ValidationError,
)
from recruitai.infrastructure.factories.analytics_dependency_factory import get_analytics_dependencies
from recruitai.infrastructure.factories.interview_dependency_factory import get_interview_dependencies
from recruitai.infrastructure.factories.matching_dependency_factory import get_matching_dependencies
from recruitai.infrastructure.factories.resume_dependency_factory import (
    get_job_dependencies,
    get_resume_dependencies,
)
from recruitai.infrastructure.providers.repository_provider import get_matching_config_repository

logger = structlog.get_logger(__name__)


# Application Service Dependencies
async def get_job_service() -> JobApplicationService:
    """Create JobApplicationService with injected dependencies."""
    try:
        return JobApplicationService(await get_job_dependencies())
    except Exception as e:
        logger.error("Failed to create job service", error=str(e))
        raise HTTPException(status_code=500, detail="Job service unavailable") from e


async def get_resume_service() -> ResumeApplicationService:
    """Create ResumeApplicationService with injected dependencies."""
    try:
        return ResumeApplicationService(await get_resume_dependencies())
    except Exception as e:
        logger.error("Failed to create resume service", error=str(e))
        raise HTTPException(status_code=500, detail="Resume service unavailable") from e


async def get_matching_service() -> MatchingApplicationService:
    """Create MatchingApplicationService with injected dependencies."""
    try:
        return MatchingApplicationService(await get_matching_dependencies())
    except Exception as e:
        logger.error("Failed to create matching service", error=str(e))
        raise HTTPException(status_code=500, detail="Matching service unavailable") from e


async def get_matching_config_service() -> MatchingConfigService:
    try:
        return MatchingConfigService(await get_matching_config_repository())
    except Exception as e:
        logger.error("Failed to create matching config service", error=str(e))
        raise HTTPException(status_code=500, detail="Matching config service unavailable") from e


async def get_interview_service() -> InterviewApplicationService:
    """Create InterviewApplicationService with injected dependencies."""
    try:
        return InterviewApplicationService(await get_interview_dependencies())
    except Exception as e:
        logger.error("Failed to create interview service", error=str(e))
        raise HTTPException(status_code=500, detail="Interview service unavailable") from e


async def get_analytics_service() -> AnalyticsApplicationService:
    try:
        return AnalyticsApplicationService(await get_analytics_dependencies())
    except Exception as e:
        logger.error("Failed to create analytics service", error=str(e))
        raise HTTPException(status_code=500, detail="Analytics service unavailable") from e


# Type aliases for dependency injection
JobServiceDep = Annotated[JobApplicationService, Depends(get_job_service)]
ResumeServiceDep = Annotated[ResumeApplicationService, Depends(get_resume_service)]
MatchingServiceDep = Annotated[MatchingApplicationService, Depends(get_matching_service)]
MatchingConfigServiceDep = Annotated[MatchingConfigService, Depends(get_matching_config_service)]
InterviewServiceDep = Annotated[InterviewApplicationService, Depends(get_interview_service)]
AnalyticsServiceDep = Annotated[AnalyticsApplicationService, Depends(get_analytics_service)]


# Domain Exception Handlers
def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # Expired interview links - 410 Gone (checked before the generic hierarchy)
    if isinstance(exception, InterviewExpiredError):
        return HTTPException(status_code=410, detail=str(exception))

    # Invalid lifecycle transition - 409 Conflict
    elif isinstance(exception, InterviewStateError):
        return HTTPException(status_code=409, detail=str(exception))

    # NotFoundError hierarchy - 404 Not Found
    elif isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ValidationError hierarchy - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # AuthorizationError hierarchy - 403 Forbidden
    elif isinstance(exception, AuthorizationError):
        return HTTPException(status_code=403, detail=str(exception))

    # ProcessingError hierarchy - 422 Unprocessable Entity
    elif isinstance(exception, ProcessingError):
        return HTTPException(status_code=422, detail=str(exception))

    # ConfigurationError - 500 Internal Server Error (configuration issues)
    elif isinstance(exception, ConfigurationError):
        logger.error("Configuration error", error=str(exception))
        return HTTPException(status_code=500, detail="Service configuration error")

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("Unhandled domain exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        logger.error("Non-domain exception in mapping", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "AnalyticsServiceDep",
    "get_analytics_service",
    "get_interview_service",
    "get_job_service",
    "get_matching_config_service",
    "get_matching_service",
    "get_resume_service",
    "InterviewServiceDep",
    "JobServiceDep",
    "MatchingConfigServiceDep",
    "MatchingServiceDep",
    "ResumeServiceDep",
    "map_domain_exception_to_http",
]
