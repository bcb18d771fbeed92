"""
Recruiter dashboard analytics.
"""

from typing import List

import structlog
from fastapi import APIRouter

from recruitai.api.dependencies import AnalyticsServiceDep, map_domain_exception_to_http
from recruitai.api.schemas.analytics_schemas import JobPerformanceSchema, RecruiterAnalyticsResponse
from recruitai.core.dependencies import RecruiterCaller
from recruitai.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/recruiter", response_model=RecruiterAnalyticsResponse)
async def recruiter_dashboard(
    caller: RecruiterCaller,
    analytics_service: AnalyticsServiceDep,
) -> RecruiterAnalyticsResponse:
    """Counts, per-job match totals, interview status breakdown and the tenant's top matches."""
    try:
        analytics = await analytics_service.get_recruiter_analytics(
            tenant_id=str(caller.tenant_id),
            recruiter_id=str(caller.user_id),
        )
        return RecruiterAnalyticsResponse.from_domain(analytics)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/recruiter/jobs", response_model=List[JobPerformanceSchema])
async def recruiter_jobs_performance(
    caller: RecruiterCaller,
    analytics_service: AnalyticsServiceDep,
) -> List[JobPerformanceSchema]:
    try:
        analytics = await analytics_service.get_recruiter_analytics(
            tenant_id=str(caller.tenant_id),
            recruiter_id=str(caller.user_id),
        )
        return [JobPerformanceSchema.from_domain(p) for p in analytics.jobs_performance]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
