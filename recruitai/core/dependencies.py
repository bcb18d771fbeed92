"""
Authentication and role-check dependencies for the FastAPI routers.
"""

from typing import Annotated, Optional

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recruitai.core.config import Settings, get_settings
from recruitai.core.security import TokenManager
from recruitai.domain.entities.user import CallerIdentity, UserRole
from recruitai.domain.value_objects import TenantId, UserId

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False)

RECRUITER_ROLES = (UserRole.RECRUITER, UserRole.CUSTOMER_ADMIN)
ADMIN_ROLES = (UserRole.CUSTOMER_ADMIN,)


def get_settings_dependency() -> Settings:
    return get_settings()


def get_token_manager(settings: Settings = Depends(get_settings_dependency)) -> TokenManager:
    return TokenManager(settings)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_manager: TokenManager = Depends(get_token_manager),
) -> CallerIdentity:
    """Resolve the authenticated caller from the bearer token."""
    if not credentials:
        raise _unauthorized("Authentication required")

    payload = token_manager.verify_token(credentials.credentials)
    if not payload:
        raise _unauthorized("Invalid or expired token")

    try:
        return CallerIdentity(
            user_id=UserId(payload["sub"]),
            tenant_id=TenantId(payload["tenant_id"]),
            role=UserRole(payload["role"]),
            email=payload.get("email"),
        )
    except (KeyError, ValueError, TypeError) as e:
        logger.warning("Token is missing required claims", error=str(e))
        raise _unauthorized("Invalid token claims") from e


def require_roles(*roles: UserRole):
    """Dependency factory for role-based authorization; super admins always pass."""

    async def role_checker(
        caller: CallerIdentity = Depends(get_current_caller),
    ) -> CallerIdentity:
        if not caller.has_any_role(roles):
            logger.info(
                "Role check failed",
                user_id=str(caller.user_id),
                role=caller.role.value,
                required=[r.value for r in roles],
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return caller

    return role_checker


CurrentCaller = Annotated[CallerIdentity, Depends(get_current_caller)]
RecruiterCaller = Annotated[CallerIdentity, Depends(require_roles(*RECRUITER_ROLES))]
AdminCaller = Annotated[CallerIdentity, Depends(require_roles(*ADMIN_ROLES))]


__all__ = [
    "AdminCaller",
    "CurrentCaller",
    "RecruiterCaller",
    "get_current_caller",
    "get_settings_dependency",
    "get_token_manager",
    "require_roles",
]
