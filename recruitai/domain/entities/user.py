"""Caller identity as seen by the domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from recruitai.domain.value_objects import TenantId, UserId


class UserRole(str, Enum):
    """User role types in the system."""

    SUPER_ADMIN = "super_admin"
    CUSTOMER_ADMIN = "customer_admin"
    RECRUITER = "recruiter"
    CANDIDATE = "candidate"


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller; tenant scope is taken from here and never re-derived."""

    user_id: UserId
    tenant_id: TenantId
    role: UserRole
    email: Optional[str] = None

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return self.is_super_admin or self.role in set(roles)
