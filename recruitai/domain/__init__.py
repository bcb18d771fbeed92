"""Domain layer package exposing pure business abstractions."""

from . import interfaces
from . import entities
from . import repositories
from .value_objects import JobId, ResumeId, TenantId

__all__ = [
    "entities",
    "interfaces",
    "repositories",
    "JobId",
    "ResumeId",
    "TenantId",
]
