"""Pure domain representation of job postings."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from recruitai.domain.value_objects import JobId, TenantId, UserId


class JobStatus(str, Enum):
    """Lifecycle status of a job posting."""

    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    CLOSED = "closed"
    ARCHIVED = "archived"


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"


class LocationType(str, Enum):
    REMOTE = "remote"
    ONSITE = "onsite"
    HYBRID = "hybrid"


class ExperienceUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"


@dataclass
class ExperienceRequirement:
    """Required experience range; either bound may be open."""

    min: Optional[float] = None
    max: Optional[float] = None
    unit: ExperienceUnit = ExperienceUnit.YEARS

    def in_years(self) -> "ExperienceRequirement":
        """Return the same range expressed in years."""
        if self.unit == ExperienceUnit.YEARS:
            return self
        return ExperienceRequirement(
            min=self.min / 12 if self.min is not None else None,
            max=self.max / 12 if self.max is not None else None,
            unit=ExperienceUnit.YEARS,
        )


@dataclass
class JobRequirements:
    skills: List[str] = field(default_factory=list)
    experience: Optional[ExperienceRequirement] = None
    education: Optional[str] = None
    certifications: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)


@dataclass
class JobLocation:
    type: LocationType = LocationType.ONSITE
    city: Optional[str] = None
    country: Optional[str] = None


@dataclass
class SalaryRange:
    min: Optional[float] = None
    max: Optional[float] = None
    currency: str = "USD"
    period: str = "yearly"


@dataclass
class Job:
    """Aggregate root for a tenant's job posting."""

    id: JobId
    tenant_id: TenantId
    title: str
    description: str
    recruiter_id: Optional[UserId] = None
    requirements: JobRequirements = field(default_factory=JobRequirements)
    location: JobLocation = field(default_factory=JobLocation)
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    salary_range: Optional[SalaryRange] = None
    department: Optional[str] = None
    status: JobStatus = JobStatus.DRAFT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Job title cannot be empty")
        if not self.description or not self.description.strip():
            raise ValueError("Job description cannot be empty")

    @property
    def required_skills(self) -> List[str]:
        return list(self.requirements.skills)

    def experience_in_years(self) -> Optional[ExperienceRequirement]:
        if self.requirements.experience is None:
            return None
        return self.requirements.experience.in_years()

    def change_status(self, status: JobStatus) -> None:
        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
