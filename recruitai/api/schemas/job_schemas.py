"""Job posting API schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from recruitai.domain.entities.job import (
    EmploymentType,
    ExperienceRequirement,
    ExperienceUnit,
    Job,
    JobLocation,
    JobRequirements,
    JobStatus,
    LocationType,
    SalaryRange,
)


class ExperienceSchema(BaseModel):
    min: Optional[float] = Field(default=None, ge=0)
    max: Optional[float] = Field(default=None, ge=0)
    unit: ExperienceUnit = ExperienceUnit.YEARS


class RequirementsSchema(BaseModel):
    skills: List[str] = Field(default_factory=list)
    experience: Optional[ExperienceSchema] = None
    education: Optional[str] = None
    certifications: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)

    def to_domain(self) -> JobRequirements:
        experience = self.experience
        return JobRequirements(
            skills=list(self.skills),
            experience=ExperienceRequirement(
                min=experience.min, max=experience.max, unit=experience.unit
            ) if experience else None,
            education=self.education,
            certifications=list(self.certifications),
            languages=list(self.languages),
        )

    @classmethod
    def from_domain(cls, requirements: JobRequirements) -> "RequirementsSchema":
        experience = requirements.experience
        return cls(
            skills=requirements.skills,
            experience=ExperienceSchema(
                min=experience.min, max=experience.max, unit=experience.unit
            ) if experience else None,
            education=requirements.education,
            certifications=requirements.certifications,
            languages=requirements.languages,
        )


class LocationSchema(BaseModel):
    type: LocationType = LocationType.ONSITE
    city: Optional[str] = None
    country: Optional[str] = None


class SalarySchema(BaseModel):
    min: Optional[float] = Field(default=None, ge=0)
    max: Optional[float] = Field(default=None, ge=0)
    currency: str = "USD"
    period: str = "yearly"


class JobCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    requirements: RequirementsSchema = Field(default_factory=RequirementsSchema)
    location: LocationSchema = Field(default_factory=LocationSchema)
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    salary_range: Optional[SalarySchema] = None
    department: Optional[str] = None
    status: JobStatus = JobStatus.DRAFT


class JobUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    requirements: Optional[RequirementsSchema] = None
    location: Optional[LocationSchema] = None
    employment_type: Optional[EmploymentType] = None
    salary_range: Optional[SalarySchema] = None
    department: Optional[str] = None
    status: Optional[JobStatus] = None

    def to_changes(self) -> dict:
        changes = {}
        data = self.model_dump(exclude_unset=True)
        for key in data:
            value = getattr(self, key)
            if key == "requirements" and value is not None:
                value = value.to_domain()
            elif key == "location" and value is not None:
                value = JobLocation(**value.model_dump())
            elif key == "salary_range" and value is not None:
                value = SalaryRange(**value.model_dump())
            changes[key] = value
        return changes


class JobResponse(BaseModel):
    id: str
    tenant_id: str
    recruiter_id: Optional[str] = None
    title: str
    description: str
    requirements: RequirementsSchema
    location: LocationSchema
    employment_type: EmploymentType
    salary_range: Optional[SalarySchema] = None
    department: Optional[str] = None
    status: JobStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, job: Job) -> "JobResponse":
        salary = job.salary_range
        return cls(
            id=str(job.id),
            tenant_id=str(job.tenant_id),
            recruiter_id=str(job.recruiter_id) if job.recruiter_id else None,
            title=job.title,
            description=job.description,
            requirements=RequirementsSchema.from_domain(job.requirements),
            location=LocationSchema(
                type=job.location.type, city=job.location.city, country=job.location.country
            ),
            employment_type=job.employment_type,
            salary_range=SalarySchema(
                min=salary.min, max=salary.max, currency=salary.currency, period=salary.period
            ) if salary else None,
            department=job.department,
            status=job.status,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )
