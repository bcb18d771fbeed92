"""
Mapper between Job domain entities and JobTable persistence models.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

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
from recruitai.domain.value_objects import JobId, TenantId, UserId
from recruitai.infrastructure.persistence.models.job_table import JobTable


class JobMapper:
    """Maps between Job domain entities and JobTable persistence models."""

    @staticmethod
    def to_domain(table: JobTable) -> Job:
        requirements = table.requirements or {}
        experience = requirements.get("experience")
        location = table.location or {}
        salary = table.salary_range

        return Job(
            id=JobId(table.id),
            tenant_id=TenantId(table.tenant_id),
            recruiter_id=UserId(table.recruiter_id) if table.recruiter_id else None,
            title=table.title,
            description=table.description,
            requirements=JobRequirements(
                skills=list(requirements.get("skills", [])),
                experience=ExperienceRequirement(
                    min=experience.get("min"),
                    max=experience.get("max"),
                    unit=ExperienceUnit(experience.get("unit", "years")),
                ) if experience else None,
                education=requirements.get("education"),
                certifications=list(requirements.get("certifications", [])),
                languages=list(requirements.get("languages", [])),
            ),
            location=JobLocation(
                type=LocationType(location.get("type", LocationType.ONSITE.value)),
                city=location.get("city"),
                country=location.get("country"),
            ),
            employment_type=EmploymentType(table.employment_type),
            salary_range=SalaryRange(**salary) if salary else None,
            department=table.department,
            status=JobStatus(table.status),
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: Job) -> Dict[str, Any]:
        experience = entity.requirements.experience
        salary: Optional[SalaryRange] = entity.salary_range
        return {
            "tenant_id": entity.tenant_id.value,
            "recruiter_id": entity.recruiter_id.value if entity.recruiter_id else None,
            "title": entity.title,
            "description": entity.description,
            "requirements": {
                "skills": list(entity.requirements.skills),
                "experience": {
                    "min": experience.min,
                    "max": experience.max,
                    "unit": experience.unit.value,
                } if experience else None,
                "education": entity.requirements.education,
                "certifications": list(entity.requirements.certifications),
                "languages": list(entity.requirements.languages),
            },
            "location": {
                "type": entity.location.type.value,
                "city": entity.location.city,
                "country": entity.location.country,
            },
            "employment_type": entity.employment_type.value,
            "salary_range": {
                "min": salary.min,
                "max": salary.max,
                "currency": salary.currency,
                "period": salary.period,
            } if salary else None,
            "department": entity.department,
            "status": entity.status.value,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: Job) -> JobTable:
        return JobTable(id=entity.id.value, **JobMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: JobTable, entity: Job) -> JobTable:
        for key, value in JobMapper._values(entity).items():
            if key != "created_at":
                setattr(table, key, value)
        return table


__all__ = ["JobMapper"]
