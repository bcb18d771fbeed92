"""
Mapper between Resume domain entities and ResumeTable persistence models.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from recruitai.domain.entities.resume import (
    CandidateInfo,
    CareerLevel,
    ParsedResumeData,
    ProcessingStatus,
    Resume,
    ResumeAnalysis,
    ResumeSource,
    ResumeStatus,
)
from recruitai.domain.value_objects import ResumeId, TenantId, UserId
from recruitai.infrastructure.persistence.models.resume_table import ResumeTable


class ResumeMapper:
    """Maps between Resume domain entities and ResumeTable persistence models."""

    @staticmethod
    def to_domain(table: ResumeTable) -> Resume:
        analysis = dict(table.analysis or {})
        career_level = analysis.pop("career_level", None)
        processing_status = analysis.pop("processing_status", ProcessingStatus.PENDING.value)

        return Resume(
            id=ResumeId(table.id),
            tenant_id=TenantId(table.tenant_id),
            candidate_info=CandidateInfo(**(table.candidate_info or {})),
            parsed_data=ParsedResumeData(**(table.parsed_data or {})),
            analysis=ResumeAnalysis(
                career_level=CareerLevel(career_level) if career_level else None,
                processing_status=ProcessingStatus(processing_status),
                **analysis,
            ),
            status=ResumeStatus(table.status),
            source=ResumeSource(table.source),
            uploaded_by=UserId(table.uploaded_by) if table.uploaded_by else None,
            tags=list(table.tags or []),
            created_at=table.created_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def _values(entity: Resume) -> Dict[str, Any]:
        analysis = asdict(entity.analysis)
        analysis["career_level"] = entity.analysis.career_level.value if entity.analysis.career_level else None
        analysis["processing_status"] = entity.analysis.processing_status.value
        return {
            "tenant_id": entity.tenant_id.value,
            "candidate_email": entity.candidate_info.email,
            "candidate_info": asdict(entity.candidate_info),
            "parsed_data": asdict(entity.parsed_data),
            "analysis": analysis,
            "status": entity.status.value,
            "source": entity.source.value,
            "uploaded_by": entity.uploaded_by.value if entity.uploaded_by else None,
            "tags": list(entity.tags),
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    @staticmethod
    def to_table(entity: Resume) -> ResumeTable:
        return ResumeTable(id=entity.id.value, **ResumeMapper._values(entity))

    @staticmethod
    def update_table_from_domain(table: ResumeTable, entity: Resume) -> ResumeTable:
        for key, value in ResumeMapper._values(entity).items():
            if key != "created_at":
                setattr(table, key, value)
        return table


__all__ = ["ResumeMapper"]
