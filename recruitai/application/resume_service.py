"""Application service for resume ingestion and management."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List, Optional, Tuple

import structlog

from recruitai.domain.entities.resume import (
    CandidateInfo,
    ParsedResumeData,
    ProcessingStatus,
    Resume,
    ResumeAnalysis,
    ResumeSource,
    ResumeStatus,
)
from recruitai.domain.exceptions import AIAnalysisError, ResumeNotFoundError, ValidationError
from recruitai.domain.services.resume_extraction import extract_basic_info
from recruitai.domain.value_objects import ResumeId, TenantId, UserId

if TYPE_CHECKING:
    from recruitai.application.dependencies.resume_dependencies import ResumeDependencies


logger = structlog.get_logger(__name__)


class ResumeApplicationService:
    """Creates resumes from pasted text and manages them within a tenant."""

    def __init__(self, dependencies: ResumeDependencies) -> None:
        self._deps = dependencies

    async def create_from_text(
        self,
        *,
        tenant_id: str,
        uploaded_by: str,
        resume_text: str,
        candidate_name: Optional[str] = None,
        candidate_email: Optional[str] = None,
        candidate_phone: Optional[str] = None,
        skills: Optional[List[str]] = None,
        experience_years: Optional[float] = None,
        tags: Optional[List[str]] = None,
        source: ResumeSource = ResumeSource.PASTE,
    ) -> Resume:
        """
        Store a pasted resume.

        Known skills, e-mail and phone are extracted from the text and merged
        with explicitly supplied values (explicit values win). When a resume
        analyzer is configured, its output fills the derived attributes; an
        analyzer failure is recorded on the resume rather than raised.
        """
        if not resume_text or not resume_text.strip():
            raise ValidationError("Resume text cannot be empty")

        extracted = extract_basic_info(resume_text)
        merged_skills = list(skills or [])
        for skill in extracted.skills:
            if skill.lower() not in {s.lower() for s in merged_skills}:
                merged_skills.append(skill)

        resume = Resume(
            id=ResumeId.generate(),
            tenant_id=TenantId(tenant_id),
            candidate_info=CandidateInfo(
                name=candidate_name,
                email=candidate_email or extracted.email,
                phone=candidate_phone or extracted.phone,
            ),
            parsed_data=ParsedResumeData(raw_text=resume_text, skills=merged_skills),
            analysis=ResumeAnalysis(
                experience_years=experience_years,
                processing_status=ProcessingStatus.PENDING,
            ),
            source=source,
            uploaded_by=UserId(uploaded_by),
            tags=list(tags or []),
        )

        await self._analyze(resume)
        saved = await self._deps.resume_repository.save(resume)
        logger.info(
            "Resume created",
            tenant_id=tenant_id,
            resume_id=str(saved.id),
            skill_count=len(merged_skills),
            analysis_status=saved.analysis.processing_status.value,
        )
        return saved

    async def _analyze(self, resume: Resume) -> None:
        analyzer = self._deps.resume_analyzer
        if analyzer is None:
            return
        try:
            analysis = await asyncio.wait_for(
                analyzer.analyze(resume.parsed_data.raw_text),
                timeout=self._deps.ai_timeout_seconds,
            )
        except (AIAnalysisError, asyncio.TimeoutError) as exc:
            logger.warning("Resume analysis failed", resume_id=str(resume.id), error=str(exc) or type(exc).__name__)
            resume.mark_analysis_failed(str(exc) or type(exc).__name__)
            return

        if analysis.experience_years is None:
            analysis.experience_years = resume.analysis.experience_years
        analysis.processing_status = ProcessingStatus.COMPLETED
        resume.apply_analysis(analysis)

    async def get_resume(self, *, tenant_id: str, resume_id: str) -> Resume:
        resume = await self._deps.resume_repository.get_by_id(ResumeId(resume_id), TenantId(tenant_id))
        if resume is None:
            raise ResumeNotFoundError(f"Resume {resume_id} not found")
        return resume

    async def list_resumes(
        self,
        *,
        tenant_id: str,
        status: Optional[ResumeStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Resume], int]:
        tenant = TenantId(tenant_id)
        resumes = await self._deps.resume_repository.list_by_tenant(tenant, status=status, limit=limit, offset=offset)
        total = await self._deps.resume_repository.count_by_tenant(tenant, status=status)
        return resumes, total

    async def update_status(self, *, tenant_id: str, resume_id: str, status: ResumeStatus) -> Resume:
        updated = await self._deps.resume_repository.update_status(ResumeId(resume_id), TenantId(tenant_id), status)
        if not updated:
            raise ResumeNotFoundError(f"Resume {resume_id} not found")
        logger.info("Resume status updated", tenant_id=tenant_id, resume_id=resume_id, status=status.value)
        return await self.get_resume(tenant_id=tenant_id, resume_id=resume_id)

    async def delete_resume(self, *, tenant_id: str, resume_id: str) -> None:
        deleted = await self._deps.resume_repository.delete(ResumeId(resume_id), TenantId(tenant_id))
        if not deleted:
            raise ResumeNotFoundError(f"Resume {resume_id} not found")
        logger.info("Resume deleted", tenant_id=tenant_id, resume_id=resume_id)


__all__ = ["ResumeApplicationService"]
