"""Resume API schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from recruitai.domain.entities.resume import (
    CareerLevel,
    ProcessingStatus,
    Resume,
    ResumeSource,
    ResumeStatus,
)


class ResumePasteRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, description="Plain-text resume content")
    candidate_name: Optional[str] = Field(default=None, max_length=200)
    candidate_email: Optional[str] = Field(default=None, max_length=255)
    candidate_phone: Optional[str] = Field(default=None, max_length=50)
    skills: List[str] = Field(default_factory=list)
    experience_years: Optional[float] = Field(default=None, ge=0)
    tags: List[str] = Field(default_factory=list)


class ResumeStatusUpdate(BaseModel):
    status: ResumeStatus


class CandidateInfoSchema(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None


class ResumeAnalysisSchema(BaseModel):
    extracted_skills: List[str] = Field(default_factory=list)
    experience_years: Optional[float] = None
    key_strengths: List[str] = Field(default_factory=list)
    education_level: Optional[str] = None
    career_level: Optional[CareerLevel] = None
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    confidence: Optional[float] = None


class ResumeResponse(BaseModel):
    id: str
    tenant_id: str
    candidate_info: CandidateInfoSchema
    skills: List[str]
    analysis: ResumeAnalysisSchema
    status: ResumeStatus
    source: ResumeSource
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, resume: Resume) -> "ResumeResponse":
        info = resume.candidate_info
        analysis = resume.analysis
        return cls(
            id=str(resume.id),
            tenant_id=str(resume.tenant_id),
            candidate_info=CandidateInfoSchema(
                name=info.name, email=info.email, phone=info.phone, linkedin=info.linkedin
            ),
            skills=resume.skills,
            analysis=ResumeAnalysisSchema(
                extracted_skills=analysis.extracted_skills,
                experience_years=analysis.experience_years,
                key_strengths=analysis.key_strengths,
                education_level=analysis.education_level,
                career_level=analysis.career_level,
                processing_status=analysis.processing_status,
                confidence=analysis.confidence,
            ),
            status=resume.status,
            source=resume.source,
            tags=resume.tags,
            created_at=resume.created_at,
            updated_at=resume.updated_at,
        )
