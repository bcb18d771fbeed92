"""Pure domain representation of candidate resumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from recruitai.domain.value_objects import ResumeId, TenantId, UserId


class ResumeStatus(str, Enum):
    """Candidate lifecycle status carried on the resume."""

    NEW = "new"
    SCREENING = "screening"
    MATCHED = "matched"
    INTERVIEWING = "interviewing"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"
    ARCHIVED = "archived"


class ResumeSource(str, Enum):
    UPLOAD = "upload"
    PASTE = "paste"
    EMAIL = "email"
    API = "api"
    REFERRAL = "referral"


class CareerLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"


class ProcessingStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class CandidateInfo:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    location: Optional[str] = None


@dataclass
class ParsedResumeData:
    """Structured content extracted from the resume text."""

    raw_text: str = ""
    summary: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience: List[Dict[str, Any]] = field(default_factory=list)
    education: List[Dict[str, Any]] = field(default_factory=list)
    certifications: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)


@dataclass
class ResumeAnalysis:
    """Derived attributes produced by resume analysis."""

    extracted_skills: List[str] = field(default_factory=list)
    experience_years: Optional[float] = None
    key_strengths: List[str] = field(default_factory=list)
    education_level: Optional[str] = None
    career_level: Optional[CareerLevel] = None
    processing_status: ProcessingStatus = ProcessingStatus.PENDING
    confidence: Optional[float] = None
    error: Optional[str] = None


@dataclass
class Resume:
    """Aggregate root for a candidate resume within a tenant."""

    id: ResumeId
    tenant_id: TenantId
    candidate_info: CandidateInfo = field(default_factory=CandidateInfo)
    parsed_data: ParsedResumeData = field(default_factory=ParsedResumeData)
    analysis: ResumeAnalysis = field(default_factory=ResumeAnalysis)
    status: ResumeStatus = ResumeStatus.NEW
    source: ResumeSource = ResumeSource.PASTE
    uploaded_by: Optional[UserId] = None
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def skills(self) -> List[str]:
        """Skills used for matching: the parsed (entered plus extracted) list."""
        return list(self.parsed_data.skills)

    @property
    def experience_years(self) -> Optional[float]:
        return self.analysis.experience_years

    @property
    def candidate_name(self) -> Optional[str]:
        return self.candidate_info.name

    def change_status(self, status: ResumeStatus) -> None:
        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def apply_analysis(self, analysis: ResumeAnalysis) -> None:
        self.analysis = analysis
        self.updated_at = datetime.now(timezone.utc)

    def mark_analysis_failed(self, error: str) -> None:
        self.analysis.processing_status = ProcessingStatus.FAILED
        self.analysis.error = error
        self.updated_at = datetime.now(timezone.utc)
