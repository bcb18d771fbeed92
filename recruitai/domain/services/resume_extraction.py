"""Lightweight extraction of contact details and well-known skills from resume text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

COMMON_SKILLS = (
    "JavaScript", "Python", "Java", "C++", "React", "Node.js", "Angular", "Vue",
    "SQL", "MongoDB", "AWS", "Docker", "Kubernetes", "Git", "TypeScript",
    "HTML", "CSS", "Express", "Django", "Flask", "Spring", "PostgreSQL",
)

_EMAIL_RE = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
_PHONE_RE = re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")


@dataclass
class ExtractedResumeInfo:
    skills: List[str] = field(default_factory=list)
    email: Optional[str] = None
    phone: Optional[str] = None


def extract_basic_info(text: str) -> ExtractedResumeInfo:
    """Find known skills by case-insensitive substring and the first e-mail/phone."""
    lowered = text.lower()
    info = ExtractedResumeInfo(
        skills=[skill for skill in COMMON_SKILLS if skill.lower() in lowered],
    )

    email = _EMAIL_RE.search(text)
    if email:
        info.email = email.group(0)

    phone = _PHONE_RE.search(text)
    if phone:
        info.phone = phone.group(0)

    return info
