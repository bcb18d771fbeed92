"""Dependency bundles injected into application services."""

from .analytics_dependencies import AnalyticsDependencies
from .interview_dependencies import InterviewDependencies, InterviewSettings
from .matching_dependencies import MatchingDependencies
from .resume_dependencies import JobDependencies, ResumeDependencies

__all__ = [
    "AnalyticsDependencies",
    "InterviewDependencies",
    "InterviewSettings",
    "JobDependencies",
    "MatchingDependencies",
    "ResumeDependencies",
]
