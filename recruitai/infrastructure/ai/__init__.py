"""OpenAI-backed adapters for the domain analyzer ports."""

from .interview_analyzer import OpenAIInterviewAnalyzer
from .match_analyzer import OpenAIMatchAnalyzer
from .openai_service import OpenAIService
from .prompt_manager import PromptManager, PromptType
from .resume_analyzer import OpenAIResumeAnalyzer

__all__ = [
    "OpenAIInterviewAnalyzer",
    "OpenAIMatchAnalyzer",
    "OpenAIResumeAnalyzer",
    "OpenAIService",
    "PromptManager",
    "PromptType",
]
