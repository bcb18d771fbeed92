"""Provider utilities for AI-related services.

When no OpenAI key is configured the analyzer getters return ``None`` and the
application services run their deterministic fallbacks instead.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import structlog

from recruitai.core.config import get_settings
from recruitai.infrastructure.ai.interview_analyzer import OpenAIInterviewAnalyzer
from recruitai.infrastructure.ai.match_analyzer import OpenAIMatchAnalyzer
from recruitai.infrastructure.ai.openai_service import OpenAIService
from recruitai.infrastructure.ai.prompt_manager import PromptManager
from recruitai.infrastructure.ai.resume_analyzer import OpenAIResumeAnalyzer

logger = structlog.get_logger(__name__)

_openai_service: Optional[OpenAIService] = None
_prompt_manager: Optional[PromptManager] = None

_openai_lock = asyncio.Lock()
_prompt_lock = asyncio.Lock()


async def get_openai_service() -> Optional[OpenAIService]:
    """Return singleton OpenAI service, or ``None`` when AI is not configured."""
    global _openai_service

    if _openai_service is not None:
        return _openai_service

    async with _openai_lock:
        if _openai_service is not None:
            return _openai_service

        settings = get_settings()
        if not settings.is_openai_configured():
            logger.info("OpenAI not configured, AI analysis will use fallbacks")
            return None

        _openai_service = await OpenAIService.create(settings)
        return _openai_service


async def get_prompt_manager() -> PromptManager:
    """Return prompt manager instance."""
    global _prompt_manager

    if _prompt_manager is not None:
        return _prompt_manager

    async with _prompt_lock:
        if _prompt_manager is None:
            _prompt_manager = PromptManager()
        return _prompt_manager


async def get_match_analyzer() -> Optional[OpenAIMatchAnalyzer]:
    service = await get_openai_service()
    if service is None:
        return None
    return OpenAIMatchAnalyzer(service, await get_prompt_manager())


async def get_interview_analyzer() -> Optional[OpenAIInterviewAnalyzer]:
    service = await get_openai_service()
    if service is None:
        return None
    return OpenAIInterviewAnalyzer(service, await get_prompt_manager())


async def get_resume_analyzer() -> Optional[OpenAIResumeAnalyzer]:
    service = await get_openai_service()
    if service is None:
        return None
    return OpenAIResumeAnalyzer(service, await get_prompt_manager())


async def reset_ai_services() -> None:
    """Reset cached AI services (useful for tests)."""
    global _openai_service, _prompt_manager
    async with _openai_lock:
        _openai_service = None
    async with _prompt_lock:
        _prompt_manager = None


__all__ = [
    "get_interview_analyzer",
    "get_match_analyzer",
    "get_openai_service",
    "get_prompt_manager",
    "get_resume_analyzer",
    "reset_ai_services",
]
