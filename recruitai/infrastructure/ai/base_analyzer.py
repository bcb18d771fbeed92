"""Shared plumbing for analyzers that call the chat-completion service."""

import json
from typing import Any, Dict, Type, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from recruitai.domain.exceptions import AIAnalysisError
from recruitai.domain.interfaces import IAIService
from recruitai.infrastructure.ai.prompt_manager import PromptManager

logger = structlog.get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _strip_code_fence(content: str) -> str:
    text = content.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def parse_completion(result: Dict[str, Any], schema: Type[ResponseT]) -> ResponseT:
    """Extract the first choice's content and validate it against ``schema``."""
    try:
        content = result["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as exc:
        raise AIAnalysisError("AI response contained no choices") from exc
    if not content:
        raise AIAnalysisError("AI response was empty")

    try:
        payload = json.loads(_strip_code_fence(content))
    except json.JSONDecodeError as exc:
        raise AIAnalysisError(f"AI response is not valid JSON: {exc.msg}") from exc

    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise AIAnalysisError(
            f"AI response failed {schema.__name__} validation ({exc.error_count()} errors)"
        ) from exc


class OpenAIAnalyzerBase:
    """Sends a prompt built by ``PromptManager`` and validates the JSON answer."""

    def __init__(
        self,
        ai_service: IAIService,
        prompt_manager: PromptManager | None = None,
        *,
        json_mode: bool = True,
    ) -> None:
        self._ai_service = ai_service
        self._prompts = prompt_manager or PromptManager()
        self._json_mode = json_mode

    async def _complete(self, prompt: Dict[str, Any], schema: Type[ResponseT]) -> ResponseT:
        kwargs: Dict[str, Any] = {}
        if self._json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            result = await self._ai_service.chat_completion(
                messages=prompt["messages"],
                temperature=prompt["temperature"],
                max_tokens=prompt["max_tokens"],
                **kwargs,
            )
        except Exception as exc:
            logger.warning("AI completion failed", prompt_type=prompt.get("prompt_type"), error=str(exc))
            raise AIAnalysisError(f"AI completion failed: {exc}") from exc
        return parse_completion(result, schema)
