"""
OpenAI chat-completion service used by the match, resume and interview analyzers.

- Direct OpenAI or any OpenAI-compatible endpoint via ``OPENAI_BASE_URL``
- No client-side retries: a failed call is reported once and callers fall back
- Request metrics and a lightweight health check
"""

import time
from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion

from recruitai.core.config import Settings, get_settings
from recruitai.domain.interfaces import IAIService

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"


class OpenAIService(IAIService):
    """Thin async wrapper over ``openai.AsyncOpenAI`` chat completions."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[AsyncOpenAI] = None
        self._config = self.settings.get_openai_config()
        self._metrics = {"chat": 0, "errors": 0}

    @classmethod
    async def create(cls, settings: Optional[Settings] = None) -> "OpenAIService":
        """Create OpenAI service with validation and initialization"""
        try:
            service = cls(settings)
            _ = service.client
            logger.info("OpenAI service created successfully", model=service._config["model"])
            return service
        except Exception as e:
            logger.error(f"Failed to create OpenAI service: {e}")
            raise

    @property
    def client(self) -> AsyncOpenAI:
        """Get or create OpenAI client"""
        if self._client is None:
            client_kwargs = {
                "api_key": self._config["api_key"],
                "timeout": self.settings.AI_REQUEST_TIMEOUT,
                "max_retries": 0,
            }
            if self._config["base_url"] and self._config["base_url"] != DEFAULT_BASE_URL:
                client_kwargs["base_url"] = self._config["base_url"]
            self._client = AsyncOpenAI(**client_kwargs)
        return self._client

    async def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Generate a chat completion.

        Args:
            messages: List of message dictionaries
            model: Override model (optional)
            max_tokens: Override max tokens (optional)
            temperature: Override temperature (optional)
            **kwargs: Additional parameters such as ``response_format``

        Returns:
            Chat completion response in a provider-neutral dict
        """
        if not messages:
            raise ValueError("Messages cannot be empty")

        model = model or self._config["model"]
        max_tokens = max_tokens or self._config["max_tokens"]
        temperature = temperature if temperature is not None else self._config["temperature"]

        try:
            start_time = time.time()

            response: ChatCompletion = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs
            )

            self._metrics["chat"] += 1

            result = {
                "choices": [
                    {
                        "message": {
                            "role": choice.message.role,
                            "content": choice.message.content
                        },
                        "finish_reason": choice.finish_reason,
                        "index": choice.index
                    }
                    for choice in response.choices
                ],
                "usage": {
                    "prompt_tokens": response.usage.prompt_tokens if response.usage else 0,
                    "completion_tokens": response.usage.completion_tokens if response.usage else 0,
                    "total_tokens": response.usage.total_tokens if response.usage else 0
                },
                "model": response.model,
                "id": response.id
            }

            logger.debug(
                "Generated chat completion",
                model=model,
                tokens=result["usage"]["total_tokens"],
                duration_ms=int((time.time() - start_time) * 1000)
            )
            return result

        except Exception as e:
            self._metrics["errors"] += 1
            logger.error(f"Failed to generate chat completion: {e}")
            raise RuntimeError(f"Chat completion failed: {e}") from e

    async def check_health(self) -> Dict[str, Any]:
        """Check that the API is reachable with a minimal completion."""
        try:
            start_time = time.time()
            await self.chat_completion(
                [{"role": "user", "content": "ping"}],
                max_tokens=1,
                temperature=0,
            )
            return {
                "status": "healthy",
                "model": self._config["model"],
                "response_time_ms": int((time.time() - start_time) * 1000),
                "metrics": self._metrics.copy(),
                "timestamp": datetime.now().isoformat()
            }
        except Exception as e:
            error_status = {
                "status": "unhealthy",
                "error": str(e),
                "metrics": self._metrics.copy(),
                "timestamp": datetime.now().isoformat()
            }
            logger.error("OpenAI service health check failed", **error_status)
            return error_status

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "requests": self._metrics.copy(),
            "model": self._config["model"],
        }
