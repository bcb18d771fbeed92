"""Tests for the OpenAI chat-completion service."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from recruitai.core.config import Settings
from recruitai.infrastructure.ai.openai_service import OpenAIService


@pytest.fixture
def settings():
    return Settings(SECRET_KEY="s" * 32, OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-test")


@pytest.fixture
def openai_service(settings):
    with patch("recruitai.infrastructure.ai.openai_service.AsyncOpenAI"):
        return OpenAIService(settings)


def _completion(content: str):
    response = MagicMock()
    response.choices = [
        MagicMock(message=MagicMock(role="assistant", content=content), finish_reason="stop", index=0)
    ]
    response.usage = MagicMock(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    response.model = "gpt-test"
    response.id = "chatcmpl-1"
    return response


class TestOpenAIServiceInitialization:

    def test_requires_api_key(self):
        with pytest.raises(ValueError):
            OpenAIService(Settings(SECRET_KEY="s" * 32, OPENAI_API_KEY=None))

    def test_client_disables_retries(self, settings):
        with patch("recruitai.infrastructure.ai.openai_service.AsyncOpenAI") as client_cls:
            service = OpenAIService(settings)
            _ = service.client

        kwargs = client_cls.call_args.kwargs
        assert kwargs["max_retries"] == 0
        assert kwargs["api_key"] == "sk-test"
        assert "base_url" not in kwargs

    def test_custom_base_url_is_passed_through(self):
        settings = Settings(
            SECRET_KEY="s" * 32,
            OPENAI_API_KEY="sk-test",
            OPENAI_BASE_URL="http://localhost:11434/v1",
        )
        with patch("recruitai.infrastructure.ai.openai_service.AsyncOpenAI") as client_cls:
            _ = OpenAIService(settings).client

        assert client_cls.call_args.kwargs["base_url"] == "http://localhost:11434/v1"

    @pytest.mark.asyncio
    async def test_create(self, settings):
        with patch("recruitai.infrastructure.ai.openai_service.AsyncOpenAI"):
            service = await OpenAIService.create(settings)
        assert service.get_metrics()["model"] == "gpt-test"


class TestChatCompletion:

    @pytest.mark.asyncio
    async def test_returns_provider_neutral_dict(self, openai_service):
        openai_service._client = MagicMock()
        openai_service._client.chat.completions.create = AsyncMock(return_value=_completion('{"a": 1}'))

        result = await openai_service.chat_completion(
            [{"role": "user", "content": "hi"}],
            response_format={"type": "json_object"},
        )

        assert result["choices"][0]["message"]["content"] == '{"a": 1}'
        assert result["usage"]["total_tokens"] == 15
        call = openai_service._client.chat.completions.create.call_args.kwargs
        assert call["model"] == "gpt-test"
        assert call["response_format"] == {"type": "json_object"}
        assert openai_service.get_metrics()["requests"]["chat"] == 1

    @pytest.mark.asyncio
    async def test_empty_messages_rejected(self, openai_service):
        with pytest.raises(ValueError):
            await openai_service.chat_completion([])

    @pytest.mark.asyncio
    async def test_api_error_is_wrapped(self, openai_service):
        openai_service._client = MagicMock()
        openai_service._client.chat.completions.create = AsyncMock(side_effect=Exception("rate limited"))

        with pytest.raises(RuntimeError, match="rate limited"):
            await openai_service.chat_completion([{"role": "user", "content": "hi"}])

        assert openai_service.get_metrics()["requests"]["errors"] == 1


class TestHealthCheck:

    @pytest.mark.asyncio
    async def test_unhealthy_on_error(self, openai_service):
        openai_service._client = MagicMock()
        openai_service._client.chat.completions.create = AsyncMock(side_effect=Exception("down"))

        health = await openai_service.check_health()

        assert health["status"] == "unhealthy"
        assert "down" in health["error"]

    @pytest.mark.asyncio
    async def test_healthy(self, openai_service):
        openai_service._client = MagicMock()
        openai_service._client.chat.completions.create = AsyncMock(return_value=_completion("pong"))

        health = await openai_service.check_health()

        assert health["status"] == "healthy"
        assert health["model"] == "gpt-test"
