"""Tests for completion providers and provider construction."""

from unittest.mock import AsyncMock, MagicMock, Mock, patch

import httpx
import pytest

from synthqa.config import GenerationSettings
from synthqa.providers import CompletionError, create_provider
from synthqa.providers.base import ProviderConfig
from synthqa.providers.ollama import OllamaProvider
from synthqa.providers.openai import OpenAIProvider


def openai_config(**overrides):
    values = dict(provider_id="openai", model="gpt-4.1-mini", api_key="test-openai-key")
    values.update(overrides)
    return ProviderConfig(**values)


def chat_response(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 5
    return response


class TestCreateProvider:
    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider: nope"):
            create_provider(GenerationSettings(), provider_id="nope")

    def test_openai_requires_api_key(self):
        with pytest.raises(ValueError, match="OpenAI API key is required"):
            create_provider(GenerationSettings(api_key=None))

    def test_openai_from_settings(self):
        settings = GenerationSettings(api_key="sk-test", model="gpt-4o", temperature=0.1)

        provider = create_provider(settings)

        assert isinstance(provider, OpenAIProvider)
        assert provider.config.model == "gpt-4o"
        assert provider.config.temperature == 0.1

    def test_overrides(self):
        provider = create_provider(
            GenerationSettings(), provider_id="ollama", model="llama3", api_key="user-key"
        )

        assert isinstance(provider, OllamaProvider)
        assert provider.config.model == "llama3"
        assert provider.config.api_key == "user-key"

    def test_loads_settings_when_missing(self, mock_env_vars, tmp_path, monkeypatch):
        monkeypatch.setenv("SYNTHQA_CONFIG", str(tmp_path / "missing.yaml"))

        provider = create_provider()

        assert isinstance(provider, OpenAIProvider)
        assert provider.config.api_key == "test-openai-key"


class TestOpenAIProvider:
    @pytest.mark.asyncio
    async def test_complete_sends_single_user_message(self):
        provider = OpenAIProvider(openai_config(temperature=0.3, max_tokens=100))

        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = chat_response("Evolved question?")

            result = await provider.complete("Prompt text")

        assert result == "Evolved question?"
        kwargs = mock_create.call_args.kwargs
        assert kwargs["model"] == "gpt-4.1-mini"
        assert kwargs["messages"] == [{"role": "user", "content": "Prompt text"}]
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 100

    @pytest.mark.asyncio
    async def test_none_content_becomes_empty_string(self):
        provider = OpenAIProvider(openai_config())

        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = chat_response(None)

            assert await provider.complete("Prompt") == ""

    @pytest.mark.asyncio
    async def test_api_failure_raises_completion_error(self):
        provider = OpenAIProvider(openai_config())

        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = RuntimeError("rate limited")

            with pytest.raises(CompletionError, match="OpenAI query failed: rate limited"):
                await provider.complete("Prompt")

    def test_repr(self):
        assert repr(OpenAIProvider(openai_config())) == "OpenAIProvider(model='gpt-4.1-mini')"


class TestOllamaProvider:
    @pytest.mark.asyncio
    async def test_complete_posts_chat_payload(self):
        provider = OllamaProvider(
            ProviderConfig(provider_id="ollama", model="llama3", temperature=0.5, max_tokens=64)
        )
        response = Mock()
        response.raise_for_status = Mock()
        response.json.return_value = {"message": {"content": "Local answer"}}

        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = response

            result = await provider.complete("Prompt")

        assert result == "Local answer"
        url = mock_post.call_args.args[0]
        payload = mock_post.call_args.kwargs["json"]
        assert url == "http://localhost:11434/api/chat"
        assert payload["model"] == "llama3"
        assert payload["stream"] is False
        assert payload["messages"] == [{"role": "user", "content": "Prompt"}]
        assert payload["options"] == {"temperature": 0.5, "num_predict": 64}

    @pytest.mark.asyncio
    async def test_http_error_raises_completion_error(self):
        provider = OllamaProvider(ProviderConfig(provider_id="ollama", model="llama3"))
        response = Mock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "500 Internal Server Error",
            request=Mock(),
            response=Mock(status_code=500, text="model not loaded"),
        )

        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = response

            with pytest.raises(CompletionError, match="Ollama HTTP error: 500 - model not loaded"):
                await provider.complete("Prompt")

    @pytest.mark.asyncio
    async def test_connection_error_raises_completion_error(self):
        provider = OllamaProvider(
            ProviderConfig(provider_id="ollama", model="llama3", base_url="http://gpu-box:11434")
        )

        with patch("httpx.AsyncClient.post", new_callable=AsyncMock) as mock_post:
            mock_post.side_effect = httpx.ConnectError("connection refused")

            with pytest.raises(CompletionError, match="Ollama query failed: connection refused"):
                await provider.complete("Prompt")

        assert mock_post.call_args.args[0] == "http://gpu-box:11434/api/chat"

    def test_needs_no_key(self):
        assert OllamaProvider(ProviderConfig(provider_id="ollama", model="llama3")).validate_key()
