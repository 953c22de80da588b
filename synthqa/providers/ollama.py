"""Ollama provider for local model inference."""

import httpx

from .base import BaseCompletionProvider, CompletionError, ProviderConfig


class OllamaProvider(BaseCompletionProvider):
    """Ollama provider for local open-source models."""

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        self.base_url = config.base_url or "http://localhost:11434"

    async def complete(self, prompt: str) -> str:
        """
        Query local Ollama model through the chat endpoint.

        Args:
            prompt: Prompt text

        Returns:
            Response content
        """
        url = f"{self.base_url}/api/chat"

        payload = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "stream": False,
            "options": {
                "temperature": self.config.temperature,
                "num_predict": self.config.max_tokens,
            },
        }

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            raise CompletionError(
                f"Ollama HTTP error: {e.response.status_code} - {e.response.text}"
            ) from e
        except Exception as e:
            raise CompletionError(f"Ollama query failed: {e}") from e

        return data.get("message", {}).get("content", "")

    def validate_key(self) -> bool:
        """Ollama runs locally and needs no API key."""
        return True
