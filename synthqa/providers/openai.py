"""OpenAI chat completions provider."""

import logging
from typing import List, cast

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam

from .base import BaseCompletionProvider, CompletionError, ProviderConfig

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseCompletionProvider):
    """Provider for the OpenAI API or any OpenAI-compatible endpoint."""

    def __init__(self, config: ProviderConfig):
        super().__init__(config)
        if not self.validate_key():
            raise ValueError("OpenAI API key is required")

        self.client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )

    async def complete(self, prompt: str) -> str:
        """
        Send the prompt as a single user message.

        Args:
            prompt: Prompt text

        Returns:
            Response content (empty string when the model returned none)
        """
        messages = [{"role": "user", "content": prompt}]

        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                messages=cast(List[ChatCompletionMessageParam], messages),
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            raise CompletionError(f"OpenAI query failed: {e}") from e

        content = (
            response.choices[0].message.content
            if response.choices and response.choices[0].message
            else ""
        )

        usage = response.usage
        if usage:
            logger.debug(
                f"OpenAI {self.config.model}: {usage.prompt_tokens} prompt / "
                f"{usage.completion_tokens} completion tokens"
            )

        return content or ""
