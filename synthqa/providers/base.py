"""Base abstract class for text completion providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class CompletionError(Exception):
    """Raised when a provider fails to produce a completion."""


@dataclass
class ProviderConfig:
    """Configuration for a provider."""

    provider_id: str
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 2000
    timeout: float = 60.0
    max_retries: int = 3


class BaseCompletionProvider(ABC):
    """
    Text completion capability used by the pipeline stages.

    Providers own retry and timeout behaviour. Callers treat each
    complete() call as a single attempt that may raise.
    """

    def __init__(self, config: ProviderConfig):
        self.config = config

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Complete a single prompt.

        Args:
            prompt: Full prompt text sent as one user message

        Returns:
            The model's text response

        Raises:
            CompletionError if the provider call fails
        """
        pass

    def validate_key(self) -> bool:
        """
        Validate that the API key is configured.

        Returns:
            True if valid, False otherwise
        """
        return self.config.api_key is not None and len(self.config.api_key) > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.config.model!r})"
