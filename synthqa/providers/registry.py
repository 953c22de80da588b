"""Provider construction from generation settings."""

import logging
from typing import Dict, Optional, Type

from ..config import GenerationSettings, load_settings
from .base import BaseCompletionProvider, ProviderConfig
from .ollama import OllamaProvider
from .openai import OpenAIProvider

logger = logging.getLogger(__name__)

PROVIDER_MAP: Dict[str, Type[BaseCompletionProvider]] = {
    "openai": OpenAIProvider,
    "ollama": OllamaProvider,
}


def create_provider(
    settings: Optional[GenerationSettings] = None,
    provider_id: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> BaseCompletionProvider:
    """
    Create a completion provider.

    Args:
        settings: Generation settings (loaded from env/YAML when omitted)
        provider_id: Override for settings.provider
        api_key: Override for settings.api_key (e.g. a user supplied key)
        model: Override for settings.model

    Returns:
        Provider instance

    Raises:
        ValueError for unknown providers or missing credentials
    """
    settings = settings or load_settings()
    provider_id = provider_id or settings.provider

    provider_class = PROVIDER_MAP.get(provider_id)
    if not provider_class:
        raise ValueError(f"Unknown provider: {provider_id}")

    config = ProviderConfig(
        provider_id=provider_id,
        model=model or settings.model,
        api_key=api_key or settings.api_key,
        base_url=settings.base_url,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
    )

    provider = provider_class(config)
    logger.info(f"Loaded provider: {provider_id} ({config.model})")
    return provider
