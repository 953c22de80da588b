"""Text completion providers used by the pipeline stages."""

from .base import BaseCompletionProvider, CompletionError, ProviderConfig
from .registry import PROVIDER_MAP, create_provider

__all__ = [
    "BaseCompletionProvider",
    "CompletionError",
    "ProviderConfig",
    "PROVIDER_MAP",
    "create_provider",
]
