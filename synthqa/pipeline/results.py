"""Per-item results for catch-and-continue processing inside stages."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from ..providers.base import BaseCompletionProvider

T = TypeVar("T")


@dataclass(frozen=True)
class ItemResult(Generic[T]):
    """Either a value or an error message for one document or question."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ItemResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ItemResult[T]":
        return cls(error=error)


NO_PROVIDER = "No completion provider configured"


async def complete_text(
    llm: Optional[BaseCompletionProvider], prompt: str
) -> ItemResult[str]:
    """
    Run one completion and capture its outcome.

    The value is the trimmed response text; any exception raised by the
    provider becomes the error message, as does a missing provider.
    """
    if llm is None:
        return ItemResult.failure(NO_PROVIDER)

    try:
        response = await llm.complete(prompt)
    except Exception as e:
        return ItemResult.failure(str(e) or e.__class__.__name__)
    return ItemResult.success((response or "").strip())


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()
