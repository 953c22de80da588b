"""Pipeline context for carrying state through stages."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class ContextKey:
    """Type-safe context key identifier."""

    name: str

    def __str__(self) -> str:
        return self.name


# State keys shared by all stages
DOCUMENTS = ContextKey("documents")
PROCESSED_DOCUMENTS = ContextKey("processed_documents")
EVOLVED_QUESTIONS = ContextKey("evolved_questions")
QUESTION_ANSWERS = ContextKey("question_answers")
QUESTION_CONTEXTS = ContextKey("question_contexts")
ERRORS = ContextKey("errors")

STATE_KEYS = [
    DOCUMENTS,
    PROCESSED_DOCUMENTS,
    EVOLVED_QUESTIONS,
    QUESTION_ANSWERS,
    QUESTION_CONTEXTS,
    ERRORS,
]


@dataclass
class PipelineContext:
    """
    Immutable state that flows through pipeline stages.

    Stages return partial updates; merge() produces a new context where
    each updated key is replaced in full. Lists are never deep-merged.
    """

    _data: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: ContextKey, default: Any = None) -> Any:
        """Get value from context."""
        return self._data.get(str(key), default)

    def get_list(self, key: ContextKey) -> List[Any]:
        """Get a copy of a list value (empty list if unset)."""
        return list(self._data.get(str(key)) or [])

    def set(self, key: ContextKey, value: Any) -> "PipelineContext":
        """Return a new context with the key set."""
        new_data = self._data.copy()
        new_data[str(key)] = value
        return PipelineContext(_data=new_data)

    def merge(self, partial: Mapping[Any, Any]) -> "PipelineContext":
        """Return a new context with every key of partial replacing the old value."""
        new_data = self._data.copy()
        for key, value in partial.items():
            new_data[str(key)] = value
        return PipelineContext(_data=new_data)

    def has(self, key: ContextKey) -> bool:
        """Check if key exists in context."""
        return str(key) in self._data

    def keys(self) -> list[str]:
        """Get all data keys."""
        return list(self._data.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to a plain dict."""
        return self._data.copy()

    @classmethod
    def initial(cls, documents: List[Any]) -> "PipelineContext":
        """Fresh state for one run: the documents plus empty collections."""
        context = cls()
        for key in STATE_KEYS:
            context = context.set(key, [])
        return context.set(DOCUMENTS, list(documents))
