"""Records produced and consumed by the generation pipeline."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class EvolutionKind(str, Enum):
    SIMPLE = "simple"
    MULTI_CONTEXT = "multi_context"
    REASONING = "reasoning"


class Document(BaseModel):
    """Input document handed to the pipeline by the upload layer."""

    text: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ProcessedDocument(BaseModel):
    id: str = Field(..., description="Stable id of the form doc_<index>")
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    seed_questions: List[str] = Field(default_factory=list)


class QuestionMetadata(BaseModel):
    evolution_timestamp: str
    original_question: Optional[str] = None
    requires_reasoning: Optional[bool] = None
    requires_multiple_contexts: Optional[bool] = None


class EvolvedQuestion(BaseModel):
    id: str
    question: str
    evolution_kind: EvolutionKind
    complexity_score: float
    source_document_ids: List[str] = Field(..., min_length=1)
    metadata: QuestionMetadata


class QuestionAnswer(BaseModel):
    question_id: str
    answer: str
    confidence_score: float
    source_document_ids: List[str]


class QuestionContext(BaseModel):
    question_id: str
    contexts: List[str] = Field(default_factory=list)
    relevance_scores: List[float] = Field(default_factory=list)
    context_sources: List[str] = Field(default_factory=list)


class EvolutionKindCounts(BaseModel):
    simple: int = 0
    multi_context: int = 0
    reasoning: int = 0


class GenerationMetadata(BaseModel):
    total_questions: int
    evolution_kind_counts: EvolutionKindCounts
    processing_errors: List[str] = Field(default_factory=list)
    generation_timestamp: str


class GenerationResult(BaseModel):
    """The full contract returned to callers of the pipeline."""

    evolved_questions: List[EvolvedQuestion] = Field(default_factory=list)
    question_answers: List[QuestionAnswer] = Field(default_factory=list)
    question_contexts: List[QuestionContext] = Field(default_factory=list)
    generation_metadata: GenerationMetadata
