"""Pipeline stages for Evol-Instruct question generation."""

from .document_processing import DocumentProcessingStage
from .simple_evolution import SimpleEvolutionStage
from .multi_context_evolution import MultiContextEvolutionStage
from .reasoning_evolution import ReasoningEvolutionStage
from .answer_generation import AnswerGenerationStage
from .context_retrieval import ContextRetrievalStage

__all__ = [
    "DocumentProcessingStage",
    "SimpleEvolutionStage",
    "MultiContextEvolutionStage",
    "ReasoningEvolutionStage",
    "AnswerGenerationStage",
    "ContextRetrievalStage",
]
