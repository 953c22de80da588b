"""Evol-Instruct pipeline orchestration."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..providers.base import BaseCompletionProvider
from ..schemas import (
    EvolutionKind,
    EvolutionKindCounts,
    EvolvedQuestion,
    GenerationMetadata,
    GenerationResult,
)
from .base import GraphRunner
from .context import (
    ERRORS,
    EVOLVED_QUESTIONS,
    QUESTION_ANSWERS,
    QUESTION_CONTEXTS,
    PipelineContext,
)
from .results import utc_timestamp
from .stages import (
    AnswerGenerationStage,
    ContextRetrievalStage,
    DocumentProcessingStage,
    MultiContextEvolutionStage,
    ReasoningEvolutionStage,
    SimpleEvolutionStage,
)

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The only error raised to callers of EvolInstructPipeline.run()."""


class EvolInstructPipeline:
    """
    Evol-Instruct pipeline that orchestrates all stages.

    Pipeline flow:
    1. Document processing (seed questions per document)
    2. Simple evolution (deepen each seed question)
    3. Multi-context evolution (adjacent document pairs)
    4. Reasoning evolution (first two evolved questions)
    5. Answer generation (one grounded answer per question)
    6. Context retrieval (heuristic passages per question)

    Each instance owns its own runner, so separate instances can run
    concurrently without sharing state.
    """

    def __init__(self, llm: Optional[BaseCompletionProvider]):
        # With llm=None every completion is recorded as a per-item failure
        self.llm = llm
        self.graph = self._build_graph()

    def _build_graph(self) -> GraphRunner:
        return GraphRunner.chain(
            [
                DocumentProcessingStage(self.llm),
                SimpleEvolutionStage(self.llm),
                MultiContextEvolutionStage(self.llm),
                ReasoningEvolutionStage(self.llm),
                AnswerGenerationStage(self.llm),
                ContextRetrievalStage(),
            ]
        )

    async def run(self, documents: Sequence[Any]) -> GenerationResult:
        """
        Run the complete pipeline.

        Args:
            documents: Document models or {"text", "metadata"} dicts

        Returns:
            GenerationResult with questions, answers, contexts and metadata

        Raises:
            GenerationError if the graph invocation or result shaping fails
        """
        logger.info(f"Starting generation for {len(documents)} documents")
        context = PipelineContext.initial(list(documents))

        try:
            final_context = await self.graph.invoke(context)
            result = self._extract_results(final_context)
        except Exception as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"Generation failed: {message}")
            raise GenerationError(f"Generation failed: {message}") from e

        logger.info(
            f"Generation complete: {result.generation_metadata.total_questions} "
            f"questions, {len(result.generation_metadata.processing_errors)} errors"
        )
        return result

    def _extract_results(self, context: PipelineContext) -> GenerationResult:
        evolved_questions = context.get_list(EVOLVED_QUESTIONS)

        return GenerationResult(
            evolved_questions=evolved_questions,
            question_answers=context.get_list(QUESTION_ANSWERS),
            question_contexts=context.get_list(QUESTION_CONTEXTS),
            generation_metadata=GenerationMetadata(
                total_questions=len(evolved_questions),
                evolution_kind_counts=count_kinds(evolved_questions),
                processing_errors=context.get_list(ERRORS),
                generation_timestamp=utc_timestamp(),
            ),
        )

    def stage_names(self) -> List[str]:
        return self.graph.order()


def count_kinds(questions: Sequence[EvolvedQuestion]) -> EvolutionKindCounts:
    counts: Dict[str, int] = {kind.value: 0 for kind in EvolutionKind}
    for question in questions:
        counts[EvolutionKind(question.evolution_kind).value] += 1
    return EvolutionKindCounts(**counts)


def filter_result(
    result: GenerationResult,
    max_questions: Optional[int] = None,
    evolution_kinds: Optional[Iterable[EvolutionKind]] = None,
) -> GenerationResult:
    """
    Trim a finished result to the caller's generation options.

    The question limit is applied first, then the kind filter. Answers and
    contexts are kept only for surviving question ids, and the question
    totals are recounted. Errors and the timestamp are left unchanged.

    Args:
        result: Result returned by EvolInstructPipeline.run()
        max_questions: Keep at most this many questions, in order (None = all)
        evolution_kinds: Keep only these kinds (None or empty = all)

    Returns:
        A new GenerationResult; the input is not modified
    """
    questions = list(result.evolved_questions)

    if max_questions is not None and max_questions < len(questions):
        questions = questions[:max_questions]

    if evolution_kinds:
        allowed = {EvolutionKind(kind) for kind in evolution_kinds}
        questions = [q for q in questions if EvolutionKind(q.evolution_kind) in allowed]

    kept_ids = {q.id for q in questions}
    metadata = result.generation_metadata.model_copy(
        update={
            "total_questions": len(questions),
            "evolution_kind_counts": count_kinds(questions),
        }
    )

    return GenerationResult(
        evolved_questions=questions,
        question_answers=[a for a in result.question_answers if a.question_id in kept_ids],
        question_contexts=[c for c in result.question_contexts if c.question_id in kept_ids],
        generation_metadata=metadata,
    )


async def run_evol_pipeline(
    documents: Sequence[Any], llm: Optional[BaseCompletionProvider] = None
) -> GenerationResult:
    """
    Convenience function to run the pipeline once.

    Args:
        documents: Input documents
        llm: Completion provider (built from settings when omitted)

    Returns:
        GenerationResult
    """
    if llm is None:
        from ..providers.registry import create_provider

        llm = create_provider()

    pipeline = EvolInstructPipeline(llm)
    return await pipeline.run(documents)
