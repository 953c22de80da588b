"""Context retrieval stage: heuristic passages per evolved question."""

import logging
from typing import Any, Dict, List

from ...schemas import QuestionContext
from ..base import Stage
from ..context import (
    EVOLVED_QUESTIONS,
    PROCESSED_DOCUMENTS,
    QUESTION_CONTEXTS,
    PipelineContext,
)
from ..utils.passages import MAX_PASSAGES, extract_passages

logger = logging.getLogger(__name__)

PASSAGE_RELEVANCE = 0.8


class ContextRetrievalStage(Stage):
    """Attaches up to three source passages to each evolved question. No LLM calls."""

    @property
    def name(self) -> str:
        return "retrieve_contexts"

    async def execute(self, context: PipelineContext) -> Dict[Any, Any]:
        docs = context.get_list(PROCESSED_DOCUMENTS)
        question_contexts: List[QuestionContext] = []

        for question in context.get_list(EVOLVED_QUESTIONS):
            contexts: List[str] = []
            relevance_scores: List[float] = []
            context_sources: List[str] = []

            for doc in docs:
                if doc.id not in question.source_document_ids:
                    continue
                for passage in extract_passages(question.question, doc.content):
                    contexts.append(passage)
                    relevance_scores.append(PASSAGE_RELEVANCE)
                    context_sources.append(doc.id)

            if contexts:
                question_contexts.append(
                    QuestionContext(
                        question_id=question.id,
                        contexts=contexts[:MAX_PASSAGES],
                        relevance_scores=relevance_scores[:MAX_PASSAGES],
                        context_sources=context_sources[:MAX_PASSAGES],
                    )
                )

        logger.info(f"Retrieved contexts for {len(question_contexts)} questions")
        return {QUESTION_CONTEXTS: question_contexts}
