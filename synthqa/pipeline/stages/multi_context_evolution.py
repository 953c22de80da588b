"""Multi-context evolution: questions that need two adjacent documents."""

import logging
from typing import List

from ...schemas import EvolutionKind, EvolvedQuestion
from ..context import PROCESSED_DOCUMENTS, PipelineContext
from .evolution_base import EvolutionStage, new_question

logger = logging.getLogger(__name__)

MULTI_CONTEXT_COMPLEXITY = 7.0
MAX_CONTEXT_PER_DOCUMENT = 800
MIN_DOCUMENTS = 2
NOT_ENOUGH_DOCUMENTS = "Need at least 2 documents for multi-context evolution"

MULTI_CONTEXT_PROMPT = """Evolve the following question to require synthesis from both contexts.
The evolved question should be answerable only by combining information from both sources.

Original Question: {question}
Context 1: {context1}
Context 2: {context2}

Return only the evolved question:"""


class MultiContextEvolutionStage(EvolutionStage):
    """Pairs each processed document with its immediate successor only."""

    error_label = "Multi-context"

    @property
    def name(self) -> str:
        return "multi_context_evolution"

    async def evolve(
        self,
        context: PipelineContext,
        evolved_questions: List[EvolvedQuestion],
        errors: List[str],
    ) -> None:
        docs = context.get_list(PROCESSED_DOCUMENTS)

        if len(docs) < MIN_DOCUMENTS:
            logger.warning(NOT_ENOUGH_DOCUMENTS)
            errors.append(NOT_ENOUGH_DOCUMENTS)
            return

        for doc1, doc2 in zip(docs, docs[1:]):
            if not doc1.seed_questions:
                continue

            question = doc1.seed_questions[0]
            prompt = MULTI_CONTEXT_PROMPT.format(
                question=question,
                context1=doc1.content[:MAX_CONTEXT_PER_DOCUMENT],
                context2=doc2.content[:MAX_CONTEXT_PER_DOCUMENT],
            )
            evolved = await self.evolve_text(prompt, errors)
            if evolved:
                evolved_questions.append(
                    new_question(
                        evolved,
                        EvolutionKind.MULTI_CONTEXT,
                        MULTI_CONTEXT_COMPLEXITY,
                        [doc1.id, doc2.id],
                        original_question=question,
                        requires_multiple_contexts=True,
                    )
                )
