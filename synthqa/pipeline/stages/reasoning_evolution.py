"""Reasoning evolution: re-evolve the first questions into reasoning-heavy ones."""

from typing import List, Optional

from ...schemas import EvolutionKind, EvolvedQuestion, ProcessedDocument
from ..context import PROCESSED_DOCUMENTS, PipelineContext
from .evolution_base import EvolutionStage, new_question

REASONING_COMPLEXITY = 8.0
MAX_CANDIDATES = 2
MAX_CONTEXT = 1000

REASONING_PROMPT = """Evolve the following question to require complex reasoning and analysis.
The question should test deep understanding, causal reasoning, or critical evaluation.

Original Question: {question}
Context: {context}

Return only the evolved question:"""


def find_source_content(
    question: EvolvedQuestion, docs: List[ProcessedDocument]
) -> Optional[str]:
    """Content of the first processed document the question was drawn from."""
    for doc in docs:
        if doc.id in question.source_document_ids:
            return doc.content
    return None


class ReasoningEvolutionStage(EvolutionStage):
    """Candidates are the first two accumulated questions, whatever their kind."""

    error_label = "Reasoning"

    @property
    def name(self) -> str:
        return "reasoning_evolution"

    async def evolve(
        self,
        context: PipelineContext,
        evolved_questions: List[EvolvedQuestion],
        errors: List[str],
    ) -> None:
        docs = context.get_list(PROCESSED_DOCUMENTS)
        candidates = evolved_questions[:MAX_CANDIDATES]

        for candidate in candidates:
            source_content = find_source_content(candidate, docs)
            if not source_content:
                continue

            prompt = REASONING_PROMPT.format(
                question=candidate.question, context=source_content[:MAX_CONTEXT]
            )
            evolved = await self.evolve_text(prompt, errors)
            if evolved:
                evolved_questions.append(
                    new_question(
                        evolved,
                        EvolutionKind.REASONING,
                        REASONING_COMPLEXITY,
                        candidate.source_document_ids,
                        original_question=candidate.question,
                        requires_reasoning=True,
                    )
                )
