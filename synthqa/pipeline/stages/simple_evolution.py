"""Simple evolution: deepen every seed question of every document."""

from typing import List

from ...schemas import EvolutionKind, EvolvedQuestion
from ..context import PROCESSED_DOCUMENTS, PipelineContext
from .evolution_base import EvolutionStage, new_question

SIMPLE_COMPLEXITY = 5.0
MAX_CONTEXT = 1000

SIMPLE_EVOLUTION_PROMPT = """Evolve the following question to make it more complex and educational.
Add constraints, deepen the inquiry, or increase specificity.

Original Question: {question}
Context: {context}

Return only the evolved question:"""


class SimpleEvolutionStage(EvolutionStage):
    error_label = "Simple"

    @property
    def name(self) -> str:
        return "simple_evolution"

    async def evolve(
        self,
        context: PipelineContext,
        evolved_questions: List[EvolvedQuestion],
        errors: List[str],
    ) -> None:
        for doc in context.get_list(PROCESSED_DOCUMENTS):
            for question in doc.seed_questions:
                prompt = SIMPLE_EVOLUTION_PROMPT.format(
                    question=question, context=doc.content[:MAX_CONTEXT]
                )
                evolved = await self.evolve_text(prompt, errors)
                if evolved:
                    evolved_questions.append(
                        new_question(
                            evolved,
                            EvolutionKind.SIMPLE,
                            SIMPLE_COMPLEXITY,
                            [doc.id],
                            original_question=question,
                        )
                    )
