"""Answer generation stage."""

import logging
from typing import Any, Dict, List, Optional

from ...providers.base import BaseCompletionProvider
from ...schemas import EvolvedQuestion, ProcessedDocument, QuestionAnswer
from ..base import Stage
from ..context import (
    ERRORS,
    EVOLVED_QUESTIONS,
    PROCESSED_DOCUMENTS,
    QUESTION_ANSWERS,
    PipelineContext,
)
from ..results import complete_text

logger = logging.getLogger(__name__)

ANSWER_CONFIDENCE = 0.85
MAX_COMBINED_CONTEXT = 2000

ANSWER_PROMPT = """Answer the following question based on the provided contexts.
Provide a comprehensive answer using only the information in the contexts.

Question: {question}
Contexts: {contexts}

Answer:"""


def source_contents(
    question: EvolvedQuestion, docs: List[ProcessedDocument]
) -> List[str]:
    return [doc.content for doc in docs if doc.id in question.source_document_ids]


class AnswerGenerationStage(Stage):
    """One grounded answer per evolved question, written as a fresh list."""

    def __init__(self, llm: Optional[BaseCompletionProvider]):
        self.llm = llm

    @property
    def name(self) -> str:
        return "generate_answers"

    async def execute(self, context: PipelineContext) -> Dict[Any, Any]:
        docs = context.get_list(PROCESSED_DOCUMENTS)
        errors = context.get_list(ERRORS)
        question_answers: List[QuestionAnswer] = []

        for question in context.get_list(EVOLVED_QUESTIONS):
            contexts = source_contents(question, docs)
            if not contexts:
                continue

            combined = "\n\n".join(contexts)[:MAX_COMBINED_CONTEXT]
            prompt = ANSWER_PROMPT.format(question=question.question, contexts=combined)

            result = await complete_text(self.llm, prompt)
            if not result.ok:
                message = f"Answer generation error: {result.error}"
                logger.warning(message)
                errors.append(message)
                continue

            if result.value:
                question_answers.append(
                    QuestionAnswer(
                        question_id=question.id,
                        answer=result.value,
                        confidence_score=ANSWER_CONFIDENCE,
                        source_document_ids=list(question.source_document_ids),
                    )
                )

        logger.info(f"Generated {len(question_answers)} answers")
        return {QUESTION_ANSWERS: question_answers, ERRORS: errors}
