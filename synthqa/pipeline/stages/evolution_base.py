"""Shared pieces of the three question evolution stages."""

import logging
import uuid
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from ...providers.base import BaseCompletionProvider
from ...schemas import EvolutionKind, EvolvedQuestion, QuestionMetadata
from ..base import Stage
from ..context import ERRORS, EVOLVED_QUESTIONS, PipelineContext
from ..results import complete_text, utc_timestamp

logger = logging.getLogger(__name__)


class EvolutionStage(Stage):
    """
    Base for stages that append evolved questions.

    Subclasses implement evolve(), which receives copies of the accumulated
    questions and errors and appends to them. The returned update replaces
    both lists, so earlier questions are always carried forward.
    """

    error_label = "Evolution"

    def __init__(self, llm: Optional[BaseCompletionProvider]):
        self.llm = llm

    async def execute(self, context: PipelineContext) -> Dict[Any, Any]:
        evolved_questions = context.get_list(EVOLVED_QUESTIONS)
        errors = context.get_list(ERRORS)
        before = len(evolved_questions)

        await self.evolve(context, evolved_questions, errors)

        logger.info(f"{self.name}: added {len(evolved_questions) - before} questions")
        return {EVOLVED_QUESTIONS: evolved_questions, ERRORS: errors}

    @abstractmethod
    async def evolve(
        self,
        context: PipelineContext,
        evolved_questions: List[EvolvedQuestion],
        errors: List[str],
    ) -> None:
        """Append new questions (and any errors) to the given lists."""
        pass

    async def evolve_text(self, prompt: str, errors: List[str]) -> Optional[str]:
        """
        Run one evolution call.

        Returns the evolved question text, or None when the call failed
        (recorded in errors) or came back blank (dropped silently).
        """
        result = await complete_text(self.llm, prompt)
        if not result.ok:
            message = f"{self.error_label} evolution error: {result.error}"
            logger.warning(message)
            errors.append(message)
            return None
        return result.value or None


def new_question(
    question: str,
    kind: EvolutionKind,
    complexity_score: float,
    source_document_ids: List[str],
    original_question: str,
    **flags: bool,
) -> EvolvedQuestion:
    return EvolvedQuestion(
        id=str(uuid.uuid4()),
        question=question,
        evolution_kind=kind,
        complexity_score=complexity_score,
        source_document_ids=list(source_document_ids),
        metadata=QuestionMetadata(
            original_question=original_question,
            evolution_timestamp=utc_timestamp(),
            **flags,
        ),
    )
