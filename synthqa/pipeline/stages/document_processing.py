"""Document processing stage: seed questions for every input document."""

import logging
from typing import Any, Dict, List, Optional

from ...providers.base import BaseCompletionProvider
from ...schemas import Document, ProcessedDocument
from ..base import Stage
from ..context import DOCUMENTS, ERRORS, PROCESSED_DOCUMENTS, PipelineContext
from ..results import ItemResult, complete_text
from ..utils.passages import strip_prompt_header

logger = logging.getLogger(__name__)

MAX_PROMPT_CONTENT = 4000
MAX_SEED_QUESTIONS = 3
FALLBACK_QUESTION = "What is the main topic discussed in this document?"

SEED_QUESTIONS_PROMPT = """Based on the following content, generate 3 basic comprehension questions.
Return only the questions, one per line, without numbering.

Content: {content}"""


def parse_questions(response: str) -> List[str]:
    """Keep trimmed response lines that end in a question mark (at most 3)."""
    questions = [line.strip() for line in response.split("\n")]
    questions = [q for q in questions if q and q.endswith("?")]
    return questions[:MAX_SEED_QUESTIONS]


def _as_document(document: Any) -> Document:
    if isinstance(document, Document):
        return document
    return Document(text=document["text"], metadata=document.get("metadata") or {})


class DocumentProcessingStage(Stage):
    """
    Turns each input document into a ProcessedDocument with seed questions.

    One completion per document. A failed or unusable completion falls back
    to a generic question; any other failure drops the document and is
    recorded in the errors list.
    """

    def __init__(self, llm: Optional[BaseCompletionProvider]):
        self.llm = llm

    @property
    def name(self) -> str:
        return "process_documents"

    async def execute(self, context: PipelineContext) -> Dict[Any, Any]:
        documents = context.get_list(DOCUMENTS)
        errors = context.get_list(ERRORS)
        processed_documents: List[ProcessedDocument] = []

        for index, document in enumerate(documents):
            result = await self._process_document(index, document)
            if result.ok:
                processed_documents.append(result.value)
            else:
                logger.warning(result.error)
                errors.append(result.error)

        logger.info(
            f"Processed {len(processed_documents)}/{len(documents)} documents"
        )
        return {PROCESSED_DOCUMENTS: processed_documents, ERRORS: errors}

    async def _process_document(
        self, index: int, document: Any
    ) -> ItemResult[ProcessedDocument]:
        try:
            doc = _as_document(document)
            questions = await self.extract_seed_questions(doc.text)
            return ItemResult.success(
                ProcessedDocument(
                    id=f"doc_{index}",
                    content=doc.text,
                    metadata=doc.metadata,
                    seed_questions=questions,
                )
            )
        except Exception as e:
            return ItemResult.failure(f"Document processing error: {e}")

    async def extract_seed_questions(self, content: str) -> List[str]:
        main_content = strip_prompt_header(content)
        prompt = SEED_QUESTIONS_PROMPT.format(
            content=main_content[:MAX_PROMPT_CONTENT]
        )

        result = await complete_text(self.llm, prompt)
        if not result.ok:
            logger.warning(f"Seed question extraction failed: {result.error}")
            return [FALLBACK_QUESTION]

        questions = parse_questions(result.value)
        return questions or [FALLBACK_QUESTION]
