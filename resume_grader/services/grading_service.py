import logging
from typing import Any, Dict

from pydantic import ValidationError

from ..agent import AgentError, AgentManager
from ..prompt import build_conversation
from ..schemas.json import json_schema_factory
from ..schemas.pydantic import GradeResult
from .exceptions import DocumentMissingError, GradeValidationError, GradingError
from .pdf_metadata import extract_author
from .sanitizer import sanitize_grade
from .training_data import TrainingSet

logger = logging.getLogger(__name__)


class GradingService:
    """
    Grades a resume PDF with Gemini using the bundled few-shot examples.

    One instance is created at startup and shared across requests; it holds
    only read-only state.
    """

    def __init__(
        self,
        training_set: TrainingSet,
        agent_manager: AgentManager,
        template_url: str,
        sentinel_author: str = "silver",
    ):
        self.training_set = training_set
        self.agent_manager = agent_manager
        self.template_url = template_url
        self.sentinel_author = sentinel_author
        logger.info(f"Grading service initialized with {len(training_set)} training examples")

    async def grade(self, document: bytes) -> GradeResult:
        if not document:
            raise DocumentMissingError("No resume file uploaded")

        author = extract_author(document)
        logger.debug(f"Resume author metadata: {author!r}")

        turns = build_conversation(
            document,
            author,
            self.training_set,
            template_url=self.template_url,
            sentinel_author=self.sentinel_author,
        )

        try:
            raw_output = await self.agent_manager.run(
                turns,
                response_schema=json_schema_factory.get("grade"),
            )
        except AgentError as e:
            logger.error(f"Model invocation failed: {e}", exc_info=True)
            raise GradingError() from e

        if not raw_output:
            logger.error("Model returned an empty result")
            raise GradingError()

        result = self._validate(raw_output)
        return sanitize_grade(result)

    @staticmethod
    def _validate(raw_output: Dict[str, Any]) -> GradeResult:
        try:
            return GradeResult.model_validate(raw_output)
        except ValidationError as e:
            logger.error(f"Validation error: {e.errors()}")
            details = "; ".join(
                f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise GradeValidationError(f"Model response did not match the grade schema: {details}") from e
