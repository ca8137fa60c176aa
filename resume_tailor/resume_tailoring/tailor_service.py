from pydantic import ValidationError

from resume_tailor.common.exceptions import InputValidationError, ResponseParseError
from resume_tailor.common.llm_clients import OpenAIClient
from resume_tailor.common.utils import read_file_content, replace_prompt_placeholders
from resume_tailor.core.config import Settings, get_settings
from resume_tailor.core.logger import logger

from .models import TAILORING_RESULT_SCHEMA, TailoringResult

MIN_MATCH_SCORE = 0.0
MAX_MATCH_SCORE = 100.0


def clamp_match_score(result: TailoringResult) -> TailoringResult:
    """Return ``result`` with its match score forced into [0, 100]."""
    score = min(max(result.match_score, MIN_MATCH_SCORE), MAX_MATCH_SCORE)
    if score == result.match_score:
        return result
    logger.warning(f"Match score {result.match_score} outside [0, 100]; clamped to {score}")
    return result.model_copy(update={"match_score": score})


class TailorService:
    """Rewrites a resume against a job description through a single structured AI request."""

    def __init__(self, openai_client: OpenAIClient, settings: Settings | None = None) -> None:
        self.openai_client = openai_client
        self.settings = settings or get_settings()

    def build_prompt(self, resume_text: str, job_text: str) -> str:
        """Fill the tailoring prompt template with both inputs, verbatim."""
        prompt_template = read_file_content(self.settings.tailor_resume_prompt_path)
        return replace_prompt_placeholders(
            prompt_template,
            ORIGINAL_RESUME=resume_text,
            JOB_DESCRIPTION=job_text,
        )

    def tailor_resume(self, resume_text: str, job_text: str) -> TailoringResult:
        """
        Tailor the resume for a job description.

        Raises:
            InputValidationError: If either input is empty.
            AIServiceError: If the AI service call fails.
            EmptyResponseError: If the AI service returns no payload.
            ResponseParseError: If the payload does not match the result schema.
        """
        if not resume_text.strip() or not job_text.strip():
            raise InputValidationError("Both the resume and the job description are required.")

        user_prompt = self.build_prompt(resume_text, job_text)
        model_name = self.settings.DEFAULT_MODEL_NAME
        logger.info(
            f"Tailoring resume with {model_name} (resume: {len(resume_text)} chars, job: {len(job_text)} chars)"
        )

        payload = self.openai_client.get_structured_response(
            user_prompt=user_prompt,
            model_name=model_name,
            schema=TAILORING_RESULT_SCHEMA,
            schema_name="tailoring_result",
        )

        try:
            result = TailoringResult.model_validate(payload)
        except ValidationError as e:
            raise ResponseParseError(f"AI response does not match the tailoring result schema: {e}") from e

        result = clamp_match_score(result)
        logger.info(f"Resume tailored: match score {result.match_score}, {len(result.key_changes)} key changes")
        return result
