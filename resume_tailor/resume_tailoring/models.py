from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from resume_tailor.common.schemas.openai_schema import OpenAISchema


class AppState(str, Enum):
    """The four views of the application; exactly one is active at a time."""

    IDLE = "IDLE"
    LOADING = "LOADING"
    RESULT = "RESULT"
    ERROR = "ERROR"


class ResumeInput(BaseModel):
    """Resume text as typed or read from an uploaded file."""

    model_config = ConfigDict(frozen=True)

    content: str
    file_name: str | None = None


class JobInput(BaseModel):
    """Job description the resume is tailored against."""

    model_config = ConfigDict(frozen=True)

    text: str


class TailoringResult(BaseModel):
    """Structured answer of the AI service.

    Field aliases are the wire names declared in ``TAILORING_RESULT_SCHEMA``;
    the Python names are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tailored_resume: str = Field(alias="tailoredResume")
    key_changes: list[str] = Field(alias="keyChanges")
    match_score: float = Field(alias="matchScore", strict=True, allow_inf_nan=False)


TAILORING_RESULT_SCHEMA = OpenAISchema(
    properties={
        "tailoredResume": {
            "type": "string",
            "description": "The complete rewritten resume in professional Markdown format.",
        },
        "keyChanges": {
            "type": "array",
            "items": {"type": "string"},
            "description": "A list of key strategic changes made to the resume.",
        },
        "matchScore": {
            "type": "number",
            "description": "An estimated match score from 0 to 100 between the new resume and the job requirements.",
        },
    },
    required=["tailoredResume", "keyChanges", "matchScore"],
)
