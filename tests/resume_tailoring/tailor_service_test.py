"""Tests for the resume tailoring service."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from resume_tailor.common.exceptions import (
    AIServiceError,
    EmptyResponseError,
    InputValidationError,
    ResponseParseError,
)
from resume_tailor.common.llm_clients import OpenAIClient
from resume_tailor.core.config import Settings
from resume_tailor.resume_tailoring.models import TAILORING_RESULT_SCHEMA, TailoringResult
from resume_tailor.resume_tailoring.tailor_service import TailorService, clamp_match_score

RESUME = "Software Engineer with 5 years experience in Python"
JOB = "Looking for a Senior Go Developer with distributed systems experience"

PAYLOAD = {
    "tailoredResume": "# Jane Doe\n\nBackend engineer with 5 years building distributed services.",
    "keyChanges": ["Added distributed systems keywords", "Quantified API latency gains"],
    "matchScore": 72,
}


@pytest.fixture
def settings() -> Settings:
    return Settings(OPENAI_API_KEY="test_openai_key", DEFAULT_MODEL_NAME="gpt-test")


@pytest.fixture
def openai_client() -> MagicMock:
    client = MagicMock(spec=OpenAIClient)
    client.get_structured_response.return_value = dict(PAYLOAD)
    return client


@pytest.fixture
def service(openai_client: MagicMock, settings: Settings) -> TailorService:
    return TailorService(openai_client=openai_client, settings=settings)


class TestBuildPrompt:
    def test_inputs_are_embedded_verbatim(self, service: TailorService) -> None:
        prompt = service.build_prompt(RESUME, JOB)

        assert "expert Executive Career Coach" in prompt
        assert f"ORIGINAL RESUME:\n{RESUME}\n" in prompt
        assert f"JOB DESCRIPTION:\n{JOB}\n" in prompt
        assert "do not invent experiences" in prompt
        assert "{{" not in prompt

    def test_states_all_five_goals(self, service: TailorService) -> None:
        prompt = service.build_prompt(RESUME, JOB)

        for goal in ("1. Optimize for ATS", "2. Quantify achievements", "3. Ensure the summary", "4. Maintain", "5. Return"):
            assert goal in prompt

    def test_uses_configured_prompt_directory(self, openai_client: MagicMock, tmp_path: Path) -> None:
        (tmp_path / "tailor_resume_prompt.txt").write_text("R={{ORIGINAL_RESUME}} J={{JOB_DESCRIPTION}}", encoding="utf-8")
        settings = Settings(OPENAI_API_KEY="test_openai_key", PROMPTS_DIRECTORY=tmp_path)

        prompt = TailorService(openai_client, settings).build_prompt("a", "b")

        assert prompt == "R=a J=b"


class TestTailorResume:
    def test_success_returns_fields_unmodified(self, service: TailorService, openai_client: MagicMock) -> None:
        result = service.tailor_resume(RESUME, JOB)

        assert result == TailoringResult(
            tailored_resume=PAYLOAD["tailoredResume"],
            key_changes=PAYLOAD["keyChanges"],
            match_score=72,
        )
        assert 0 <= result.match_score <= 100

    def test_request_declares_result_schema(self, service: TailorService, openai_client: MagicMock) -> None:
        service.tailor_resume(RESUME, JOB)

        openai_client.get_structured_response.assert_called_once()
        kwargs = openai_client.get_structured_response.call_args.kwargs
        assert RESUME in kwargs["user_prompt"]
        assert JOB in kwargs["user_prompt"]
        assert kwargs["model_name"] == "gpt-test"
        assert kwargs["schema"] is TAILORING_RESULT_SCHEMA
        assert kwargs["schema_name"] == "tailoring_result"

    def test_empty_key_changes_are_valid(self, service: TailorService, openai_client: MagicMock) -> None:
        openai_client.get_structured_response.return_value = {**PAYLOAD, "keyChanges": []}

        assert service.tailor_resume(RESUME, JOB).key_changes == []

    @pytest.mark.parametrize(
        "resume_text, job_text",
        [("", JOB), (RESUME, ""), ("   ", JOB), (RESUME, "\n\t")],
    )
    def test_empty_inputs_rejected_before_any_call(
        self, service: TailorService, openai_client: MagicMock, resume_text: str, job_text: str
    ) -> None:
        with pytest.raises(InputValidationError):
            service.tailor_resume(resume_text, job_text)

        openai_client.get_structured_response.assert_not_called()

    @pytest.mark.parametrize("missing", ["tailoredResume", "keyChanges", "matchScore"])
    def test_missing_field_is_a_parse_error(self, service: TailorService, openai_client: MagicMock, missing: str) -> None:
        payload = dict(PAYLOAD)
        del payload[missing]
        openai_client.get_structured_response.return_value = payload

        with pytest.raises(ResponseParseError, match="does not match the tailoring result schema"):
            service.tailor_resume(RESUME, JOB)

    @pytest.mark.parametrize("score", ["very good", "72", True, float("nan"), float("inf")])
    def test_non_numeric_match_score_is_a_parse_error(
        self, service: TailorService, openai_client: MagicMock, score: object
    ) -> None:
        openai_client.get_structured_response.return_value = {**PAYLOAD, "matchScore": score}

        with pytest.raises(ResponseParseError):
            service.tailor_resume(RESUME, JOB)

    @pytest.mark.parametrize("error", [AIServiceError("boom"), EmptyResponseError(), ResponseParseError("bad json")])
    def test_client_errors_propagate(self, service: TailorService, openai_client: MagicMock, error: Exception) -> None:
        openai_client.get_structured_response.side_effect = error

        with pytest.raises(type(error)):
            service.tailor_resume(RESUME, JOB)

    @pytest.mark.parametrize("score, expected", [(140, 100.0), (-5, 0.0), (100, 100.0), (0, 0.0)])
    def test_match_score_is_clamped(
        self, service: TailorService, openai_client: MagicMock, score: float, expected: float
    ) -> None:
        openai_client.get_structured_response.return_value = {**PAYLOAD, "matchScore": score}

        assert service.tailor_resume(RESUME, JOB).match_score == expected


def test_clamp_match_score_keeps_in_range_result_identical() -> None:
    result = TailoringResult(tailored_resume="x", key_changes=[], match_score=87.5)

    assert clamp_match_score(result) is result
