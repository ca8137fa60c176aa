"""View-model for the tailoring page.

``TailorController`` owns the two text inputs and the four-state view
(idle → loading → result | error). The Streamlit script keeps one instance per
session in ``st.session_state`` and renders purely from it.

Submission is split in two steps so the page can re-render with the submit
button disabled before the blocking AI request runs:

    if controller.start_submission():   # Idle/Error -> Loading
        controller.run_submission()     # Loading -> Result | Error
"""

from resume_tailor.common.utils import decode_text_upload
from resume_tailor.core.logger import logger

from .models import AppState, JobInput, ResumeInput, TailoringResult
from .tailor_service import TailorService

MISSING_INPUT_MESSAGE = "Please provide both your resume and the job description."
TAILORING_FAILED_MESSAGE = "Failed to tailor resume. Please try again."


class TailorController:
    def __init__(self, tailor_service: TailorService, resume_text: str = "", job_text: str = "") -> None:
        self.tailor_service = tailor_service
        self.resume = ResumeInput(content=resume_text)
        self.job = JobInput(text=job_text)
        self.status = AppState.IDLE
        self.result: TailoringResult | None = None
        self.error: str | None = None

    @property
    def can_submit(self) -> bool:
        """Submissions start only from the editor and never while a request is in flight."""
        return self.status in (AppState.IDLE, AppState.ERROR)

    @property
    def is_editing(self) -> bool:
        """Whether the editor (not the result view) should be shown."""
        return self.status != AppState.RESULT

    @property
    def resume_text(self) -> str:
        return self.resume.content

    @property
    def job_text(self) -> str:
        return self.job.text

    def set_resume_text(self, text: str) -> None:
        """Replace the resume text; the file it came from, if any, is kept."""
        self.resume = self.resume.model_copy(update={"content": text})

    def set_job_text(self, text: str) -> None:
        self.job = JobInput(text=text)

    def load_resume_file(self, data: bytes, file_name: str | None = None) -> None:
        """Overwrite the resume text with the full content of an uploaded text file."""
        self.resume = ResumeInput(content=decode_text_upload(data), file_name=file_name)
        logger.info(f"Loaded resume file {file_name!r} ({len(self.resume_text)} chars)")

    def start_submission(self) -> bool:
        """Move to ``LOADING`` if a request may start.

        Returns False and leaves the status untouched outside the editor
        states. A missing input also returns False, with ``error`` set to the
        validation message.
        """
        if not self.can_submit:
            logger.debug(f"Submission ignored in state {self.status.value}")
            return False

        if not self.resume_text.strip() or not self.job_text.strip():
            self.error = MISSING_INPUT_MESSAGE
            return False

        self.error = None
        self.status = AppState.LOADING
        return True

    def run_submission(self) -> AppState:
        """Run the pending AI request and settle on ``RESULT`` or ``ERROR``."""
        if self.status != AppState.LOADING:
            raise RuntimeError(f"No submission in progress (status: {self.status.value})")

        try:
            result = self.tailor_service.tailor_resume(self.resume_text, self.job_text)
        except Exception:  # noqa: BLE001 - every failure lands in the error view
            logger.exception("Resume tailoring failed")
            self.result = None
            self.error = TAILORING_FAILED_MESSAGE
            self.status = AppState.ERROR
            return self.status

        self.result = result
        self.status = AppState.RESULT
        return self.status

    def submit(self) -> AppState:
        if self.start_submission():
            return self.run_submission()
        return self.status

    def reset(self) -> None:
        """Return to the editor, keeping both inputs."""
        self.status = AppState.IDLE
        self.result = None
        self.error = None
