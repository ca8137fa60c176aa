"""Pure helpers and copy used by the Streamlit page."""

from pathlib import Path

APP_NAME = "ResumeTailor AI"

BENEFITS = [
    "Beat Applicant Tracking Systems (ATS)",
    "Tailor bullet points to job requirements",
    "Highlight high-impact keywords automatically",
    "Maintain a professional, polished tone",
]

SUBMIT_LABEL = "✨ Optimize My Resume"
LOADING_LABEL = "Analyzing & Re-writing..."


def format_match_score(score: float) -> str:
    """Render a score as a percentage without a trailing ``.0``."""
    return f"{score:g}%"


def download_file_name(resume_file_name: str | None) -> str:
    """Name of the markdown download, derived from the uploaded resume if any."""
    if not resume_file_name:
        return "tailored_resume.md"
    stem = Path(resume_file_name).stem or "resume"
    return f"{stem}_tailored.md"


def submit_button_label(loading: bool) -> str:
    return LOADING_LABEL if loading else SUBMIT_LABEL
