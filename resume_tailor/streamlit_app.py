from typing import Any

import streamlit as st
from pydantic import ValidationError

from resume_tailor.common.llm_clients import OpenAIClient
from resume_tailor.core.config import Settings, get_settings
from resume_tailor.core.logger import logger
from resume_tailor.presentation import (
    APP_NAME,
    BENEFITS,
    download_file_name,
    format_match_score,
    submit_button_label,
)
from resume_tailor.resume_tailoring import AppState, TailorController, TailorService

CONTROLLER_KEY = "tailor_controller"
RESUME_KEY = "resume_text_input"
JOB_KEY = "job_text_input"
LAST_UPLOAD_KEY = "last_resume_upload_id"

# -----------------------------------------------------------------------------
# Helper utilities
# -----------------------------------------------------------------------------


@st.cache_resource(show_spinner=False)
def _init_services() -> dict[str, Any]:
    """Initialise and cache long-lived service instances."""
    settings = get_settings()
    openai_client = OpenAIClient(api_key=settings.OPENAI_API_KEY, temperature=settings.OPENAI_TEMPERATURE)
    tailor_service = TailorService(openai_client=openai_client, settings=settings)
    logger.info(f"{APP_NAME} services initialised (model: {settings.DEFAULT_MODEL_NAME})")
    return {"settings": settings, "tailor": tailor_service}


def _get_controller(tailor_service: TailorService) -> TailorController:
    """Return this session's controller, creating it on first use."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = TailorController(tailor_service)
    return st.session_state[CONTROLLER_KEY]


def _sync_inputs(controller: TailorController) -> None:
    """Copy the text area values into the controller."""
    if controller.status == AppState.LOADING:
        return
    if RESUME_KEY in st.session_state:
        controller.set_resume_text(st.session_state[RESUME_KEY])
    if JOB_KEY in st.session_state:
        controller.set_job_text(st.session_state[JOB_KEY])


def _on_submit(controller: TailorController) -> None:
    _sync_inputs(controller)
    controller.start_submission()


# -----------------------------------------------------------------------------
# Views
# -----------------------------------------------------------------------------


def render_navbar() -> None:
    st.markdown(f"## 📝 :blue[{APP_NAME}]")
    st.divider()


def render_editor(controller: TailorController, settings: Settings) -> None:
    loading = controller.status == AppState.LOADING

    # The controller holds the inputs; widget state is lost whenever the view or
    # the disabled flag changes, so seed it before the widgets are created.
    st.session_state[RESUME_KEY] = controller.resume_text
    st.session_state[JOB_KEY] = controller.job_text

    input_col, explainer_col = st.columns(2, gap="large")

    with input_col:
        with st.container(border=True):
            st.subheader("📄 Your Resume")
            st.caption("Paste your current resume text or upload a .txt file.")
            resume_slot = st.container()

            uploaded = st.file_uploader(
                "Upload Text File",
                type=settings.ALLOWED_UPLOAD_EXTENSIONS,
                key="resume_upload",
                disabled=loading,
            )
            # The uploader keeps returning the same file on every rerun; apply each upload once.
            if uploaded is not None and uploaded.file_id != st.session_state.get(LAST_UPLOAD_KEY):
                controller.load_resume_file(uploaded.getvalue(), uploaded.name)
                st.session_state[RESUME_KEY] = controller.resume_text
                st.session_state[LAST_UPLOAD_KEY] = uploaded.file_id

            with resume_slot:
                st.text_area(
                    "Your Resume",
                    key=RESUME_KEY,
                    height=256,
                    placeholder="Paste your current resume here...",
                    label_visibility="collapsed",
                    disabled=loading,
                    on_change=_sync_inputs,
                    args=(controller,),
                )

        with st.container(border=True):
            st.subheader("💼 Job Description")
            st.caption("Paste the requirements for the role you're applying for.")
            st.text_area(
                "Job Description",
                key=JOB_KEY,
                height=256,
                placeholder="Paste the job requirements, responsibilities, and qualifications here...",
                label_visibility="collapsed",
                disabled=loading,
                on_change=_sync_inputs,
                args=(controller,),
            )

        if controller.error:
            st.error(controller.error, icon="⚠️")

        st.button(
            submit_button_label(loading),
            key="submit",
            type="primary",
            disabled=not controller.can_submit,
            on_click=_on_submit,
            args=(controller,),
            use_container_width=True,
        )

    with explainer_col:
        st.markdown("# Land your dream job with :blue[AI precision.]")
        st.write(
            "Our AI re-writes your resume to highlight exactly what recruiters are looking for, "
            "using real industry keywords and quantified results."
        )
        for benefit in BENEFITS:
            st.markdown(f"✅ **{benefit}**")
        st.info(f"Powered by **{settings.DEFAULT_MODEL_NAME}**: advanced reasoning for your career.", icon="✨")


def render_result(controller: TailorController) -> None:
    result = controller.result
    if result is None:
        return

    st.button("← Back to editor", key="back_to_editor", on_click=controller.reset)

    header_col, score_col = st.columns([3, 1])
    with header_col:
        st.title("Optimization Complete!")
        st.caption("We've tailored your resume to better match the role.")
    with score_col:
        st.metric("Match Score", format_match_score(result.match_score))

    preview_col, insights_col = st.columns([2, 1], gap="large")

    with preview_col:
        with st.container(border=True):
            st.markdown("**PREVIEW**")
            st.markdown(result.tailored_resume)
            with st.expander("📋 Copy to clipboard"):
                st.code(result.tailored_resume, language="markdown")
            st.download_button(
                "⬇️ Download Markdown",
                data=result.tailored_resume,
                file_name=download_file_name(controller.resume.file_name),
                mime="text/markdown",
                key="download_resume",
            )

    with insights_col:
        with st.container(border=True):
            st.subheader("✨ Key AI Optimizations")
            if result.key_changes:
                for change in result.key_changes:
                    st.markdown(f"✅ {change}")
            else:
                st.caption("No key changes were reported.")

        with st.container(border=True):
            st.markdown("#### Next Steps")
            st.write(
                "Review the content for accuracy before sending. "
                "Small personal touches can make a big difference."
            )


def render_footer(settings: Settings) -> None:
    st.divider()
    st.caption(f"© {APP_NAME}. Built with {settings.DEFAULT_MODEL_NAME}.")


# -----------------------------------------------------------------------------
# Streamlit UI
# -----------------------------------------------------------------------------

st.set_page_config(page_title=APP_NAME, page_icon="📝", layout="wide")

try:
    services = _init_services()
except ValidationError as e:
    logger.error(f"Invalid configuration: {e}")
    st.error("Configuration error: set OPENAI_API_KEY in the environment or in a .env file.")
    st.stop()

settings: Settings = services["settings"]
controller = _get_controller(services["tailor"])

render_navbar()

if controller.is_editing:
    render_editor(controller, settings)
else:
    render_result(controller)

render_footer(settings)

if controller.status == AppState.LOADING:
    with st.spinner("Analyzing & re-writing your resume..."):
        controller.run_submission()
    st.rerun()
