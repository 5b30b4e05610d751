from __future__ import annotations
import logging
import time
from typing import Callable
from urllib.parse import urlencode

import streamlit as st

from config import QR_SERVICE_URL, public_survey_url
from controller import PhaseController
from pdf_export import results_pdf_filename, results_to_pdf_bytes
from questions import LIKERT_ANCHORS, LIKERT_VALUES
from reporting import ResultsSummary, build_results_summary
from survey_state import ProfileValidationError, utc_now_iso

logger = logging.getLogger(__name__)

ADVANCE_POLL_SECONDS = 0.05


def qr_image_url(target: str, size: int = 150) -> str:
    return f"{QR_SERVICE_URL}?{urlencode({'size': f'{size}x{size}', 'data': target})}"


def _progress(controller: PhaseController) -> None:
    current, total = controller.step + 1, controller.total_steps
    st.progress(current / total, text=f"Question {current} of {total}")


def _option_button(label: str, key: str, selected: bool) -> bool:
    return st.button(
        label,
        key=key,
        type="primary" if selected else "secondary",
        use_container_width=True,
    )


# -------------------- WELCOME --------------------
def render_welcome(controller: PhaseController) -> None:
    st.subheader("Employee Pulse Survey")
    st.caption("Integrated Engagement & Behavioral Assessment. Built for ITC Cigarette Division.")

    with st.form("profile"):
        name = st.text_input("Full Name", placeholder="Enter Full Name")
        employee_id = st.text_input("Employee ID", placeholder="e.g. ITC12345")
        if st.form_submit_button("Start Assessment ›", type="primary", use_container_width=True):
            try:
                controller.submit_profile(name, employee_id)
            except ProfileValidationError as e:
                st.error(str(e))
            else:
                st.rerun()

    if st.toggle("Scan for QR Access", key="show_qr"):
        st.image(qr_image_url(public_survey_url()), width=150)
        st.caption("Scan to open the survey on your phone.")


# -------------------- ENGAGEMENT --------------------
def render_engagement(controller: PhaseController) -> None:
    q = controller.current_question
    st.caption(f"Part 1 of 3 · {q.dimension}")
    _progress(controller)

    if q.hindi:
        st.markdown(f"### {q.hindi}")
        st.markdown(f"*{q.english}*")
    else:
        st.markdown(f"### {q.english}")

    selected = controller.current_answer()
    for val in LIKERT_VALUES:
        if _option_button(LIKERT_ANCHORS[val], f"likert_{q.id}_{val}", selected == val):
            controller.select_likert(val)
            st.rerun()

    if st.button("‹ Back", key=f"back_{q.id}", disabled=not controller.can_go_back):
        controller.back()
        st.rerun()


# -------------------- BEHAVIORAL --------------------
def render_behavioral(controller: PhaseController) -> None:
    q = controller.current_question
    st.caption("Part 2 of 3 · Work Style")
    _progress(controller)

    st.markdown(f"### {q.question}")
    selected = controller.current_answer()
    for idx, opt in enumerate(q.options):
        # Both options can carry the same trait, so highlight by trait only when it is unambiguous.
        is_selected = selected == opt.trait and q.options[1 - idx].trait != opt.trait
        if _option_button(opt.text, f"behavioral_{q.id}_{idx}", is_selected):
            controller.select_behavioral(idx)
            st.rerun()


# -------------------- SITUATIONAL --------------------
def render_situational(controller: PhaseController) -> None:
    q = controller.current_question
    st.caption("Part 3 of 3 · Workplace Scenarios")
    _progress(controller)

    st.markdown(f"### {q.scenario}")
    selected = controller.current_answer()
    for opt in q.options:
        if _option_button(f"{opt.key}. {opt.text}", f"sjt_{q.id}_{opt.key}", selected == opt.key):
            controller.select_sjt(opt.key)
            st.rerun()


# -------------------- RESULTS --------------------
def band_bar_html(summary: ResultsSummary) -> str:
    pct = round(summary.progress_fraction * 100)
    return (
        "<div style='background:#f1f5f9;border-radius:999px;height:12px;margin-bottom:8px'>"
        f"<div style='width:{pct}%;background:{summary.band_color};height:12px;border-radius:999px'></div>"
        "</div>"
    )


def _log_pdf_download(session_id: str) -> None:
    logger.info("Results PDF downloaded for session %s", session_id)


def render_results(controller: PhaseController) -> None:
    session = controller.session
    summary = build_results_summary(session)

    st.header("🏅 Assessment Complete!")
    st.write(f"Thank you for your valuable input, {summary.name}.")

    with st.container(border=True):
        st.caption("YOUR ENGAGEMENT PROFILE")
        st.markdown(f"## {summary.average:.1f} / 5.0")
        st.markdown(band_bar_html(summary), unsafe_allow_html=True)
        st.markdown(
            f"<span style='color:{summary.band_color}'><b>{summary.band_label}</b></span>",
            unsafe_allow_html=True,
        )

    with st.container(border=True):
        st.caption("TOP BEHAVIORAL TRAIT")
        st.markdown(f"## {summary.dominant_trait}")
        st.write(summary.narrative)

    with st.container(border=True):
        st.caption("ITC RECOGNITION POINTS")
        c1, c2 = st.columns([1, 3])
        c1.metric("Points", f"+{summary.recognition_points}", label_visibility="collapsed")
        c2.markdown("**Survey Bonus Earned**")
        c2.caption("Redeem these points in the canteen or store.")

    st.download_button(
        "Download my results (PDF)",
        data=results_to_pdf_bytes(summary, session, controller.catalog, generated_at=utc_now_iso()),
        file_name=results_pdf_filename(session),
        mime="application/pdf",
        use_container_width=True,
        key="results_pdf",
        on_click=_log_pdf_download,
        args=(session.session_id,),
    )

    if st.button("Back to Home", type="primary", use_container_width=True, key="back_home"):
        controller.return_home()
        st.rerun()


# -------------------- DEFERRED ADVANCE --------------------
def hold_selection(
    controller: PhaseController,
    placeholder,
    sleep: Callable[[float], None] = time.sleep,
    poll_seconds: float = ADVANCE_POLL_SECONDS,
) -> bool:
    """
    Keep the highlighted choice on screen until the pending advance is due, then fire it.

    The wait is cut into short slices and the placeholder is cleared between
    them. Clearing sends a message to the browser, which is where Streamlit
    stops a run that has a newer click queued, so that click is handled on the
    same question before the old advance can fire.
    """
    while True:
        wait = controller.seconds_until_advance()
        if wait is None:
            return False
        placeholder.empty()
        if wait <= poll_seconds:
            sleep(wait)
            placeholder.empty()
            return controller.flush()
        sleep(poll_seconds)
