import logging
import sys
from pathlib import Path

# -------------------------------------------------------------------
# Ensure local modules are importable on Streamlit Cloud
# -------------------------------------------------------------------
APP_DIR = Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

import streamlit as st

from config import advance_delay_seconds, questions_url, setup_logging
from controller import PhaseController
from dashboard_ui import render_dashboard
from question_store import load_catalog
from survey_state import Phase
from survey_ui import (
    hold_selection,
    render_behavioral,
    render_engagement,
    render_results,
    render_situational,
    render_welcome,
)

logger = logging.getLogger("factory_insight")


# -------------------- SESSION --------------------
def get_controller() -> PhaseController:
    """One controller per browser session; the catalog is resolved when it is created."""
    if "controller" not in st.session_state:
        catalog, warning = load_catalog(questions_url())
        st.session_state["controller"] = PhaseController(
            catalog=catalog,
            advance_delay=advance_delay_seconds(),
        )
        st.session_state["catalog_warning"] = warning
        logger.info("New browser session, advance delay %.2fs", st.session_state["controller"].advance_delay)
    return st.session_state["controller"]


# -------------------- CONFIG --------------------
_phase = getattr(st.session_state.get("controller"), "phase", Phase.WELCOME)
st.set_page_config(
    page_title="ITC Factory Insight",
    page_icon="📋",
    layout="wide" if _phase == Phase.DASHBOARD else "centered",
)
setup_logging()

controller = get_controller()


# -------------------- HEADER --------------------
def render_header():
    left, right = st.columns([5, 1])
    with left:
        st.markdown("#### 📋 ITC Factory Insight")
        st.caption("Cigarette Division")
    with right:
        if st.button("📊", key="open_admin", help="Admin dashboard"):
            controller.open_dashboard()
            st.rerun()
    st.divider()


def render_footer():
    st.divider()
    st.caption("ITC LIMITED · Digital Buddy System • Privacy Assured")


# -------------------- ROUTING --------------------
if controller.phase == Phase.DASHBOARD:
    render_dashboard(controller)
    st.stop()

render_header()

warning = st.session_state.get("catalog_warning")
if warning and controller.phase == Phase.WELCOME:
    st.warning(warning, icon="⚠️")

if controller.phase == Phase.WELCOME:
    render_welcome(controller)
elif controller.phase == Phase.ENGAGEMENT:
    render_engagement(controller)
elif controller.phase == Phase.BEHAVIORAL:
    render_behavioral(controller)
elif controller.phase == Phase.SITUATIONAL:
    render_situational(controller)
else:
    render_results(controller)

render_footer()

# The selection is on screen now; hold it for the advance delay, then move on.
if hold_selection(controller, st.empty()):
    st.rerun()
