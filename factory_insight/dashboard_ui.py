from __future__ import annotations
import logging
from typing import Dict, List

import altair as alt
import pandas as pd
import streamlit as st

from controller import PhaseController
from csv_export import export_filename, session_to_csv_bytes

logger = logging.getLogger(__name__)

# -------------------- Placeholder figures --------------------
# Presentation mock: none of these are derived from collected responses.
KPI_TILES: List[Dict[str, str]] = [
    {"label": "Total Responses", "value": "1,284", "delta": "+12%", "note": ""},
    {"label": "High-Flyer Pool", "value": "84", "delta": "", "note": "Potential Leads"},
    {"label": "Critical Retention", "value": "14%", "delta": "", "note": "Low Score"},
    {"label": "Apprentice Mentors", "value": "32", "delta": "", "note": "Active"},
]

ENGAGEMENT_BY_DIMENSION = [
    ("Organization", 4.2),
    ("Job Role", 3.8),
    ("Vigor", 4.5),
    ("Support", 3.2),
    ("Recognition", 2.8),
]

TRAIT_DISTRIBUTION = [
    ("Executors", 45, "#2563eb"),
    ("Harmonizers", 32, "#059669"),
    ("Guardians", 28, "#ea580c"),
    ("Informers", 15, "#7c3aed"),
]

RECENT_PROFILES = [
    {
        "Employee": "Amit Kumar",
        "ID": "ITC09212",
        "Primary Trait": "Guardian",
        "Status": "Engaged",
        "Action Recommendation": "Consider for Safety Audit team.",
    },
    {
        "Employee": "Sarah Jones",
        "ID": "ITC08831",
        "Primary Trait": "Informer",
        "Status": "Moderate",
        "Action Recommendation": "Enable peer-to-peer feedback role.",
    },
]


def score_color(score: float) -> str:
    if score > 4:
        return "#059669"
    if score > 3:
        return "#2563eb"
    return "#e11d48"


def engagement_frame() -> pd.DataFrame:
    df = pd.DataFrame(ENGAGEMENT_BY_DIMENSION, columns=["name", "score"])
    df["color"] = df["score"].map(score_color)
    return df


def trait_frame() -> pd.DataFrame:
    return pd.DataFrame(TRAIT_DISTRIBUTION, columns=["name", "value", "color"])


def engagement_chart(df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusEnd=6, size=24)
        .encode(
            x=alt.X("score:Q", title="Score Out of 5.0", scale=alt.Scale(domain=[0, 5])),
            y=alt.Y("name:N", title=None, sort=None, axis=alt.Axis(labelLimit=0)),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=[alt.Tooltip("name:N", title="Dimension"), alt.Tooltip("score:Q", title="Score")],
        )
    )


def trait_chart(df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=60, outerRadius=100, padAngle=0.05)
        .encode(
            theta=alt.Theta("value:Q"),
            color=alt.Color(
                "name:N",
                title=None,
                sort=None,
                scale=alt.Scale(domain=list(df["name"]), range=list(df["color"])),
                legend=alt.Legend(orient="bottom"),
            ),
            tooltip=["name:N", "value:Q"],
        )
    )


def _log_export() -> None:
    logger.info("Dashboard CSV export downloaded")


def _render_sidebar(controller: PhaseController) -> None:
    with st.sidebar:
        st.header("📊 Power Insight")
        st.radio(
            "Navigate",
            ["Dashboard", "Manpower Pool", "Shift Filters", "Settings"],
            index=0,
            disabled=True,
            label_visibility="collapsed",
        )
        st.divider()
        if st.button("‹ Exit Admin", key="exit_admin"):
            logger.info("Admin dashboard closed")
            controller.exit_dashboard()
            st.rerun()


def render_dashboard(controller: PhaseController) -> None:
    _render_sidebar(controller)

    head, actions = st.columns([3, 2])
    with head:
        st.header("Manpower BI Dashboard")
        st.caption("Real-time engagement analytics for ITC Factory Operations")
    with actions:
        c1, c2 = st.columns(2)
        with c1:
            if st.button("Refresh", key="dash_refresh"):
                st.rerun()
        with c2:
            st.download_button(
                "Export to Power BI",
                data=session_to_csv_bytes(controller.session, controller.catalog),
                file_name=export_filename(),
                mime="text/csv",
                key="dash_export",
                on_click=_log_export,
            )

    st.divider()

    cols = st.columns(len(KPI_TILES))
    for col, tile in zip(cols, KPI_TILES):
        with col:
            st.metric(tile["label"], tile["value"], tile["delta"] or None)
            if tile["note"]:
                st.caption(tile["note"])

    st.divider()

    left, right = st.columns([3, 2])
    with left:
        st.subheader("Engagement Score by Core Dimension")
        st.altair_chart(engagement_chart(engagement_frame()), use_container_width=True)
    with right:
        st.subheader("Behavioral Personality Split")
        st.altair_chart(trait_chart(trait_frame()), use_container_width=True)

    st.divider()

    st.subheader("Recent Employee Profiles")
    st.dataframe(pd.DataFrame(RECENT_PROFILES), hide_index=True, use_container_width=True)
    st.button("View All Records", disabled=True, key="dash_view_all")
