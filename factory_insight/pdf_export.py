from __future__ import annotations
import logging
from io import BytesIO
from typing import Any, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, ListFlowable, ListItem

from questions import DEFAULT_CATALOG, Catalog
from reporting import ResultsSummary
from survey_state import SurveySession

logger = logging.getLogger(__name__)


def _safe(s: Any) -> str:
    if s is None:
        return ""
    return escape(str(s))


def results_pdf_filename(session: SurveySession) -> str:
    emp = "".join(ch for ch in session.profile.employee_id if ch.isalnum()) or "employee"
    return f"ITC_Survey_Results_{emp}.pdf"


def results_to_pdf_bytes(
    summary: ResultsSummary,
    session: SurveySession,
    catalog: Catalog = DEFAULT_CATALOG,
    generated_at: Optional[str] = None,
) -> bytes:
    """One-page results slip for the respondent: score, band, top trait and their answers."""
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=0.8*inch,
        rightMargin=0.8*inch,
        topMargin=0.8*inch,
        bottomMargin=0.8*inch,
        title="ITC Factory Insight: Assessment Results",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ITCTitle",
        parent=styles["Title"],
        textColor=colors.HexColor("#111827"),
        spaceAfter=12,
    )
    h_style = ParagraphStyle(
        "ITCH2",
        parent=styles["Heading2"],
        textColor=colors.HexColor("#1d4ed8"),
        spaceBefore=10,
        spaceAfter=6,
    )
    b_style = ParagraphStyle(
        "ITCBody",
        parent=styles["BodyText"],
        leading=14,
        spaceAfter=6,
    )
    small_style = ParagraphStyle(
        "ITCSmall",
        parent=styles["BodyText"],
        fontSize=9,
        leading=11,
        textColor=colors.HexColor("#6b7280"),
        spaceAfter=6,
    )

    flow = []
    flow.append(Paragraph("Assessment Complete", title_style))

    profile = session.profile
    meta_lines = [
        f"<b>Name:</b> {_safe(profile.name)}",
        f"<b>Employee ID:</b> {_safe(profile.employee_id)}",
        f"<b>Department:</b> {_safe(profile.department)}",
    ]
    if generated_at:
        meta_lines.append(f"<b>Generated:</b> {_safe(generated_at)}")
    flow.append(Paragraph("<br/>".join(meta_lines), small_style))
    flow.append(Spacer(1, 6))

    def add_list(items: List[str]):
        lf = ListFlowable(
            [ListItem(Paragraph(x, b_style), leftIndent=14) for x in items],
            bulletType="bullet",
            leftIndent=14,
        )
        flow.append(lf)

    flow.append(Paragraph("Your Engagement Profile", h_style))
    flow.append(Paragraph(f"<b>{summary.average:.1f}</b> / 5.0 ({_safe(summary.band_label)})", b_style))

    flow.append(Paragraph("Top Behavioral Trait", h_style))
    flow.append(Paragraph(f"<b>{_safe(summary.dominant_trait)}</b>", b_style))
    flow.append(Paragraph(_safe(summary.narrative), b_style))
    if summary.ranked_traits:
        add_list([f"{_safe(label)}: {count}" for label, count in summary.ranked_traits])

    flow.append(Paragraph("Engagement answers", h_style))
    answers = session.responses.engagement_responses
    rows = []
    for q in catalog.engagement:
        v = answers.get(q.id)
        rows.append(f"{_safe(q.english)} <font color='#6b7280'>{v if v is not None else 'not answered'}</font>")
    add_list(rows)

    flow.append(Paragraph("ITC Recognition Points", h_style))
    flow.append(Paragraph(
        f"<b>+{summary.recognition_points}</b> Survey Bonus Earned. Redeem these points in the canteen or store.",
        b_style,
    ))

    doc.build(flow)
    logger.debug("Results PDF built for session %s", session.session_id)
    return buf.getvalue()
