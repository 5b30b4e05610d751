from __future__ import annotations

import csv
import logging
from datetime import date, datetime, timezone
from io import StringIO
from typing import List, Optional

from questions import DEFAULT_CATALOG, Catalog
from scoring import mean_engagement, top_trait
from survey_state import ResponseStore, SurveySession

logger = logging.getLogger(__name__)

FIXED_COLUMNS = ["EmployeeName", "EmployeeID", "EngagementAvg", "DominantTrait"]
FILENAME_PREFIX = "ITC_Survey_PowerBI_Export_"


def export_header(catalog: Catalog = DEFAULT_CATALOG) -> List[str]:
    return FIXED_COLUMNS + catalog.engagement_ids


def export_row(session: Optional[SurveySession], catalog: Catalog = DEFAULT_CATALOG) -> List[str]:
    """One row for the current session; placeholders when no profile or answers exist."""
    responses = session.responses if session else ResponseStore()
    profile = session.profile if session else None
    answers = responses.engagement_responses
    return [
        (profile.name if profile else "") or "Anonymous",
        (profile.employee_id if profile else "") or "N/A",
        f"{mean_engagement(responses):.2f}",
        top_trait(responses) or "Unknown",
        *[str(answers[qid]) if qid in answers else "" for qid in catalog.engagement_ids],
    ]


def export_filename(today: Optional[date] = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"{FILENAME_PREFIX}{today.isoformat()}.csv"


def session_to_csv(session: Optional[SurveySession], catalog: Catalog = DEFAULT_CATALOG) -> str:
    # QUOTE_MINIMAL keeps plain values bare and quotes any field holding a comma, quote or newline.
    buf = StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(export_header(catalog))
    writer.writerow(export_row(session, catalog))
    return buf.getvalue()


def session_to_csv_bytes(session: Optional[SurveySession], catalog: Catalog = DEFAULT_CATALOG) -> bytes:
    data = session_to_csv(session, catalog).encode("utf-8")
    logger.debug(
        "CSV export built for session %s (%d bytes)",
        session.session_id if session else "-",
        len(data),
    )
    return data
