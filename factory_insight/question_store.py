from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
import streamlit as st

from questions import (
    DEFAULT_CATALOG,
    BehavioralOption,
    BehavioralQuestion,
    Catalog,
    EngagementQuestion,
    SJTOption,
    SJTQuestion,
)

logger = logging.getLogger(__name__)

SECTIONS = ("engagement", "behavioral", "situational")


class CatalogError(ValueError):
    pass


def _validate_section(name: str, data: Any) -> List[dict]:
    if not isinstance(data, list) or not data:
        raise CatalogError(f"Section '{name}' must be a non-empty list")

    seen = set()
    for q in data:
        if not isinstance(q, dict) or "id" not in q:
            raise CatalogError(f"Each {name} question must have an id")
        if q["id"] in seen:
            raise CatalogError(f"Duplicate question id in {name}: {q['id']}")
        seen.add(q["id"])
    return data


def _behavioral_option(raw: Dict[str, Any]) -> BehavioralOption:
    return BehavioralOption(text=str(raw["text"]), trait=str(raw["trait"]))


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError("Question bank must be an object with engagement/behavioral/situational lists")
    sections = {name: _validate_section(name, data.get(name)) for name in SECTIONS}
    try:
        engagement = tuple(
            EngagementQuestion(
                id=str(q["id"]),
                hindi=str(q.get("hindi", "")),
                english=str(q["english"]),
                dimension=str(q.get("dimension", "")),
            )
            for q in sections["engagement"]
        )
        behavioral = tuple(
            BehavioralQuestion(
                id=str(q["id"]),
                question=str(q["question"]),
                option_a=_behavioral_option(q["optionA"]),
                option_b=_behavioral_option(q["optionB"]),
            )
            for q in sections["behavioral"]
        )
        situational = tuple(
            SJTQuestion(
                id=str(q["id"]),
                scenario=str(q["scenario"]),
                options=tuple(
                    SJTOption(key=str(o["key"]), text=str(o["text"]), alignment=str(o.get("alignment", "")))
                    for o in q["options"]
                ),
            )
            for q in sections["situational"]
        )
    except (KeyError, TypeError) as e:
        raise CatalogError(f"Malformed question record: {e}") from e

    for q in situational:
        if not q.options:
            raise CatalogError(f"Situational question {q.id} has no options")
    return Catalog(engagement=engagement, behavioral=behavioral, situational=situational)


@st.cache_data(show_spinner=False)
def fetch_question_bank(url: str) -> Dict[str, Any]:
    if not url:
        raise RuntimeError("QUESTIONS_URL is not set")

    resp = requests.get(url, timeout=10)
    resp.raise_for_status()
    return resp.json()


def load_catalog(url: str = "") -> Tuple[Catalog, Optional[str]]:
    """Return (catalog, warning). Falls back to the built-in catalog when the remote one is unusable."""
    if not url:
        return DEFAULT_CATALOG, None
    try:
        catalog = catalog_from_dict(fetch_question_bank(url))
    except (requests.RequestException, ValueError) as e:
        # ValueError covers CatalogError and JSON decode errors
        logger.warning("Remote question bank %s unusable, using built-in: %s", url, e)
        return DEFAULT_CATALOG, "Remote question bank unavailable, using built-in questions."
    logger.info(
        "Loaded remote question bank: %d/%d/%d questions",
        len(catalog.engagement), len(catalog.behavioral), len(catalog.situational),
    )
    return catalog, None
