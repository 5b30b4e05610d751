from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ADVANCE_DELAY_MS = 300
DEFAULT_PUBLIC_URL = "https://itc-survey.app"
QR_SERVICE_URL = "https://api.qrserver.com/v1/create-qr-code/"

# Local development only; Streamlit Cloud reads st.secrets instead.
load_dotenv()


def get_setting(key: str, default: str = "") -> str:
    """st.secrets first, then the environment, then ``default``."""
    try:
        return str(st.secrets[key])
    except Exception:
        # no secrets.toml, or key absent from it
        return str(os.getenv(key, default) or default)


def get_int_setting(key: str, default: int) -> int:
    raw = get_setting(key, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
        return default


def advance_delay_seconds() -> float:
    ms = get_int_setting("ADVANCE_DELAY_MS", DEFAULT_ADVANCE_DELAY_MS)
    return max(0, ms) / 1000.0


def questions_url() -> str:
    return get_setting("QUESTIONS_URL").strip()


def public_survey_url() -> str:
    return get_setting("SURVEY_PUBLIC_URL").strip() or DEFAULT_PUBLIC_URL


def setup_logging() -> None:
    level_name = get_setting("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
