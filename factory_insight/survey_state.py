# survey_state.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENT = "Production"
PROFILE_REQUIRED_MESSAGE = "Please fill in all details to continue."


class Phase(str, Enum):
    WELCOME = "WELCOME"
    ENGAGEMENT = "ENGAGEMENT"
    BEHAVIORAL = "BEHAVIORAL"
    SITUATIONAL = "SITUATIONAL"
    RESULTS = "RESULTS"
    DASHBOARD = "DASHBOARD"


class ProfileValidationError(ValueError):
    pass


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class UserProfile:
    name: str
    employee_id: str
    department: str = DEFAULT_DEPARTMENT


@dataclass
class ResponseStore:
    """Per-phase answers keyed by question id. One entry per id; later answers overwrite."""
    engagement_responses: Dict[str, int] = field(default_factory=dict)
    behavioral_responses: Dict[str, str] = field(default_factory=dict)
    sjt_responses: Dict[str, str] = field(default_factory=dict)

    def record_engagement(self, question_id: str, value: int) -> None:
        if value not in (1, 2, 3, 4, 5):
            raise ValueError(f"Likert value out of range: {value!r}")
        self.engagement_responses[question_id] = int(value)

    def record_behavioral(self, question_id: str, trait: str) -> None:
        self.behavioral_responses[question_id] = trait

    def record_sjt(self, question_id: str, key: str) -> None:
        self.sjt_responses[question_id] = key


@dataclass
class SurveySession:
    profile: UserProfile
    responses: ResponseStore = field(default_factory=ResponseStore)
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: str = field(default_factory=utc_now_iso)


def validate_profile(name: Optional[str], employee_id: Optional[str]) -> UserProfile:
    name = (name or "").strip()
    employee_id = (employee_id or "").strip()
    if not name or not employee_id:
        raise ProfileValidationError(PROFILE_REQUIRED_MESSAGE)
    return UserProfile(name=name, employee_id=employee_id)


def start_session(name: Optional[str], employee_id: Optional[str]) -> SurveySession:
    """Create a fresh session from the welcome form. Raises ProfileValidationError on blanks."""
    profile = validate_profile(name, employee_id)
    session = SurveySession(profile=profile)
    logger.info("Session %s started for employee %s", session.session_id, profile.employee_id)
    return session
