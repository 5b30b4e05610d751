# controller.py
"""
Phase controller for the survey flow.

State is ``(phase, step)``. Each selection writes the answer into the
session's ResponseStore immediately and schedules one deferred advance.
The advance fires once ``advance_delay`` seconds have elapsed on the
injected clock, so the respondent sees the highlighted choice before the
view changes. A newer selection replaces the pending advance.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from questions import (
    DEFAULT_CATALOG,
    BehavioralQuestion,
    Catalog,
    EngagementQuestion,
    SJTQuestion,
)
from survey_state import Phase, SurveySession, start_session

logger = logging.getLogger(__name__)

DEFAULT_ADVANCE_DELAY = 0.3

Question = Union[EngagementQuestion, BehavioralQuestion, SJTQuestion]

VALID_TRANSITIONS: Dict[Phase, List[Phase]] = {
    Phase.WELCOME: [Phase.ENGAGEMENT, Phase.DASHBOARD],
    Phase.ENGAGEMENT: [Phase.BEHAVIORAL, Phase.DASHBOARD],
    Phase.BEHAVIORAL: [Phase.SITUATIONAL, Phase.DASHBOARD],
    Phase.SITUATIONAL: [Phase.RESULTS, Phase.DASHBOARD],
    Phase.RESULTS: [Phase.WELCOME, Phase.DASHBOARD],
    Phase.DASHBOARD: [Phase.WELCOME],
}

NEXT_PHASE: Dict[Phase, Phase] = {
    Phase.ENGAGEMENT: Phase.BEHAVIORAL,
    Phase.BEHAVIORAL: Phase.SITUATIONAL,
    Phase.SITUATIONAL: Phase.RESULTS,
}


class InvalidTransition(ValueError):
    pass


def is_valid_transition(current: Phase, nxt: Phase) -> bool:
    if current not in VALID_TRANSITIONS:
        return False
    return nxt in VALID_TRANSITIONS[current]


@dataclass(frozen=True)
class PendingAdvance:
    phase: Phase
    step: int
    due_at: float


class PhaseController:
    def __init__(
        self,
        catalog: Catalog = DEFAULT_CATALOG,
        advance_delay: float = DEFAULT_ADVANCE_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.catalog = catalog
        self.advance_delay = max(0.0, float(advance_delay))
        self._clock = clock
        self.phase: Phase = Phase.WELCOME
        self.step: int = 0
        self.session: Optional[SurveySession] = None
        self.pending: Optional[PendingAdvance] = None

    # -------------------- READ SIDE --------------------
    def questions_for(self, phase: Phase) -> Sequence[Question]:
        if phase == Phase.ENGAGEMENT:
            return self.catalog.engagement
        if phase == Phase.BEHAVIORAL:
            return self.catalog.behavioral
        if phase == Phase.SITUATIONAL:
            return self.catalog.situational
        return ()

    @property
    def questions(self) -> Sequence[Question]:
        return self.questions_for(self.phase)

    @property
    def total_steps(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Optional[Question]:
        qs = self.questions
        if not qs:
            return None
        return qs[self.step]

    @property
    def can_go_back(self) -> bool:
        return self.phase == Phase.ENGAGEMENT and self.step > 0

    def answered_ids(self, phase: Phase) -> Dict[str, object]:
        if self.session is None:
            return {}
        r = self.session.responses
        if phase == Phase.ENGAGEMENT:
            return r.engagement_responses
        if phase == Phase.BEHAVIORAL:
            return r.behavioral_responses
        if phase == Phase.SITUATIONAL:
            return r.sjt_responses
        return {}

    def current_answer(self):
        q = self.current_question
        if q is None:
            return None
        return self.answered_ids(self.phase).get(q.id)

    def seconds_until_advance(self) -> Optional[float]:
        if self.pending is None:
            return None
        return max(0.0, self.pending.due_at - self._clock())

    # -------------------- TRANSITIONS --------------------
    def _transition(self, nxt: Phase) -> None:
        if not is_valid_transition(self.phase, nxt):
            raise InvalidTransition(f"Invalid transition: {self.phase.value} -> {nxt.value}")
        logger.info("Phase %s -> %s", self.phase.value, nxt.value)
        self.phase = nxt
        self.step = 0
        self.pending = None

    def submit_profile(self, name: Optional[str], employee_id: Optional[str]) -> SurveySession:
        """Welcome -> Engagement. ProfileValidationError leaves the state untouched."""
        if self.phase != Phase.WELCOME:
            raise InvalidTransition(f"Profile can only be submitted from WELCOME, not {self.phase.value}")
        session = start_session(name, employee_id)
        self.session = session
        self._transition(Phase.ENGAGEMENT)
        return session

    def _require(self, phase: Phase) -> Question:
        if self.phase != phase:
            raise InvalidTransition(f"Expected phase {phase.value}, currently {self.phase.value}")
        if self.session is None:
            raise InvalidTransition("No active session")
        return self.questions[self.step]

    def select_likert(self, value: int) -> None:
        q = self._require(Phase.ENGAGEMENT)
        self.session.responses.record_engagement(q.id, value)
        self._schedule_advance()

    def select_behavioral(self, option_index: int) -> str:
        q = self._require(Phase.BEHAVIORAL)
        trait = q.options[option_index].trait
        self.session.responses.record_behavioral(q.id, trait)
        self._schedule_advance()
        return trait

    def select_sjt(self, key: str) -> None:
        q = self._require(Phase.SITUATIONAL)
        if key not in q.option_keys():
            raise ValueError(f"Unknown option {key!r} for {q.id}")
        self.session.responses.record_sjt(q.id, key)
        self._schedule_advance()

    def back(self) -> bool:
        """Engagement only; floored at step 0. Cancels any pending advance."""
        if not self.can_go_back:
            return False
        self.pending = None
        self.step -= 1
        return True

    def open_dashboard(self) -> None:
        if self.phase == Phase.DASHBOARD:
            return
        logger.info("Admin dashboard opened from %s", self.phase.value)
        self._transition(Phase.DASHBOARD)

    def exit_dashboard(self) -> None:
        if self.phase != Phase.DASHBOARD:
            raise InvalidTransition(f"Not in DASHBOARD (currently {self.phase.value})")
        self.reset()

    def return_home(self) -> None:
        if self.phase != Phase.RESULTS:
            raise InvalidTransition(f"Back to home is only offered from RESULTS, not {self.phase.value}")
        self.reset()

    def reset(self) -> None:
        """Full reset: fresh state, no session."""
        if self.phase != Phase.WELCOME:
            logger.info("Phase %s -> %s (reset)", self.phase.value, Phase.WELCOME.value)
        self.phase = Phase.WELCOME
        self.step = 0
        self.session = None
        self.pending = None

    # -------------------- DEFERRED ADVANCE --------------------
    def _schedule_advance(self) -> None:
        self.pending = PendingAdvance(
            phase=self.phase,
            step=self.step,
            due_at=self._clock() + self.advance_delay,
        )

    def tick(self) -> bool:
        """Fire the pending advance if its delay has elapsed."""
        if self.pending is None or self._clock() < self.pending.due_at:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Fire the pending advance now, regardless of the delay."""
        pending, self.pending = self.pending, None
        if pending is None:
            return False
        if pending.phase != self.phase or pending.step != self.step:
            logger.debug("Dropping stale advance for %s step %d", pending.phase.value, pending.step)
            return False
        self._advance()
        return True

    def _first_unanswered(self) -> Optional[int]:
        answered = self.answered_ids(self.phase)
        for idx, q in enumerate(self.questions):
            if q.id not in answered:
                return idx
        return None

    def _advance(self) -> None:
        if self.step < self.total_steps - 1:
            self.step += 1
            return
        missing = self._first_unanswered()
        if missing is not None:
            logger.warning("Phase %s incomplete, returning to step %d", self.phase.value, missing)
            self.step = missing
            return
        self._transition(NEXT_PHASE[self.phase])
