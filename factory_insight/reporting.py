from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from scoring import dominant_traits, engagement_band, mean_engagement
from survey_state import SurveySession

FALLBACK_TRAIT = "Contributor"
RECOGNITION_POINTS = 150


class KnownTrait(str, Enum):
    EXECUTOR = "Executor"
    HARMONIZER = "Harmonizer"
    GUARDIAN = "Guardian"
    INFORMER = "Informer"


TRAIT_NARRATIVES = {
    KnownTrait.EXECUTOR: "goal-oriented and responsible.",
    KnownTrait.HARMONIZER: "a team player and empathetic.",
    KnownTrait.GUARDIAN: "safe, methodical and reliable.",
    KnownTrait.INFORMER: "a communicator and transparent.",
}
DEFAULT_NARRATIVE = "a key contributor to the team."

BAND_LABELS = {
    "high": "High Engagement",
    "moderate": "Moderate Engagement",
    "low": "Low Engagement",
}

# emerald, amber, rose
BAND_COLORS = {
    "high": "#059669",
    "moderate": "#d97706",
    "low": "#e11d48",
}


def known_trait(label: str) -> Optional[KnownTrait]:
    try:
        return KnownTrait(label)
    except ValueError:
        return None


def trait_narrative(label: str) -> str:
    kt = known_trait(label)
    # Labels are free-form; anything outside the known set gets the default.
    quality = TRAIT_NARRATIVES[kt] if kt else DEFAULT_NARRATIVE
    return (
        f"Based on your forced-choice answers, you excel at being a {label.lower()}. "
        f"This means you are naturally {quality}"
    )


@dataclass(frozen=True)
class ResultsSummary:
    name: str
    average: float
    band: str
    band_label: str
    band_color: str
    dominant_trait: str
    narrative: str
    ranked_traits: List[Tuple[str, int]]
    recognition_points: int = RECOGNITION_POINTS

    @property
    def progress_fraction(self) -> float:
        return max(0.0, min(1.0, self.average / 5.0))


def build_results_summary(session: SurveySession) -> ResultsSummary:
    avg = mean_engagement(session.responses)
    ranked = dominant_traits(session.responses)
    trait = ranked[0][0] if ranked else FALLBACK_TRAIT
    band = engagement_band(avg)
    return ResultsSummary(
        name=session.profile.name,
        average=avg,
        band=band,
        band_label=BAND_LABELS[band],
        band_color=BAND_COLORS[band],
        dominant_trait=trait,
        narrative=trait_narrative(trait),
        ranked_traits=ranked,
    )
