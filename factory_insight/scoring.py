from collections import Counter
from typing import List, Optional, Tuple

from survey_state import ResponseStore

HIGH_ENGAGEMENT = 4.0
MODERATE_ENGAGEMENT = 3.0


def mean_engagement(responses: ResponseStore) -> float:
    vals = list(responses.engagement_responses.values())
    return sum(vals) / len(vals) if vals else 0.0


def dominant_traits(responses: ResponseStore) -> List[Tuple[str, int]]:
    # Counter keeps first-insertion order and sorted() is stable,
    # so equal counts stay in the order the label was first stored.
    counts = Counter(responses.behavioral_responses.values())
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)


def top_trait(responses: ResponseStore) -> Optional[str]:
    ranked = dominant_traits(responses)
    return ranked[0][0] if ranked else None


def engagement_band(avg: float) -> str:
    if avg >= HIGH_ENGAGEMENT:
        return "high"
    if avg >= MODERATE_ENGAGEMENT:
        return "moderate"
    return "low"
