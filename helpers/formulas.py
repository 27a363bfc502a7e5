"""Pure math formulas - no dependencies, easily testable."""
import math

MAX_DIFFERENCE = 4

RED_LINE_PENALTY = 20
RED_LINE_DIFFERENCE = 2

JUSTIFICATION_FULL_WORDS = 120
EVIDENCE_FULL_UNITS = 4
DEPTH_JUSTIFICATION_WEIGHT = 0.6
DEPTH_EVIDENCE_WEIGHT = 0.4

RECENCY_UNKNOWN = 0.4
RECENCY_FLOOR = 0.3
# (max age in days, score)
RECENCY_STEPS = [
    (90, 1.0),
    (180, 0.85),
    (365, 0.7),
    (540, 0.55),
    (720, 0.45),
]

ENGAGEMENT_WEIGHTS = {
    "coverage": 0.45,
    "depth": 0.25,
    "confidence": 0.2,
    "recency": 0.1,
}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like Math.round: halves go up, not to even."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def agreement_score(user_value: float, party_value: float) -> float:
    """Linear similarity: 1.0=identical, 0.0=maximally opposed."""
    return (MAX_DIFFERENCE - abs(user_value - party_value)) / MAX_DIFFERENCE


def mean(total: float, count: int) -> float:
    """Mean of an accumulated total, 0.0 for no samples."""
    return total / count if count else 0.0


def share(part: int, total: int) -> float:
    """Fraction of total, 0.0 for an empty total."""
    return part / total if total else 0.0


def capped_ratio(count: float, full: float) -> float:
    """count / full capped at 1.0 (full floored at 1)."""
    return min(count / max(full, 1), 1.0)


def word_count(text: str | None) -> int:
    """Whitespace-delimited tokens, 0 for missing text."""
    return len(text.split()) if text else 0


def depth_score(words: int, evidence_units: int) -> float:
    """Evidentiary richness of a position in [0, 1]."""
    justification = min(words / JUSTIFICATION_FULL_WORDS, 1.0)
    evidence = min(evidence_units / EVIDENCE_FULL_UNITS, 1.0)
    return min(DEPTH_JUSTIFICATION_WEIGHT * justification + DEPTH_EVIDENCE_WEIGHT * evidence, 1.0)


def recency_score(age_days: float | None) -> float:
    """Step function over age in days; unknown age scores RECENCY_UNKNOWN."""
    if age_days is None:
        return RECENCY_UNKNOWN

    age = abs(age_days)
    for limit, score in RECENCY_STEPS:
        if age <= limit:
            return score
    return RECENCY_FLOOR


def engagement_index(coverage: float, depth: float, confidence: float, recency: float) -> float:
    """Weighted blend of issue signals scaled to 0-100, one decimal."""
    w = ENGAGEMENT_WEIGHTS
    blended = (
        coverage * w["coverage"]
        + depth * w["depth"]
        + confidence * w["confidence"]
        + recency * w["recency"]
    )
    return round_half_up(blended / sum(w.values()) * 100, 1)


def red_line_penalty(differences: list[float]) -> float:
    """Flat penalty for every sharply opposed red-line answer."""
    return RED_LINE_PENALTY * sum(1 for d in differences if d > RED_LINE_DIFFERENCE)
