"""Top-candidate selection over classifier output."""

import math
from collections.abc import Mapping

from btc_sentiment.models import PredictionCandidate


def _confidence_of(candidate: object) -> float:
    """Comparable confidence; -inf when missing, non-numeric or NaN."""
    if isinstance(candidate, Mapping):
        raw = candidate.get("confidence")
    else:
        raw = getattr(candidate, "confidence", None)

    if raw is None or isinstance(raw, bool):
        return -math.inf
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return -math.inf
    return -math.inf if math.isnan(value) else value


def _as_candidate(candidate: object) -> PredictionCandidate:
    """Normalise the winner; an unusable confidence becomes None."""
    if isinstance(candidate, Mapping):
        label = candidate.get("label")
    else:
        label = getattr(candidate, "label", None)
    confidence = _confidence_of(candidate)
    return PredictionCandidate(
        label="" if label is None else str(label),
        confidence=None if confidence == -math.inf else confidence,
    )


def select_top(candidates: object) -> PredictionCandidate | None:
    """Pick the highest-confidence candidate in one linear scan.

    Ties keep the first-seen candidate (strict ``>``). Candidates without a
    usable confidence rank below every scored one; if none is scored, the
    first candidate is returned.

    Args:
        candidates: List (or tuple) of PredictionCandidate objects or
                    mappings with ``label``/``confidence`` keys.

    Returns:
        The winning candidate, or None when there is no usable result
        (empty input, or input that is not a list).
    """
    if not isinstance(candidates, (list, tuple)) or not candidates:
        return None

    best = candidates[0]
    best_confidence = _confidence_of(best)
    for candidate in candidates[1:]:
        confidence = _confidence_of(candidate)
        if confidence > best_confidence:
            best, best_confidence = candidate, confidence

    return _as_candidate(best)
