import math
from typing import List, Optional

from app.constants.grading import LOWEST_DISTRIBUTION_BAND, SCORE_DISTRIBUTION_BANDS
from app.storage.recordings import API_VERSION, Recording, RecordingStore

STATISTICS_SAMPLE_SIZE = 1000
SEARCH_SAMPLE_SIZE = 500
TREND_MIN_RECORDINGS = 10
TREND_WINDOW = 5

SEARCHABLE_FIELDS = ("reference_text", "transcribed_text", "feedback")


def _round2(value: float) -> float:
    # Halves round up (toward +inf), not to even.
    return math.floor(value * 100 + 0.5) / 100


def _distribution_band(score: int) -> str:
    for lower_bound, band in SCORE_DISTRIBUTION_BANDS:
        if score >= lower_bound:
            return band
    return LOWEST_DISTRIBUTION_BAND


def summarize_recordings(recordings: List[Recording]) -> dict:
    if not recordings:
        return {
            "total_recordings": 0,
            "average_score": 0,
            "total_users": 0,
            "api_version": API_VERSION,
        }

    scores = [r.get("score") or 0 for r in recordings]
    distribution = {band: 0 for _, band in SCORE_DISTRIBUTION_BANDS}
    distribution[LOWEST_DISTRIBUTION_BAND] = 0
    for score in scores:
        distribution[_distribution_band(score)] += 1

    return {
        "total_recordings": len(recordings),
        "average_score": _round2(sum(scores) / len(scores)),
        "total_users": len({r.get("user_id") for r in recordings}),
        "score_distribution": distribution,
        "api_version": API_VERSION,
    }


def summarize_user_recordings(recordings: List[Recording]) -> dict:
    """Aggregates one user's recordings, which must be ordered newest first."""
    if not recordings:
        return {
            "total_recordings": 0,
            "average_score": 0,
            "best_score": 0,
            "worst_score": 0,
            "improvement_trend": None,
        }

    scores = [r.get("score") or 0 for r in recordings]

    improvement_trend: Optional[float] = None
    if len(scores) >= TREND_MIN_RECORDINGS:
        recent_avg = sum(scores[:TREND_WINDOW]) / TREND_WINDOW
        old_avg = sum(scores[-TREND_WINDOW:]) / TREND_WINDOW
        improvement_trend = _round2(recent_avg - old_avg)

    return {
        "total_recordings": len(recordings),
        "average_score": _round2(sum(scores) / len(scores)),
        "best_score": max(scores),
        "worst_score": min(scores),
        "improvement_trend": improvement_trend,
        "recent_recordings": recordings[:TREND_WINDOW],
    }


def get_statistics(store: RecordingStore) -> dict:
    return summarize_recordings(store.list(STATISTICS_SAMPLE_SIZE))


def get_user_statistics(store: RecordingStore, user_id: str) -> dict:
    return summarize_user_recordings(
        store.query("user_id", user_id, STATISTICS_SAMPLE_SIZE)
    )


def search_recordings(store: RecordingStore, query: str, limit: int = 50) -> List[Recording]:
    """Case-insensitive substring search over text and feedback fields."""
    needle = query.lower()
    matches = [
        r
        for r in store.list(SEARCH_SAMPLE_SIZE)
        if any(needle in (r.get(field) or "").lower() for field in SEARCHABLE_FIELDS)
    ]
    return matches[:limit]
