from app.constants.grading import (
    FEEDBACK_TIERS,
    GRADE_BANDS,
    LOWEST_FEEDBACK,
    LOWEST_GRADE,
    MAX_SCORE,
    MIN_SCORE,
)
from app.scoring.exceptions import InvalidInput
from app.scoring.models import GradeInfo


def _check_score(score) -> None:
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidInput(f"Score must be an integer, got {type(score).__name__}.")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidInput(
            f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {score}."
        )


def classify(score: int) -> GradeInfo:
    """Maps a 0-100 score to its grade band.

    Bands are keyed by inclusive lower bound and the first match wins.
    """
    _check_score(score)

    for lower_bound, grade, level, color in GRADE_BANDS:
        if score >= lower_bound:
            return GradeInfo(grade=grade, level=level, color=color)

    grade, level, color = LOWEST_GRADE
    return GradeInfo(grade=grade, level=level, color=color)


def feedback_for_score(score: int) -> str:
    _check_score(score)

    for lower_bound, feedback in FEEDBACK_TIERS:
        if score >= lower_bound:
            return feedback
    return LOWEST_FEEDBACK
