from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List

from app.scoring import grades, phonetics, similarity as similarity_module, text
from app.scoring.exceptions import DegenerateComparison, InvalidInput
from app.scoring.models import (
    GradeInfo,
    GradeReport,
    PhoneticDetail,
    ScoreResult,
    TextAnalysis,
)


def _require_text(value, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be a string, got {type(value).__name__}.")
    return value


def _to_percent(ratio: float) -> int:
    # Half-up rounding on the exact float, so x.5 always rounds away from zero.
    return int(Decimal(ratio * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class PronunciationScorer:
    """Composes normalization, similarity, annotation and grading.

    Every collaborator is a plain callable so tests can swap any stage.
    """

    def __init__(
        self,
        normalize: Callable[[str], str] = text.normalize,
        similarity: Callable[[str, str], float] = similarity_module.similarity,
        annotate: Callable[[str, str], List[PhoneticDetail]] = phonetics.annotate,
        stress_guide: Callable[[str], str] = phonetics.stress_guide,
        full_analysis: Callable[[str], TextAnalysis] = phonetics.full_analysis,
        classify: Callable[[int], GradeInfo] = grades.classify,
        feedback_for_score: Callable[[int], str] = grades.feedback_for_score,
    ):
        self._normalize = normalize
        self._similarity = similarity
        self._annotate = annotate
        self._stress_guide = stress_guide
        self._full_analysis = full_analysis
        self._classify = classify
        self._feedback_for_score = feedback_for_score

    def score(self, reference_text: str, transcribed_text: str) -> ScoreResult:
        reference_text = _require_text(reference_text, "reference_text")
        transcribed_text = _require_text(transcribed_text, "transcribed_text")

        reference_normalized = self._normalize(reference_text)
        transcribed_normalized = self._normalize(transcribed_text)
        if not reference_normalized and not transcribed_normalized:
            raise DegenerateComparison(
                "Reference and transcribed text are both empty after normalization."
            )

        ratio = self._similarity(reference_normalized, transcribed_normalized)
        score = _to_percent(min(max(ratio, 0.0), 1.0))

        return ScoreResult(
            score=score,
            feedback=self._feedback_for_score(score),
            phonetic_details=self._annotate(reference_text, transcribed_text),
            pronunciation_guide=self._stress_guide(reference_text),
        )

    def classify(self, score: int) -> GradeInfo:
        return self._classify(score)

    def grade(self, reference_text: str, transcribed_text: str) -> GradeReport:
        result = self.score(reference_text, transcribed_text)
        return GradeReport(
            score=result.score,
            feedback=result.feedback,
            grade=self.classify(result.score),
            phonetic_details=result.phonetic_details,
            pronunciation_guide=result.pronunciation_guide,
        )

    def get_full_analysis(self, text: str) -> TextAnalysis:
        return self._full_analysis(_require_text(text, "text"))


default_scorer = PronunciationScorer()

score = default_scorer.score
classify = default_scorer.classify
grade = default_scorer.grade
get_full_analysis = default_scorer.get_full_analysis
