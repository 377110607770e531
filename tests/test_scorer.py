import pytest

from app.scoring.exceptions import DegenerateComparison, InvalidInput
from app.scoring.scorer import (
    PronunciationScorer,
    classify,
    get_full_analysis,
    grade,
    score,
)


def test_identical_text_scores_100_with_excellent_feedback():
    result = score("Hello world", "Hello world")

    assert result.score == 100
    assert result.feedback == "Excellent! Your pronunciation is nearly perfect."
    assert result.phonetic_details == []


def test_punctuation_and_case_do_not_affect_score():
    assert score("Hello, World!", "hello world").score == 100


def test_single_word_substitution():
    result = score("The cat sat", "The dog sat")

    assert 50 < result.score < 100
    assert result.score == 73
    assert result.feedback.startswith("Good effort!")
    assert len(result.phonetic_details) == 1
    detail = result.phonetic_details[0]
    assert detail.word == "cat"
    assert detail.transcribed == "dog"
    assert detail.correct is False


def test_pronunciation_guide_uses_original_reference():
    result = score("Hello, World!", "hello world")

    assert result.pronunciation_guide.startswith("IPA: [IPA: Hello, World!]")


def test_half_ratios_round_up():
    # 3 edits over 8 characters is exactly 62.5%.
    assert score("abcdefgh", "abcdexyz").score == 63


def test_empty_transcription_scores_zero():
    result = score("Good morning", "")

    assert result.score == 0
    assert [d.word for d in result.phonetic_details] == ["good", "morning"]


def test_both_empty_after_normalization_is_degenerate():
    with pytest.raises(DegenerateComparison):
        score("?!", "  ...  ")


@pytest.mark.parametrize("reference, transcribed", [(None, "x"), ("x", None), (42, "x")])
def test_non_string_input_is_rejected(reference, transcribed):
    with pytest.raises(InvalidInput):
        score(reference, transcribed)


def test_score_is_idempotent():
    first = score("She sells seashells", "She sell sea shells")
    second = score("She sells seashells", "She sell sea shells")

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_classify_can_be_called_with_precomputed_score():
    assert classify(95).grade == "A+"
    assert classify(95).level == "Excellent"


def test_grade_merges_score_and_classification():
    report = grade("The cat sat", "The dog sat")

    assert report.score == 73
    assert report.grade == classify(73)
    assert report.phonetic_details[0].word == "cat"


def test_get_full_analysis():
    analysis = get_full_analysis("hello world")

    assert analysis.words == ["hello", "world"]
    assert analysis.word_notations == ["[IPA: hello]", "[IPA: world]"]


def test_get_full_analysis_rejects_non_string():
    with pytest.raises(InvalidInput):
        get_full_analysis(None)


def test_scorer_uses_injected_similarity():
    scorer = PronunciationScorer(similarity=lambda _a, _b: 0.5)

    result = scorer.score("abc", "xyz")

    assert result.score == 50
    assert result.feedback.startswith("Fair attempt.")


def test_scorer_clamps_similarity_into_unit_range():
    scorer = PronunciationScorer(similarity=lambda _a, _b: 1.3)

    assert scorer.score("abc", "abc").score == 100
