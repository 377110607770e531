import pytest

from app.scoring.phonetics import (
    analyze_word,
    annotate,
    full_analysis,
    notation,
    stress_guide,
)


def test_notation_is_placeholder():
    assert notation("hello") == "[IPA: hello]"


def test_analyze_word_marks_mismatch_with_feedback():
    detail = analyze_word("cat", "dog")

    assert detail.word == "cat"
    assert detail.transcribed == "dog"
    assert detail.reference_notation == "[IPA: cat]"
    assert detail.transcribed_notation == "[IPA: dog]"
    assert detail.similarity == 0.0
    assert detail.correct is False
    assert detail.feedback == "Try pronouncing 'cat' as /[IPA: cat]/"


def test_analyze_word_correct_has_no_feedback():
    detail = analyze_word("colour", "color")

    assert detail.similarity == pytest.approx(5 / 6)
    assert detail.correct is True
    assert detail.feedback is None


def test_analyze_word_threshold_is_exclusive():
    detail = analyze_word("house", "horse")

    assert detail.similarity == pytest.approx(0.8)
    assert detail.correct is False


def test_analyze_word_compares_case_insensitively():
    assert analyze_word("Hello", "HELLO").correct is True


def test_annotate_returns_only_mismatches():
    details = annotate("The cat sat", "The dog sat")

    assert len(details) == 1
    assert details[0].word == "cat"
    assert details[0].transcribed == "dog"
    assert details[0].correct is False


def test_annotate_pairs_missing_words_with_empty_string():
    details = annotate("one two three", "one")

    assert [d.word for d in details] == ["two", "three"]
    assert all(d.transcribed == "" for d in details)
    assert all(d.similarity == 0.0 and not d.correct for d in details)


def test_annotate_ignores_extra_transcribed_words():
    assert annotate("one", "one two three") == []


def test_annotate_does_not_resync_after_insertion():
    details = annotate("I like tea", "I really like tea")

    assert [(d.word, d.transcribed) for d in details] == [
        ("like", "really"),
        ("tea", "like"),
    ]


def test_annotate_uses_lowercased_words_and_ignores_punctuation():
    assert annotate("Hello, World!", "hello world") == []


def test_annotate_without_reference_words_is_empty():
    assert annotate("?!", "anything at all") == []


def test_stress_guide_embeds_notation():
    assert stress_guide("hi") == (
        "IPA: [IPA: hi]\n\n"
        "Stress markers:\n"
        "ˈ (primary stress) - emphasize this syllable strongly\n"
        "ˌ (secondary stress) - mild emphasis\n"
    )


def test_full_analysis_lists_word_notations():
    analysis = full_analysis("hello world")

    assert analysis.text == "hello world"
    assert analysis.notation == "[IPA: hello world]"
    assert analysis.words == ["hello", "world"]
    assert analysis.word_notations == ["[IPA: hello]", "[IPA: world]"]
    assert analysis.stress_guide == stress_guide("hello world")


def test_phonetic_detail_is_immutable():
    detail = analyze_word("cat", "dog")

    with pytest.raises(Exception):
        detail.word = "bat"


def test_full_analysis_collapses_repeated_whitespace():
    analysis = full_analysis("hello  world\nagain")

    assert analysis.words == ["hello", "world", "again"]
    assert analysis.word_notations == ["[IPA: hello]", "[IPA: world]", "[IPA: again]"]


def test_annotate_keeps_accented_letters_inside_words():
    details = annotate("café", "cafe")

    assert [d.word for d in details] == ["café"]
    assert details[0].similarity == pytest.approx(0.75)
