import pytest

from app.scoring.similarity import levenshtein_distance, similarity


@pytest.mark.parametrize("text", ["a", "hello world", "pronunciation", "  spaced  "])
def test_similarity_of_identical_strings_is_one(text):
    assert similarity(text, text) == 1.0


@pytest.mark.parametrize(
    "a, b",
    [("kitten", "sitting"), ("cat", "dog"), ("abc", ""), ("flaw", "lawn")],
)
def test_similarity_is_symmetric_and_bounded(a, b):
    assert similarity(a, b) == similarity(b, a)
    assert 0.0 <= similarity(a, b) <= 1.0


def test_levenshtein_distance_counts_character_edits():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3


def test_similarity_ratio_uses_longer_length():
    assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_similarity_against_empty_string_is_zero():
    assert similarity("word", "") == 0.0


def test_similarity_of_two_empty_strings_is_one():
    assert similarity("", "") == 1.0
