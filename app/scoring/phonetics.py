from typing import List

from app.constants.grading import WORD_CORRECT_THRESHOLD
from app.scoring.models import PhoneticDetail, TextAnalysis
from app.scoring.similarity import similarity
from app.scoring.text import tokenize_words


def notation(text: str) -> str:
    """Placeholder phonetic notation; no real IPA conversion is done."""
    return f"[IPA: {text}]"


def analyze_word(reference_word: str, transcribed_word: str) -> PhoneticDetail:
    reference_notation = notation(reference_word)
    word_similarity = similarity(reference_word.lower(), transcribed_word.lower())
    correct = word_similarity > WORD_CORRECT_THRESHOLD

    return PhoneticDetail(
        word=reference_word,
        transcribed=transcribed_word,
        reference_notation=reference_notation,
        transcribed_notation=notation(transcribed_word),
        similarity=word_similarity,
        correct=correct,
        feedback=None
        if correct
        else f"Try pronouncing '{reference_word}' as /{reference_notation}/",
    )


def annotate(reference_text: str, transcribed_text: str) -> List[PhoneticDetail]:
    """Compares words pairwise by position and returns only the mismatches.

    Alignment is driven by the reference: a missing transcribed word is
    compared as an empty string, and extra transcribed words are ignored.
    """
    reference_words = tokenize_words(reference_text)
    transcribed_words = tokenize_words(transcribed_text)

    details = []
    for i, reference_word in enumerate(reference_words):
        transcribed_word = transcribed_words[i] if i < len(transcribed_words) else ""
        detail = analyze_word(reference_word, transcribed_word)
        if not detail.correct:
            details.append(detail)

    return details


def stress_guide(text: str) -> str:
    return (
        f"IPA: {notation(text)}\n\n"
        "Stress markers:\n"
        "ˈ (primary stress) - emphasize this syllable strongly\n"
        "ˌ (secondary stress) - mild emphasis\n"
    )


def full_analysis(text: str) -> TextAnalysis:
    words = text.split()
    return TextAnalysis(
        text=text,
        notation=notation(text),
        words=words,
        word_notations=[notation(word) for word in words],
        stress_guide=stress_guide(text),
    )
