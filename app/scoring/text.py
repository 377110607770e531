import re
from typing import List

_STRIPPED_PUNCTUATION = re.compile(r"[.,!?]")
_WORD_PATTERN = re.compile(r"\b\w+\b")


def normalize(text: str) -> str:
    """Lowercases, trims, and drops `.`, `,`, `!` and `?`.

    Internal whitespace is left as is.
    """
    return _STRIPPED_PUNCTUATION.sub("", text.lower().strip())


def tokenize_words(text: str) -> List[str]:
    return _WORD_PATTERN.findall(text.lower())
