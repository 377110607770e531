from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Character-level similarity ratio in [0, 1].

    Computed as ``1 - distance / max(len(a), len(b))``. Two empty strings
    are a trivial perfect match and return 1.0.
    """
    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0

    return 1 - levenshtein_distance(a, b) / max_length
