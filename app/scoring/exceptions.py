class ScoringError(ValueError):
    """Base class for errors raised by the scoring engine."""


class InvalidInput(ScoringError):
    """Text or score argument has the wrong type or is out of range."""


class DegenerateComparison(ScoringError):
    """Both texts are empty after normalization, so there is nothing to grade."""
