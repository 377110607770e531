WORD_CORRECT_THRESHOLD = 0.8

MIN_SCORE = 0
MAX_SCORE = 100

# (lower bound, grade, level, color), checked top-down.
GRADE_BANDS = [
    (95, "A+", "Excellent", "#10b981"),
    (90, "A", "Excellent", "#22c55e"),
    (85, "B+", "Very Good", "#84cc16"),
    (70, "B", "Good", "#eab308"),
    (50, "C", "Fair", "#f97316"),
]
LOWEST_GRADE = ("F", "Poor", "#ef4444")

FEEDBACK_TIERS = [
    (95, "Excellent! Your pronunciation is nearly perfect."),
    (85, "Great job! Your pronunciation is very clear with minor differences."),
    (70, "Good effort! There are some pronunciation differences. Keep practicing."),
    (50, "Fair attempt. Focus on clarity and try to match the reference text more closely."),
]
LOWEST_FEEDBACK = "Keep practicing! Try speaking more slowly and clearly."

# Bucket lower bounds used by the recording statistics.
SCORE_DISTRIBUTION_BANDS = [
    (90, "excellent"),
    (70, "good"),
    (50, "fair"),
]
LOWEST_DISTRIBUTION_BAND = "poor"
