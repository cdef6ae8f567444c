from .feedback import (
    ALL_CORRECT, WORD_LENGTH, FeedbackError, Outcome, Pattern,
    format_pattern, parse_feedback, score_guess,
)
from .constraints import ConstraintState, apply_feedback, filter_candidates, is_consistent
from .scoring import EmptyPoolError, expected_information_gain, partition_pool
from .validation import normalize_word, validate_guess

__all__ = [
    "ALL_CORRECT", "WORD_LENGTH", "FeedbackError", "Outcome", "Pattern",
    "format_pattern", "parse_feedback", "score_guess",
    "ConstraintState", "apply_feedback", "filter_candidates", "is_consistent",
    "EmptyPoolError", "expected_information_gain", "partition_pool",
    "normalize_word", "validate_guess",
]
