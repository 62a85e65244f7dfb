from .feedback import (
    FeedbackSymbol, EXACT, DISPLACED, ABSENT, ContractViolation, PatternParseError,
    parse_pattern, format_pattern, to_labels, from_labels, generate_feedback, is_solved,
)
from .constraints import Guess, ConstraintEngine, matches, filter_words
from .validation import validate_guess, parse_submission

__all__ = [
    "FeedbackSymbol", "EXACT", "DISPLACED", "ABSENT",
    "ContractViolation", "PatternParseError",
    "parse_pattern", "format_pattern", "to_labels", "from_labels",
    "generate_feedback", "is_solved",
    "Guess", "ConstraintEngine", "matches", "filter_words",
    "validate_guess", "parse_submission",
]
