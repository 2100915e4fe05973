from .codec import (
    CODE_LENGTH, NUM_CODES, digit_to_value, value_to_digit,
    code_to_numeral, numeral_to_code, all_numerals, numerals_to_digits,
)
from .scoring import check, check_many, is_solved, Feedback
from .estimator import possible_responses
from .memo import PairMemo
from .constraints import filter_candidates, is_consistent
from .validation import validate_code, validate_feedback, parse_response

__all__ = [
    "CODE_LENGTH", "NUM_CODES", "digit_to_value", "value_to_digit",
    "code_to_numeral", "numeral_to_code", "all_numerals", "numerals_to_digits",
    "check", "check_many", "is_solved", "Feedback",
    "possible_responses", "PairMemo",
    "filter_candidates", "is_consistent",
    "validate_code", "validate_feedback", "parse_response",
]
