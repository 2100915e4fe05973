"""
Lightweight input validation.

This module answers two questions:
  - "Is this a well-formed code?"            (validate_code)
  - "Is this a feedback a scoring can give?" (validate_feedback)

and turns a human reply into a feedback pair (parse_response). A reply is
two digits, `good` first and `miss` second, e.g. "31" or "3 1". Anything
else, or a pair no scoring can produce, is rejected with ValueError so the
caller can ask again instead of poisoning the candidate set.
"""

from __future__ import annotations

from .codec import CODE_LENGTH, DIGITS
from .scoring import Feedback

_SEPARATORS = " ,/-:"


def validate_code(code: str) -> bool:
    """Return True if `code` is exactly CODE_LENGTH digit characters."""
    if not isinstance(code, str):
        return False
    return len(code) == CODE_LENGTH and all(ch in DIGITS for ch in code)


def validate_feedback(good: int, miss: int) -> bool:
    """
    Return True if (good, miss) can come out of a scoring.

    Notes:
      - (5, 1) is impossible: two codes differing in exactly one position
        cannot hold the same digits.
    """
    for v in (good, miss):
        if isinstance(v, bool) or not isinstance(v, int):
            return False
    if good < 0 or miss < 0 or good + miss > CODE_LENGTH:
        return False
    return (good, miss) != (CODE_LENGTH - 1, 1)


def parse_response(text: str) -> Feedback:
    """
    Parse a reply such as "20", "2 0" or "2,0" into (good, miss).

    Raises:
      ValueError if the reply is malformed or not a possible feedback.
    """
    if not isinstance(text, str):
        raise ValueError(f"response must be a string, got {type(text).__name__}")
    s = text.strip()
    if len(s) == 3 and s[1] in _SEPARATORS:
        s = s[0] + s[2]
    if len(s) != 2 or not all(ch in DIGITS for ch in s):
        raise ValueError(f"expected two digits (good, miss), got {text!r}")

    good, miss = int(s[0]), int(s[1])
    if not validate_feedback(good, miss):
        raise ValueError(f"impossible feedback: good={good} miss={miss}")
    return good, miss
