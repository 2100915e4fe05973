"""
Code representation and conversions.

Conventions:
  - A digit is one of the ten characters '0'..'9'.
  - A code is a str of exactly CODE_LENGTH digits, first character most
    significant. Leading zeros are legal ("000000" is a code).
  - A numeral is the int the code spells in base 10, in [0, MAX_NUMERAL].

The digit <-> value mapping is a lookup table (total in both directions),
so an out-of-range value can only come from the caller and is reported as
a ValueError instead of being truncated or wrapped.

Array helpers work on numpy arrays of numerals (the candidate-set format
used by the rest of the engine).
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

CODE_LENGTH = 6
NUM_CODES = 10 ** CODE_LENGTH
MAX_NUMERAL = NUM_CODES - 1

DIGITS: Tuple[str, ...] = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
_VALUE_OF: Dict[str, int] = {d: v for v, d in enumerate(DIGITS)}

# Positional weights, most significant slot first: 100000, 10000, ..., 1
_WEIGHTS: Tuple[int, ...] = tuple(10 ** i for i in reversed(range(CODE_LENGTH)))


def digit_to_value(d: str) -> int:
    """Return the value 0..9 of digit `d`."""
    try:
        return _VALUE_OF[d]
    except (KeyError, TypeError) as e:
        raise ValueError(f"not a digit: {d!r}") from e


def value_to_digit(v: int) -> str:
    """Return the digit for value `v`; ValueError outside 0..9."""
    if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v <= 9:
        raise ValueError(f"digit value out of range: {v!r}")
    return DIGITS[int(v)]


def code_to_numeral(code: str) -> int:
    """
    Read `code` as a base-10 numeral.

    Examples:
      code_to_numeral("123406") -> 123406
      code_to_numeral("000001") -> 1
    """
    if not isinstance(code, str) or len(code) != CODE_LENGTH:
        raise ValueError(f"code must be {CODE_LENGTH} digits, got {code!r}")
    return sum(digit_to_value(d) * w for d, w in zip(code, _WEIGHTS))


def numeral_to_code(n: int) -> str:
    """
    Inverse of code_to_numeral: split `n` into digits by division/modulo,
    most significant first.

    Examples:
      numeral_to_code(81220) -> "081220"
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"numeral must be an int, got {n!r}")
    n = int(n)
    if not 0 <= n <= MAX_NUMERAL:
        raise ValueError(f"numeral out of range [0, {MAX_NUMERAL}]: {n}")
    return "".join(value_to_digit((n // w) % 10) for w in _WEIGHTS)


# -----------------------------
# Array helpers
# -----------------------------

def all_numerals() -> np.ndarray:
    """The whole code space as a sorted uint32 array."""
    return np.arange(NUM_CODES, dtype=np.uint32)


def numerals_to_digits(numerals: np.ndarray) -> np.ndarray:
    """(n,) numerals -> (n, CODE_LENGTH) uint8 digit values, most significant first."""
    arr = np.asarray(numerals, dtype=np.uint32).reshape(-1, 1)
    weights = np.array(_WEIGHTS, dtype=np.uint32)
    return ((arr // weights) % 10).astype(np.uint8)


def code_to_digits(code: str) -> np.ndarray:
    """Single code -> (CODE_LENGTH,) uint8 digit values."""
    if not isinstance(code, str) or len(code) != CODE_LENGTH:
        raise ValueError(f"code must be {CODE_LENGTH} digits, got {code!r}")
    return np.array([digit_to_value(d) for d in code], dtype=np.uint8)
