"""
Bulls-and-Cows scoring (feedback) for a (secret, guess) pair.

Feedback is a pair (good, miss):
  - good : guessed digit equals the secret digit at the same position
  - miss : guessed digit occurs in the secret at a position that is not
           already an exact match and not already claimed by an earlier miss

This implementation is:
  - duplicate-safe (a guess cannot earn more misses for a digit than the
    secret has unmatched copies of it)
  - greedy left to right (earlier guess positions claim credit first)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass counts exact matches and collects the secret's unmatched
     digits (secret positions where the guess differs).
  2) Second pass walks the guess and credits a miss only while the digit
     still has an unmatched copy left, consuming one copy per credit.

`check_many` is the same function evaluated against a whole array of
secrets with numpy; it must agree with `check` on every pair.
"""

from __future__ import annotations

from collections import Counter
from typing import Tuple

import numpy as np

from .codec import CODE_LENGTH, DIGITS, code_to_digits

Feedback = Tuple[int, int]

# Feedback pairs are packed as good * FEEDBACK_BASE + miss for bucketing.
FEEDBACK_BASE = CODE_LENGTH + 1
NUM_FEEDBACK = FEEDBACK_BASE * FEEDBACK_BASE
SOLVED: Feedback = (CODE_LENGTH, 0)

_DIGIT_SET = frozenset(DIGITS)


def _require_code(code: str, what: str) -> None:
    if not isinstance(code, str) or len(code) != CODE_LENGTH or not set(code) <= _DIGIT_SET:
        raise ValueError(f"{what} must be {CODE_LENGTH} digits, got {code!r}")


def check(secret: str, guess: str) -> Feedback:
    """
    Score `guess` against `secret`.

    Examples:
      check("123406", "123460") -> (4, 2)
      check("123406", "123499") -> (4, 0)
      check("111222", "111122") -> (5, 0)
      check("129999", "112222") -> (1, 1)
    """
    _require_code(secret, "secret")
    _require_code(guess, "guess")

    # Pass 1: exact matches, and what the secret has left over.
    good = 0
    unmatched = Counter()
    for s, g in zip(secret, guess):
        if s == g:
            good += 1
        else:
            unmatched[s] += 1

    # Pass 2: misses, capped by the leftover multiplicity in the secret.
    miss = 0
    for s, g in zip(secret, guess):
        if s == g:
            continue
        if unmatched[g] > 0:
            miss += 1
            unmatched[g] -= 1  # consume one copy

    return good, miss


def is_solved(feedback: Feedback) -> bool:
    return tuple(feedback) == SOLVED


def feedback_index(good: int, miss: int) -> int:
    return good * FEEDBACK_BASE + miss


def feedback_from_index(idx: int) -> Feedback:
    good, miss = divmod(int(idx), FEEDBACK_BASE)
    return good, miss


def check_many(secret_digits: np.ndarray, guess: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Score `guess` against every row of `secret_digits` ((n, 6) digit values).

    Returns (good, miss) as two int8 arrays of length n.

    The total of good + miss equals the multiset overlap
    sum_d min(count_secret(d), count_guess(d)), so only the digits that
    actually occur in the guess need a pass over the array.
    """
    _require_code(guess, "guess")
    g = code_to_digits(guess)
    secrets = np.asarray(secret_digits, dtype=np.uint8).reshape(-1, CODE_LENGTH)

    good = (secrets == g).sum(axis=1, dtype=np.int8)

    total = np.zeros(len(secrets), dtype=np.int8)
    for d, cnt in Counter(g.tolist()).items():
        in_secret = (secrets == d).sum(axis=1, dtype=np.int8)
        total += np.minimum(in_secret, np.int8(cnt))

    return good, total - good


def check_index_many(secret_digits: np.ndarray, guess: str) -> np.ndarray:
    """Like check_many but packed into feedback indices (uint8)."""
    good, miss = check_many(secret_digits, guess)
    return (good.astype(np.uint8) * FEEDBACK_BASE + miss.astype(np.uint8)).astype(np.uint8)
