"""
Candidate filtering given game history.

Given:
  - a candidate set (numpy array of numerals, see codec)
  - a history of (guess, feedback) pairs

Return:
  - the candidates that would have produced exactly the recorded feedback
    for every (guess, feedback) in the history.

This is the step that turns feedback into a shrinking candidate set. Large
sets are split into disjoint slices and scored on a thread pool (numpy does
the heavy lifting with the GIL released); the slices are independent, so
the result is simply their union, returned in canonical (numeric) order.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .codec import numerals_to_digits
from .scoring import Feedback, check, check_index_many, feedback_index

# History is a sequence of (guess, feedback) tuples.
History = Iterable[Tuple[str, Feedback]]

# Below this many candidates a thread pool costs more than it saves.
PARALLEL_MIN = 50_000


class VectorScorer:
    """Plain vectorised scoring, no caching."""

    def score_many(self, numerals: np.ndarray, guess: str) -> np.ndarray:
        return check_index_many(numerals_to_digits(numerals), guess)


VECTOR_SCORER = VectorScorer()


def default_workers() -> int:
    return max(1, min(4, os.cpu_count() or 1))


def filter_candidates(
        candidates: np.ndarray,
        history: History,
        *,
        scorer=None,
        workers: Optional[int] = None,
) -> np.ndarray:
    """
    Keep only candidates consistent with every (guess, feedback) in `history`.

    Args:
      candidates : array of numerals
      history    : iterable of (guess, feedback) seen so far
      scorer     : object with score_many(numerals, guess) -> feedback indices
                   (VectorScorer by default; a PairMemo to reuse scores)
      workers    : thread count for large sets (default: up to 4)

    Returns:
      uint32 array of the surviving numerals, sorted ascending.
    """
    cands = np.asarray(candidates, dtype=np.uint32)
    constraints = [(guess, feedback_index(*fb)) for guess, fb in history]
    if not constraints or len(cands) == 0:
        return cands

    scorer = scorer or VECTOR_SCORER

    def _keep(chunk: np.ndarray) -> np.ndarray:
        for guess, idx in constraints:
            if len(chunk) == 0:
                break
            chunk = chunk[scorer.score_many(chunk, guess) == idx]
        return chunk

    n_workers = default_workers() if workers is None else int(workers)
    if n_workers <= 1 or len(cands) < PARALLEL_MIN:
        return _keep(cands)

    chunks: List[np.ndarray] = np.array_split(cands, n_workers)
    with ThreadPoolExecutor(max_workers=n_workers) as ex:
        parts = list(ex.map(_keep, chunks))
    return np.sort(np.concatenate(parts))


def is_consistent(code: str, history: History) -> bool:
    """Scalar form: would `code` as the secret reproduce every recorded feedback?"""
    for guess, fb in history:
        if check(code, guess) != tuple(fb):
            return False
    return True
