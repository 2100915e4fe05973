"""
Concurrent compute-or-fetch cache for `check`, keyed by the ordered
(secret, guess) pair.

Storage is one lazily filled row per guess: row[secret_numeral] holds the
packed feedback index, or UNKNOWN until that pair has been scored. Rows are
guarded by lock striping (a fixed pool of locks picked by guess numeral).
The scoring itself runs outside the lock so filtering workers that hold
disjoint slices of the candidate set do not serialise on the row; two
workers racing on the same pair may both compute it, which is harmless
because `check` is pure.
"""

from __future__ import annotations

import threading
from typing import Dict

import numpy as np

from .codec import NUM_CODES, code_to_numeral, numerals_to_digits
from .scoring import Feedback, check_index_many, feedback_from_index

UNKNOWN = np.uint8(255)


class PairMemo:
    def __init__(self, stripes: int = 64):
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._rows: Dict[int, np.ndarray] = {}
        self._locks = [threading.Lock() for _ in range(stripes)]
        self._stats_lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def _lock_for(self, guess_num: int) -> threading.Lock:
        return self._locks[guess_num % len(self._locks)]

    def score_many(self, numerals: np.ndarray, guess: str) -> np.ndarray:
        """Feedback indices of `guess` against each secret in `numerals`."""
        gnum = code_to_numeral(guess)
        numerals = np.asarray(numerals, dtype=np.uint32)
        lock = self._lock_for(gnum)

        with lock:
            row = self._rows.get(gnum)
            if row is None:
                row = np.full(NUM_CODES, UNKNOWN, dtype=np.uint8)
                self._rows[gnum] = row
            out = row[numerals]  # fancy indexing copies

        todo = out == UNKNOWN
        n_todo = int(todo.sum())
        if n_todo:
            missing = numerals[todo]
            fresh = check_index_many(numerals_to_digits(missing), guess)
            out[todo] = fresh
            with lock:
                row[missing] = fresh

        with self._stats_lock:
            self.misses += n_todo
            self.hits += len(numerals) - n_todo
        return out

    def __call__(self, secret: str, guess: str) -> Feedback:
        idx = self.score_many(np.array([code_to_numeral(secret)], dtype=np.uint32), guess)
        return feedback_from_index(idx[0])

    @property
    def stats(self) -> Dict[str, int]:
        with self._stats_lock:
            return {"hits": self.hits, "misses": self.misses, "rows": len(self._rows)}

    def clear(self) -> None:
        for lock in self._locks:
            lock.acquire()
        try:
            self._rows.clear()
        finally:
            for lock in self._locks:
                lock.release()
        with self._stats_lock:
            self.hits = 0
            self.misses = 0
