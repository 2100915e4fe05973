"""
Sampled Minimax solver.

Main idea:
  - Turn 1: play a fixed opening (111222).
  - Later turns: draw a random sample of the CURRENT candidates (each one
    survives with probability SURVIVAL_P), score every sampled guess against
    the sample, and pick the guess whose worst response bucket is smallest.
Tie-break:
  - more possible responses (per the estimator), then canonical order, so
    the result does not depend on which worker finished first.

Scaling:
  - With up to a million candidates, scoring every pair is out of reach.
    The sample keeps the pairwise work around (n * SURVIVAL_P)^2; once the
    candidate set is at most FULL_SCAN_LIMIT the whole set is evaluated.
  - If nothing survives sampling, fall back to the smallest candidate.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

import numpy as np

from .base import BaseSolver, register
from codebreaker.engine import numeral_to_code, numerals_to_digits
from codebreaker.engine.constraints import default_workers
from codebreaker.engine.estimator import possible_responses
from codebreaker.engine.scoring import NUM_FEEDBACK, check_index_many, feedback_index

logger = logging.getLogger(__name__)

# (worst bucket, -possible responses, numeral); smaller is better.
Cost = Tuple[int, int, int]


def _worst_case(guess: str, pool_digits: np.ndarray, history) -> Tuple[int, int]:
    """Return (worst_bucket_size, num_possible_responses) for guess over the pool."""
    counts = np.bincount(check_index_many(pool_digits, guess), minlength=NUM_FEEDBACK)
    possible = possible_responses(guess, history)
    worst = max((int(counts[feedback_index(g, m)]) for g, m in possible), default=0)
    return worst, len(possible)


@register
class MinimaxSampleSolver(BaseSolver):
    id = "minimax_sample"
    name = "Sampled Minimax (worst bucket)"
    version = "1.0.0"

    OPENING = "111222"

    # Per-candidate probability of being sampled when the set is large.
    SURVIVAL_P = 1 / 500

    # At or below this size, evaluate every candidate (no sampling).
    FULL_SCAN_LIMIT = 500

    # Smaller samples are evaluated inline.
    PARALLEL_MIN_POOL = 64

    def _sample(self, candidates: np.ndarray) -> np.ndarray:
        if len(candidates) <= self.FULL_SCAN_LIMIT:
            return candidates
        keep = self.rng.random(len(candidates)) < self.SURVIVAL_P
        return candidates[keep]

    def _evaluate(self, guesses: np.ndarray, pool_digits: np.ndarray, history) -> List[Cost]:
        out: List[Cost] = []
        for num in guesses:
            worst, n_possible = _worst_case(numeral_to_code(int(num)), pool_digits, history)
            out.append((worst, -n_possible, int(num)))
        return out

    def next_guess(self, state: dict) -> str:
        """Pick the sampled candidate with the smallest worst-case bucket."""
        turn: int = state["turn"]
        candidates: np.ndarray = state["candidates"]
        history = list(state.get("history", []))
        if len(candidates) == 0:
            raise ValueError("no candidates left to guess from")

        if turn == 1 and self.OPENING:
            return self.OPENING

        sample = self._sample(candidates)
        if len(sample) == 0:
            guess = numeral_to_code(int(candidates.min()))
            logger.debug("empty sample from %d candidates, falling back to %s",
                         len(candidates), guess)
            return guess

        pool_digits = numerals_to_digits(sample)
        workers = state.get("workers")
        workers = default_workers() if workers is None else int(workers)

        if workers > 1 and len(sample) >= self.PARALLEL_MIN_POOL:
            chunks = np.array_split(sample, workers)
            with ThreadPoolExecutor(max_workers=workers) as ex:
                costs = [c for part in ex.map(lambda ch: self._evaluate(ch, pool_digits, history), chunks)
                         for c in part]
        else:
            costs = self._evaluate(sample, pool_digits, history)

        worst, neg_possible, num = min(costs)
        guess = numeral_to_code(num)
        logger.debug(
            "minimax pick %s: worst bucket %d/%d sampled (~%d of %d), %d possible responses",
            guess, worst, len(sample), worst * len(candidates) // len(sample),
            len(candidates), -neg_possible,
        )
        return guess
