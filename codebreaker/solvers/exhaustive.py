"""
Exhaustive solver.

Strategy:
  - Always guess the smallest remaining candidate (canonical order).
  - Filtering goes through a PairMemo, so every (candidate, guess) score is
    computed once per session and shared by the filtering workers.

Notes:
  - Not information-optimal; each guess is consistent with everything seen
    so far, which is enough to guarantee termination.
"""

from __future__ import annotations

import logging

import numpy as np

from .base import BaseSolver, register
from codebreaker.engine import numeral_to_code
from codebreaker.engine.memo import PairMemo

logger = logging.getLogger(__name__)


@register
class ExhaustiveSolver(BaseSolver):
    id = "exhaustive"
    name = "Exhaustive (smallest consistent)"
    version = "1.0.0"

    # Lock stripes guarding the pair cache.
    MEMO_STRIPES = 64

    def __init__(self, **params):
        super().__init__(**params)
        self._memo = PairMemo(stripes=int(self.MEMO_STRIPES))

    def reset(self, *, seed: int | None = None) -> None:
        super().reset(seed=seed)
        self._memo.clear()

    @property
    def scorer(self) -> PairMemo:
        return self._memo

    def next_guess(self, state: dict) -> str:
        candidates: np.ndarray = state["candidates"]
        if len(candidates) == 0:
            raise ValueError("no candidates left to guess from")
        guess = numeral_to_code(int(candidates.min()))
        logger.debug("exhaustive pick %s (memo %s)", guess, self._memo.stats)
        return guess
