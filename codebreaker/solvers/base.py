from __future__ import annotations
from typing import Dict, Type

import numpy as np

from codebreaker.engine.constraints import VECTOR_SCORER

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, **params):
        # UPPER_CASE class attributes are tunables; allow per-instance overrides.
        for key, value in params.items():
            if not key.isupper() or not hasattr(type(self), key):
                raise ValueError(f"{type(self).__name__} has no tunable {key!r}")
            setattr(self, key, value)
        self.rng = np.random.default_rng()

    def reset(self, *, seed: int | None = None) -> None:
        """Start a new session; a seed makes sampling reproducible."""
        self.rng = np.random.default_rng(seed)

    @property
    def scorer(self):
        """Scorer the session filters with (score_many(numerals, guess))."""
        return VECTOR_SCORER

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
