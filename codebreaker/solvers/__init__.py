from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import exhaustive  # noqa: F401
from . import minimax_sample  # noqa: F401


def create_solver(solver_id: str, **params) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.

    Keyword arguments override the solver's UPPER_CASE tunables,
    e.g. create_solver("minimax_sample", SURVIVAL_P=0.01).
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**params)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
