"""
Code-breaking session and self-play primitives.

- break_code: run one session against an oracle until one candidate is left.
- run_case:   break a known secret with a given solver and report the game.
- run_batch:  run many secrets in sequence (optionally a sample prefix).

The session owns the candidate set and the observation history; the solver
only proposes guesses. Each round is: pick a guess, ask the oracle (blocking),
filter the candidate set by the answer. Nothing runs ahead of the oracle.

These functions are UI-agnostic so they can be reused by the CLI apps, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import operator
import time
from typing import Dict, Iterable, List, Optional, Tuple

from codebreaker.engine import all_numerals, numeral_to_code, validate_code, validate_feedback
from codebreaker.engine.constraints import filter_candidates
from codebreaker.engine.scoring import Feedback
from codebreaker.solvers import BaseSolver, create_solver
from .oracle import Oracle, secret_oracle

logger = logging.getLogger(__name__)

DEFAULT_SOLVER = "exhaustive"


def _as_feedback(reply) -> Feedback:
    try:
        good, miss = reply
    except (TypeError, ValueError) as e:
        raise ValueError(f"oracle returned a malformed response: {reply!r}") from e
    # ints only (numpy ints included); no bools, floats or strings
    if isinstance(good, bool) or isinstance(miss, bool):
        raise ValueError(f"oracle returned a malformed response: {reply!r}")
    try:
        good, miss = operator.index(good), operator.index(miss)
    except TypeError as e:
        raise ValueError(f"oracle returned a malformed response: {reply!r}") from e
    if not validate_feedback(good, miss):
        raise ValueError(f"oracle returned an impossible response: {reply!r}")
    return good, miss


def break_code(
        oracle: Oracle,
        solver: BaseSolver | None = None,
        *,
        seed: int | None = None,
        workers: int | None = None,
        trace: List[Dict] | None = None,
) -> Optional[str]:
    """
    Deduce the oracle's secret.

    Args:
        oracle:  callable guess -> (good, miss), truthful for one fixed secret
        solver:  guess-selection strategy (default: exhaustive)
        seed:    RNG seed for solvers that sample
        workers: thread count for filtering / evaluation
        trace:   if a list is given, one dict per round is appended to it:
                 turn, guess, feedback, before, after

    Returns:
        The single surviving code, or None if the answers contradict each
        other and no code is consistent with all of them.
    """
    solver = solver or create_solver(DEFAULT_SOLVER)
    solver.reset(seed=seed)

    candidates = all_numerals()
    history: List[Tuple[str, Feedback]] = []
    turn = 0

    while len(candidates) > 1:
        turn += 1
        state = {
            "turn": turn,
            "candidates": candidates,
            "history": list(history),
            "workers": workers,
        }
        guess = solver.next_guess(state)

        # Blocking: the next round starts only once the oracle has answered.
        feedback = _as_feedback(oracle(guess))
        history.append((guess, feedback))

        before = len(candidates)
        candidates = filter_candidates(
            candidates, [(guess, feedback)], scorer=solver.scorer, workers=workers)
        after = len(candidates)

        logger.info("round %d: %s -> %d%d, %d -> %d candidates",
                    turn, guess, feedback[0], feedback[1], before, after)
        if trace is not None:
            trace.append({"turn": turn, "guess": guess, "feedback": feedback,
                          "before": before, "after": after})

    if len(candidates) == 0:
        logger.warning("no code is consistent with the %d answers given", len(history))
        return None

    code = numeral_to_code(int(candidates[0]))
    logger.info("solved %s after %d rounds", code, turn)
    return code


def run_case(
        solver: BaseSolver,
        secret: str,
        *,
        seed: int | None = None,
        workers: int | None = None,
) -> Dict:
    """
    Break `secret` with `solver`, using check() as the oracle.

    Returns:
        dict with keys:
            secret (str), found (str|None), success (bool), guesses (int),
            time_ms (float), history (list[(guess, feedback)]),
            sizes (list[int], candidates left after each round)
    """
    if not validate_code(secret):
        raise ValueError(f"secret must be 6 digits, got {secret!r}")

    trace: List[Dict] = []
    t0 = time.perf_counter()
    found = break_code(secret_oracle(secret), solver, seed=seed, workers=workers, trace=trace)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": secret,
        "found": found,
        "success": found == secret,
        "guesses": len(trace),
        "time_ms": dt,
        "history": [(t["guess"], t["feedback"]) for t in trace],
        "sizes": [t["after"] for t in trace],
    }


def run_batch(
        solver: BaseSolver,
        secrets: Iterable[str],
        *,
        seed: int | None = None,
        sample: int | None = None,
        workers: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, seed=case_seed, workers=workers)
        r["solver_id"] = solver.id
        out.append(r)
    return out
