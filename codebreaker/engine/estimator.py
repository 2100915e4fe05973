"""
Possibility-count estimator.

Given a new guess and the observations so far, bound which (good, miss)
responses the guess can still produce, without enumerating candidates.

For one prior observation (prev, (pg, pm)) and a new guess:
  a = positions where guess == prev
  m = multiset overlap of guess and prev (sum of min digit counts)

Any secret that scored (pg, pm) against prev scores the guess with
  good  in [max(0, pg - (6 - a)),       2 * min(a, pg) + 6 - a - pg]
  total in [max(0, pg + pm + m - 6),    min(m, pg + pm) + 6 - m]
where total = good + miss. Intersecting over the whole history gives the
response buckets the guess can still land in; the minimax solver uses their
number as a cheap proxy for how finely the guess splits the candidates.
"""

from __future__ import annotations

from collections import Counter
from typing import FrozenSet, Iterable, Set, Tuple

from .codec import CODE_LENGTH
from .scoring import Feedback

# Every feedback a scoring can produce. (5, 1) cannot happen: codes that
# differ in exactly one position cannot hold the same digits.
ALL_RESPONSES: FrozenSet[Feedback] = frozenset(
    (g, m)
    for g in range(CODE_LENGTH + 1)
    for m in range(CODE_LENGTH + 1 - g)
    if (g, m) != (CODE_LENGTH - 1, 1)
)


def _overlap(a: str, b: str) -> int:
    ca, cb = Counter(a), Counter(b)
    return sum(min(n, cb[d]) for d, n in ca.items())


def response_bounds(guess: str, prev_guess: str, prev_feedback: Feedback
                    ) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Return ((good_lo, good_hi), (total_lo, total_hi)) for `guess`."""
    pg, pm = prev_feedback
    pt = pg + pm
    n = CODE_LENGTH

    a = sum(1 for x, y in zip(guess, prev_guess) if x == y)
    m = _overlap(guess, prev_guess)

    good_lo = max(0, pg - (n - a))
    good_hi = min(n, 2 * min(a, pg) + n - a - pg)
    total_lo = max(0, pt + m - n)
    total_hi = min(n, min(m, pt) + n - m)
    return (good_lo, good_hi), (total_lo, total_hi)


def possible_responses(guess: str, history: Iterable[Tuple[str, Feedback]]) -> Set[Feedback]:
    """Responses to `guess` not ruled out by any observation in `history`."""
    out = set(ALL_RESPONSES)
    for prev, fb in history:
        (g_lo, g_hi), (t_lo, t_hi) = response_bounds(guess, prev, fb)
        out = {
            (g, m) for g, m in out
            if g_lo <= g <= g_hi and t_lo <= g + m <= t_hi
        }
        if not out:
            break
    return out
