import numpy as np
import pytest
from codebreaker.solvers import create_solver, get_solver_ids
from codebreaker.solvers.base import BaseSolver, register
from codebreaker.engine import PairMemo, all_numerals, check, code_to_numeral


def test_registry_lists_both_strategies():
    ids = get_solver_ids()
    assert "exhaustive" in ids and "minimax_sample" in ids


def test_unknown_solver_id():
    with pytest.raises(ValueError, match="Available"):
        create_solver("nope")


def test_duplicate_and_empty_ids_are_rejected():
    class Dup(BaseSolver):
        id = "exhaustive"

    class Empty(BaseSolver):
        id = ""

    with pytest.raises(ValueError):
        register(Dup)
    with pytest.raises(ValueError):
        register(Empty)


def test_tunables_can_be_overridden():
    s = create_solver("minimax_sample", SURVIVAL_P=0.05, FULL_SCAN_LIMIT=10)
    assert s.SURVIVAL_P == 0.05 and s.FULL_SCAN_LIMIT == 10
    assert create_solver("minimax_sample").SURVIVAL_P == pytest.approx(1 / 500)
    with pytest.raises(ValueError):
        create_solver("minimax_sample", survival_p=0.1)
    with pytest.raises(ValueError):
        create_solver("exhaustive", NOT_A_TUNABLE=1)


def test_exhaustive_picks_smallest_and_filters_through_memo():
    s = create_solver("exhaustive")
    s.reset(seed=0)
    cands = np.array([900000, 81220, 500000], dtype=np.uint32)
    assert s.next_guess({"turn": 1, "candidates": cands, "history": []}) == "081220"
    assert isinstance(s.scorer, PairMemo)


def test_minimax_opens_with_fixed_code():
    s = create_solver("minimax_sample")
    s.reset(seed=1)
    assert s.next_guess({"turn": 1, "candidates": all_numerals(), "history": []}) == "111222"


def test_minimax_full_scan_picks_smallest_worst_bucket():
    codes = ["123456", "123465", "123546", "124356", "213456", "654321"]
    cands = np.array(sorted(code_to_numeral(c) for c in codes), dtype=np.uint32)

    def worst(g):
        buckets = {}
        for c in codes:
            fb = check(c, g)
            buckets[fb] = buckets.get(fb, 0) + 1
        return max(buckets.values())

    best = min(worst(c) for c in codes)
    # equal worst buckets resolve to the smallest code
    expected = min(c for c in codes if worst(c) == best)

    s = create_solver("minimax_sample")
    s.reset(seed=2)
    guess = s.next_guess({"turn": 2, "candidates": cands, "history": [], "workers": 1})
    assert guess == expected


def test_minimax_is_deterministic_for_a_seed():
    cands = np.arange(0, 200_000, 7, dtype=np.uint32)
    picks = []
    for workers in (1, 4):
        s = create_solver("minimax_sample", SURVIVAL_P=0.01)
        s.reset(seed=42)
        picks.append(s.next_guess({"turn": 2, "candidates": cands, "history": [], "workers": workers}))
    assert picks[0] == picks[1]
    assert code_to_numeral(picks[0]) in set(cands.tolist())


def test_minimax_falls_back_when_sample_is_empty():
    s = create_solver("minimax_sample", SURVIVAL_P=0.0, FULL_SCAN_LIMIT=0)
    s.reset(seed=3)
    cands = np.array([5, 17, 999], dtype=np.uint32)
    assert s.next_guess({"turn": 3, "candidates": cands, "history": []}) == "000005"


@pytest.mark.parametrize("workers", [0, 1])
def test_minimax_zero_or_one_worker_evaluates_inline(monkeypatch, workers):
    import codebreaker.solvers.minimax_sample as mm

    def no_pool(*args, **kwargs):
        raise AssertionError("thread pool used with workers <= 1")

    monkeypatch.setattr(mm, "ThreadPoolExecutor", no_pool)
    cands = np.arange(1000, 1100, dtype=np.uint32)
    s = create_solver("minimax_sample")
    s.reset(seed=5)
    guess = s.next_guess({"turn": 2, "candidates": cands, "history": [], "workers": workers})
    assert code_to_numeral(guess) in set(cands.tolist())
