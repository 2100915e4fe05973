import numpy as np
import pytest
from codebreaker.engine import check, check_many, is_solved, numerals_to_digits, numeral_to_code
from codebreaker.engine.scoring import check_index_many, feedback_index, feedback_from_index

# --- golden cases (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("123406", "123406", (6, 0)),
    ("123406", "604321", (0, 6)),
    ("123406", "999999", (0, 0)),
    ("123406", "123460", (4, 2)),
    ("123406", "123499", (4, 0)),
    ("123406", "123400", (5, 0)),
    ("111222", "111122", (5, 0)),
    ("129999", "112222", (1, 1)),
    ("112222", "129999", (1, 1)),
    ("100001", "119999", (1, 1)),
    ("110000", "001199", (0, 4)),
])
def test_check_golden(secret, guess, expected):
    assert check(secret, guess) == expected


def test_duplicate_codes_both_orientations():
    a, b = "129999", "112222"
    assert check(a, b) == (1, 1)
    assert check(b, a) == (1, 1)
    a, b = "111222", "111122"
    assert check(a, b) == (5, 0)
    assert check(b, a) == (5, 0)


def test_self_score_and_bounds():
    rng = np.random.default_rng(0)
    for n in rng.integers(0, 1_000_000, size=500):
        c = numeral_to_code(int(n))
        assert check(c, c) == (6, 0)
        assert is_solved(check(c, c))
        g = numeral_to_code(int(rng.integers(0, 1_000_000)))
        good, miss = check(c, g)
        assert 0 <= good and 0 <= miss and good + miss <= 6
        assert (good, miss) != (5, 1)


def test_check_many_agrees_with_check():
    rng = np.random.default_rng(1)
    # Small digit alphabet so duplicates are frequent.
    secrets = rng.integers(0, 3, size=(2000, 6)).astype(np.uint8)
    for _ in range(30):
        guess = "".join(str(d) for d in rng.integers(0, 3, size=6))
        good, miss = check_many(secrets, guess)
        for row, gd, ms in zip(secrets, good, miss):
            s = "".join(str(d) for d in row)
            assert check(s, guess) == (int(gd), int(ms))


def test_check_index_many_packs_feedback():
    nums = np.array([123406, 123460, 999999], dtype=np.uint32)
    idx = check_index_many(numerals_to_digits(nums), "123406")
    assert [feedback_from_index(i) for i in idx] == [(6, 0), (4, 2), (0, 0)]
    assert feedback_index(4, 2) == 30


@pytest.mark.parametrize("secret,guess", [("12345", "123456"), ("123456", "12x456")])
def test_check_rejects_malformed_codes(secret, guess):
    with pytest.raises(ValueError):
        check(secret, guess)
