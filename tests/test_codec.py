import numpy as np
import pytest
from codebreaker.engine import (
    digit_to_value, value_to_digit, code_to_numeral, numeral_to_code,
    all_numerals, numerals_to_digits, NUM_CODES,
)


def test_digit_table_is_a_bijection():
    for v in range(10):
        assert digit_to_value(value_to_digit(v)) == v
    assert [value_to_digit(v) for v in range(10)] == list("0123456789")


@pytest.mark.parametrize("bad", [-1, 10, 255, 3.0, True, None, "7"])
def test_value_to_digit_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        value_to_digit(bad)


@pytest.mark.parametrize("bad", ["a", "", "12", None])
def test_digit_to_value_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        digit_to_value(bad)


def test_known_codes():
    assert code_to_numeral("123406") == 123406
    assert numeral_to_code(123406) == "123406"
    assert numeral_to_code(81220) == "081220"
    assert numeral_to_code(0) == "000000"
    assert numeral_to_code(1) == "000001"
    assert code_to_numeral("000000") == 0
    assert code_to_numeral("999999") == 999999


def test_round_trip_every_numeral():
    for n in range(NUM_CODES):
        assert code_to_numeral(numeral_to_code(n)) == n


def test_array_digits_match_scalar_codes():
    nums = all_numerals()
    digits = numerals_to_digits(nums)
    assert digits.shape == (NUM_CODES, 6)
    back = digits.astype(np.int64) @ np.array([100000, 10000, 1000, 100, 10, 1])
    assert np.array_equal(back, nums.astype(np.int64))
    for n in (0, 7, 81220, 123406, 999999):
        assert "".join(str(d) for d in digits[n]) == numeral_to_code(n)


@pytest.mark.parametrize("bad", [-1, 1_000_000, 10_000_000])
def test_numeral_out_of_range_is_rejected(bad):
    with pytest.raises(ValueError):
        numeral_to_code(bad)


@pytest.mark.parametrize("bad", ["12345", "1234567", "12a456", 123456])
def test_malformed_code_is_rejected(bad):
    with pytest.raises(ValueError):
        code_to_numeral(bad)
