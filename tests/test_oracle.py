import logging
import pytest
from codebreaker.harness import break_code, interactive_oracle, secret_oracle
from codebreaker.engine import check
from codebreaker.solvers import create_solver


def test_secret_oracle_wraps_check():
    oracle = secret_oracle("123406")
    assert oracle("123460") == check("123406", "123460")
    with pytest.raises(ValueError):
        secret_oracle("12340")


def test_interactive_oracle_prints_padded_guess_and_reprompts(caplog):
    replies = iter(["oops", "51", "2 0"])
    shown = []
    oracle = interactive_oracle(read=lambda: next(replies), write=shown.append)
    with caplog.at_level(logging.WARNING, logger="codebreaker"):
        assert oracle("081220") == (2, 0)
    assert shown[0] == "081220"
    assert len(shown) == 3  # guess + two re-prompts
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2


def test_interactive_session_end_to_end():
    secret = "400400"
    shown = []
    pending = []

    def write(line):
        shown.append(line)
        if len(line) == 6 and line.isdigit():
            good, miss = check(secret, line)
            pending.append(f"{good}{miss}")

    oracle = interactive_oracle(read=lambda: pending.pop(), write=write)
    assert break_code(oracle, create_solver("exhaustive")) == secret
    assert shown[0] == "000000"
