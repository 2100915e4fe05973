"""
Oracle adapters.

An oracle answers one guess with the (good, miss) feedback for a fixed,
hidden secret. The session calls it once per round and waits for the answer.

- secret_oracle:      programmatic, scores guesses with check()
- interactive_oracle: asks a human; prints the guess as a zero-padded
                      6-digit numeral and reads a two-digit reply
"""

from __future__ import annotations

import logging
from typing import Callable

from codebreaker.engine import check, code_to_numeral, parse_response, validate_code
from codebreaker.engine.scoring import Feedback

logger = logging.getLogger(__name__)

Oracle = Callable[[str], Feedback]


def secret_oracle(secret: str) -> Oracle:
    if not validate_code(secret):
        raise ValueError(f"secret must be 6 digits, got {secret!r}")

    def _answer(guess: str) -> Feedback:
        return check(secret, guess)

    return _answer


def interactive_oracle(read: Callable[[], str] = input,
                       write: Callable[[str], None] = print) -> Oracle:
    """
    Oracle backed by a person. `read` returns one reply line, `write` shows
    one line; both default to the console. Malformed replies are asked again.
    """

    def _answer(guess: str) -> Feedback:
        write(f"{code_to_numeral(guess):06d}")
        while True:
            reply = read()
            try:
                return parse_response(reply)
            except ValueError as e:
                logger.warning("bad reply %r: %s", reply, e)
                write("please answer with two digits: good then miss (e.g. 21)")

    return _answer
