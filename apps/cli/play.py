# apps/cli/play.py
"""
Play against a person who holds the secret.

Each round the program prints its guess as six digits and waits for a
two-digit reply: the number of exact matches ("good") then the number of
right digits in the wrong place ("miss"), e.g. "21". It stops once a
single code is left and prints "done NNNNNN".
"""

from __future__ import annotations

import argparse
import logging
import sys

from codebreaker.harness import break_code, interactive_oracle
from codebreaker.harness.logger import setup_logger
from codebreaker.solvers import create_solver, get_solver_ids


def main():
    ap = argparse.ArgumentParser(description="codebreaker: guess a secret you are holding")
    ap.add_argument("--solver", default="exhaustive", choices=get_solver_ids(),
                    help="guess-selection strategy")
    ap.add_argument("--seed", type=int, help="RNG seed for sampling solvers")
    ap.add_argument("--workers", type=int, help="threads for filtering/evaluation")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    setup_logger(getattr(logging, args.log_level))
    solver = create_solver(args.solver)

    try:
        code = break_code(interactive_oracle(), solver, seed=args.seed, workers=args.workers)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
        return 130

    if code is None:
        print("Couldn't find code!")
        return 1
    print(f"done {code}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
