# apps/cli/run.py
"""
CLI entry point for batch self-play experiments.

This script:
  1) Collects secrets (from --codes, a --secrets file, or --random K codes)
     and, for a file, prints its validation summary (counts + SHA).
  2) Instantiates the requested solver with any tunable overrides.
  3) Breaks every secret with the solver (check() plays the oracle) under a
     tqdm progress bar and writes:
       - CSV:  per-case results + guess/response history columns
       - JSON: manifest with config, secret-list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

from codebreaker.datasets import validate_secrets, load_secrets, pretty_summary, write_lines
from codebreaker.engine import NUM_CODES, numeral_to_code, validate_code
from codebreaker.harness import run_case
from codebreaker.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from codebreaker.harness.logger import setup_logger
from codebreaker.solvers import create_solver, get_solver_ids

logger = logging.getLogger("codebreaker.cli.run")


def _collect_secrets(args) -> tuple[list[str], dict | None]:
    """Return (secrets, validation report or None)."""
    if args.codes:
        bad = [c for c in args.codes if not validate_code(c)]
        if bad:
            raise SystemExit(f"not 6-digit codes: {bad}")
        return list(args.codes), None

    if args.secrets:
        rep = validate_secrets(args.secrets)
        print(pretty_summary(rep))
        if not rep["exists"]:
            raise SystemExit(rep["issues"][0])
        return load_secrets(args.secrets), rep

    rng = np.random.default_rng(args.seed)
    picks = rng.integers(0, NUM_CODES, size=args.random)
    return [numeral_to_code(int(n)) for n in picks], None


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="codebreaker: run self-play experiments")
    ap.add_argument("--solver", default="exhaustive", choices=get_solver_ids(),
                    help="guess-selection strategy")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--codes", nargs="+", help="secrets given inline, e.g. 123456 081220")
    src.add_argument("--secrets", help="file with one 6-digit secret per line")
    src.add_argument("--random", type=int, default=10,
                     help="number of random secrets when no codes/file are given")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, help="threads for filtering/evaluation")
    ap.add_argument("--survival-p", type=float,
                    help="minimax_sample: per-candidate sampling probability")
    ap.add_argument("--full-scan-limit", type=int,
                    help="minimax_sample: evaluate every candidate at or below this size")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", help="also log to logs/<LOG_FILE> (rotated daily)")
    args = ap.parse_args()

    setup_logger(getattr(logging, args.log_level), log_file=args.log_file)

    params = {}
    if args.survival_p is not None:
        params["SURVIVAL_P"] = args.survival_p
    if args.full_scan_limit is not None:
        params["FULL_SCAN_LIMIT"] = args.full_scan_limit

    try:
        solver = create_solver(args.solver, **params)
    except ValueError as e:
        raise SystemExit(str(e))

    secrets, rep = _collect_secrets(args)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    if rep is None:
        write_lines(secrets, outdir / f"run_{run_id}_secrets.txt")

    results = []
    for idx, secret in enumerate(tqdm(secrets, ncols=80, desc="Breaking", unit="code"), 1):
        # Derive a per-game seed so runs are reproducible and independent
        r = run_case(solver, secret, seed=args.seed + idx, workers=args.workers)
        r["solver_id"] = solver.id
        if not r["success"]:
            logger.error("failed on %s (found %s)", secret, r["found"])
        results.append(r)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    solved = sum(1 for r in results if r["success"])
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "secrets": rep,
        "num_cases": len(results),
        "num_solved": solved,
        "mean_guesses": (sum(r["guesses"] for r in results) / len(results)) if results else 0.0,
        "solver_id": solver.id,
        "solver_params": params,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {solved}/{len(results)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0 if solved == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
