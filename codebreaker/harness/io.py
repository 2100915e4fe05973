"""
I/O utilities for self-play runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest: JSON manifest (numpy scalars and paths converted).
- timestamp_id:   UTC run id for file names.
- git_commit_or_unknown: short HEAD hash, "unknown" outside a checkout.

Notes:
- Codes and responses are prefixed with an apostrophe so spreadsheet apps
  keep leading zeros ("081220", "02") instead of reading them as numbers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np


def _text_cell(value: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "081220" -> "'081220"
    """
    return "'" + value if value else value


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, secret, found, success, guesses, time_ms,
      guess_1, resp_1, guess_2, resp_2, ..., up to the longest game

    Args:
      results  : list of dicts returned by the harness per game.
      path     : output CSV path.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    max_rounds = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["solver", "secret", "found", "success", "guesses", "time_ms"]
    for i in range(1, max_rounds + 1):
        fields += [f"guess_{i}", f"resp_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "secret": _text_cell(r["secret"]),
                "found": _text_cell(r["found"] or ""),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_rounds + 1):
                if i <= len(hist):
                    g, (good, miss) = hist[i - 1]
                    row[f"guess_{i}"] = _text_cell(g)
                    row[f"resp_{i}"] = _text_cell(f"{good}{miss}")
                else:
                    row[f"guess_{i}"] = ""
                    row[f"resp_{i}"] = ""

            w.writerow(row)

    return str(p)


def _json_default(obj):
    # numpy scalars/arrays and paths show up in manifests built from results
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serializable")


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump the run manifest (run_id, git_commit, config, secrets report,
    counts, solver id and tunables) as indented JSON with sorted keys.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, sort_keys=True, default=_json_default) + "\n",
                 encoding="utf-8")
    return str(p)


def timestamp_id(now: dt.datetime | None = None) -> str:
    """Run id for output file names: UTC, second resolution, e.g. 20250820T024121Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown(cwd: str | None = None) -> str:
    """Short HEAD hash of the checkout at `cwd`, or 'unknown' outside git."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"], cwd=cwd,
                              capture_output=True, text=True, check=False)
    except OSError:
        return "unknown"
    commit = proc.stdout.strip()
    return commit if proc.returncode == 0 and commit else "unknown"
