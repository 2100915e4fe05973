"""
Secret-list validator.

What this module does:
- Validate a secrets file for batch self-play (one 6-digit code per line).
- Enforce formatting rules (digits only, exact length 6, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from codebreaker.datasets import validate_secrets, pretty_summary
    rep = validate_secrets("data/secrets.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from codebreaker.engine import validate_code
from .io import read_lines


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class SecretsReport:
    """Validation result for one secrets file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID codes
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid codes
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load codes from a text file and validate them.

    Rules:
      - one code per line, surrounding whitespace ignored
      - exactly 6 digits (leading zeros kept)
      - empty/whitespace-only lines are skipped, not counted as invalid

    Returns:
      (valid_codes, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    for s in read_lines(path):
        if validate_code(s):
            valid.append(s)
        else:
            invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_secrets(path: str) -> Dict:
    """
    Validate a secrets file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see SecretsReport schema).
        `passed` requires an existing, non-empty file with no invalid lines;
        duplicates are reported in `issues` but do not fail the check.
    """
    p = Path(path)
    if not p.exists():
        rep = SecretsReport(path, False, 0, "", 0, 0, False,
                            [f"secrets file not found: {path}"])
        return asdict(rep)

    codes, invalid = _load_and_check(p)
    unique = len(set(codes))

    issues: List[str] = []
    if not codes:
        issues.append("secrets file contains 0 valid codes")
    if invalid:
        issues.append(f"secrets has {invalid} invalid line(s)")
    if unique != len(codes):
        issues.append("secrets contains duplicate lines")

    rep = SecretsReport(
        path=str(p),
        exists=True,
        count=len(codes),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        passed=bool(codes) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def load_secrets(path: str) -> List[str]:
    """Valid codes from `path`, in file order (invalid lines dropped)."""
    codes, _ = _load_and_check(Path(path))
    return codes


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        secrets=100 (uniq=100, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"secrets={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
