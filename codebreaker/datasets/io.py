"""
Secrets files: one 6-digit code per line.

Leading zeros are significant ("000001" is not "1"), so codes are kept as
text end to end; nothing here converts them to numbers.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from codebreaker.engine import validate_code


def read_lines(p: Path | str) -> List[str]:
    """
    Non-blank lines of a UTF-8 secrets file, surrounding whitespace removed.
    Lines are returned as found; validate_secrets() decides which are codes.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    stripped = (ln.strip() for ln in p.read_text(encoding="utf-8").splitlines())
    return [s for s in stripped if s]


def write_lines(codes: Iterable[str], p: Path | str) -> str:
    """
    Write `codes` one per line with a trailing newline.
    Raises ValueError (before touching the file) if any entry is not a code.
    Returns the string path written.
    """
    codes = list(codes)
    bad = [c for c in codes if not validate_code(c)]
    if bad:
        raise ValueError(f"not 6-digit codes: {bad[:5]}")
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(c + "\n" for c in codes), encoding="utf-8")
    return str(p)
