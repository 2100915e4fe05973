from pathlib import Path

import pytest
from codebreaker.datasets import (
    load_secrets, pretty_summary, read_lines, validate_secrets, write_lines,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_secrets_happy_path(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    _write(p, ["123456", "081220", "000001"])

    rep = validate_secrets(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "secrets=3" in s and s.endswith("OK")


def test_validate_secrets_flags_errors(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    p.write_text("123456\n81220\nabcdef\n\n123456\n", encoding="utf-8")

    rep = validate_secrets(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert load_secrets(str(p)) == ["123456", "123456"]


def test_validate_secrets_missing_file(tmp_path: Path):
    rep = validate_secrets(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_write_then_read_lines_keeps_leading_zeros(tmp_path: Path):
    path = write_lines(["000001", "081220"], tmp_path / "sub" / "s.txt")
    assert read_lines(path) == ["000001", "081220"]


def test_read_lines_strips_and_skips_blank_lines(tmp_path: Path):
    p = tmp_path / "s.txt"
    p.write_text("  123456 \r\n\n   \n\t081220\n", encoding="utf-8")
    assert read_lines(p) == ["123456", "081220"]


@pytest.mark.parametrize("codes", [["12345"], ["123456", "12a456"], [" 123456"]])
def test_write_lines_rejects_non_codes(tmp_path: Path, codes):
    p = tmp_path / "s.txt"
    with pytest.raises(ValueError):
        write_lines(codes, p)
    assert not p.exists()
