import importlib.util
import sys
from pathlib import Path

import pytest

CLI_DIR = Path(__file__).resolve().parents[1] / "apps" / "cli"


def _load(name: str):
    spec = importlib.util.spec_from_file_location(f"cli_{name}", CLI_DIR / f"{name}.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


@pytest.mark.parametrize("script", ["play", "run"])
def test_unknown_solver_is_a_usage_error(monkeypatch, capsys, script):
    mod = _load(script)
    monkeypatch.setattr(sys, "argv", [f"{script}.py", "--solver", "nope"])
    with pytest.raises(SystemExit) as exc:
        mod.main()
    assert exc.value.code == 2
    err = capsys.readouterr().err
    assert "invalid choice: 'nope'" in err
    assert "exhaustive" in err
