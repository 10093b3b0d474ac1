import runpy
import sys
from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPTSCAN_LOG_MODE", "cli")


def test_pattern_demo(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pattern_demo.py", "-vp", "hello", "-n", "3", "rest"])
    runpy.run_path(str(EXAMPLES / "pattern_demo.py"), run_name="__main__")

    output = capsys.readouterr().out
    assert "path: hello" in output
    assert "count: 3" in output
    assert "'rest'" in output
    assert not (tmp_path / "optscan.log").exists()


def test_pattern_demo_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["pattern_demo.py", "-v"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(str(EXAMPLES / "pattern_demo.py"), run_name="__main__")

    assert excinfo.value.code == 2
    assert "Missing required option" in capsys.readouterr().out


def test_groups_demo(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["groups_demo.py", "--json"])
    runpy.run_path(str(EXAMPLES / "groups_demo.py"), run_name="__main__")

    output = capsys.readouterr().out
    assert "format: json" in output
    assert "'mode': 'fast'" in output
    assert not (tmp_path / "optscan.log").exists()
