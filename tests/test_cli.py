import json
import sys
from pathlib import Path

import pytest

import main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["main.py", *args])
    main.main()


def test_list_paths(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _run(monkeypatch, "--list-paths")
    out = capsys.readouterr().out
    assert "Available paths:" in out
    assert "s_curve" in out


def test_sample_bundled_path_and_export(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
) -> None:
    output = tmp_path / "out.json"
    _run(monkeypatch, "s_curve", "--samples", "3", "--loop", "--output", str(output))

    out = capsys.readouterr().out
    assert "closed loop : True" in out
    assert "t=0.500" in out
    assert len(json.loads(output.read_text())["samples"]) == 3


def test_unknown_path_exits(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        _run(monkeypatch, "does-not-exist")
    assert "not found" in capsys.readouterr().out
