# tests/test_cli.py
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from architect.cli import plan, run_cli
from architect.config.types import BuildConfig


def _py(code: str) -> str:
    exe = str(Path(sys.executable))
    # This returns a shell command string. JSON will escape it safely.
    return f'"{exe}" -c "{code}"'


def _write_json_config(path: Path, config: dict) -> None:
    path.write_text(json.dumps(config), encoding="utf-8")


def test_version_does_not_need_a_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = run_cli(["--config", str(tmp_path / "missing.json"), "--version"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == ["Architect version - v0.1"]


def test_no_action_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    code = run_cli([])
    out = capsys.readouterr().out

    assert code == 2
    assert "Architect Usage: [--build | --clean | --version]" in out


def test_build_runs_commands_only_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "architect.json"
    log = tmp_path / "log.txt"
    _write_json_config(
        cfg,
        {"build": {"commands": [_py(f"open(r'{log}','a').write('hi\\\\n')")]}},
    )

    code = run_cli(["--config", str(cfg), "--build"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Executing commands without building." in out
    assert log.read_text(encoding="utf-8").splitlines() == ["hi"]


def test_build_with_nothing_to_do_returns_1(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "architect.json"
    _write_json_config(cfg, {"build": {}})

    code = run_cli(["--config", str(cfg), "--build"])
    err = capsys.readouterr().err

    assert code == 1
    assert "Not enough information" in err


def test_clean_removes_executable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "architect.json"
    _write_json_config(cfg, {"build": {"output_folder": "out", "output_executable": "app"}})
    (tmp_path / "out").mkdir()
    (tmp_path / "out" / "app").write_text("", encoding="utf-8")

    code = run_cli(["--config", str(cfg), "--clean"])

    assert code == 0
    assert not (tmp_path / "out").exists()


def test_task_runs_by_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "architect.json"
    log = tmp_path / "log.txt"
    _write_json_config(
        cfg,
        {
            "tasks": {
                "a": {"commands": [_py(f"open(r'{log}','a').write('a\\\\n')")]},
                "b": {"commands": [_py(f"open(r'{log}','a').write('b\\\\n')")]},
            }
        },
    )

    code = run_cli(["--config", str(cfg), "b"])
    _ = capsys.readouterr()

    assert code == 0
    assert log.read_text(encoding="utf-8").splitlines() == ["b"]


def test_failed_task_returns_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "architect.json"
    _write_json_config(cfg, {"tasks": {"fail": {"commands": [_py("raise SystemExit(5)")]}}})

    code = run_cli(["--config", str(cfg), "fail"])
    err = capsys.readouterr().err

    assert code == 1
    assert "Task 'fail' failed." in err


def test_unknown_task_returns_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "architect.json"
    _write_json_config(cfg, {"tasks": {"a": {"commands": ["true"]}}})

    code = run_cli(["--config", str(cfg), "nope"])
    err = capsys.readouterr().err

    assert code == 1
    assert "Task 'nope' not found." in err


def test_invalid_config_path_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.json"

    code = run_cli(["--config", str(missing), "--build"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.err != ""


def test_task_and_action_together_is_a_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as e:
        run_cli(["--build", "hello"])

    assert e.value.code == 2


def test_plan_dispatches_on_action(capsys: pytest.CaptureFixture[str]) -> None:
    assert plan(BuildConfig(commands=("true",)), "--build") is True
    assert plan(None, "--version") is True
    assert plan(None, "--deploy") is False
    assert plan(None, None) is False

    out = capsys.readouterr().out
    assert "Architect version - v0.1" in out
    assert out.count("Architect Usage:") == 2
