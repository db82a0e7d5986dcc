from __future__ import annotations

import sys
from pathlib import Path

import pytest

from architect.config.types import ConfigError, TaskConfig
from architect.tasks.runner import execute_task, run_tasks


def _py(code: str) -> str:
    exe = str(Path(sys.executable))
    return f'"{exe}" -c "{code}"'


def _errors(err: str) -> list[str]:
    return [line for line in err.splitlines() if line.startswith("Error: ")]


def test_runs_only_the_selected_task(tmp_path: Path) -> None:
    log = tmp_path / "log.txt"
    tasks = {
        "build": {"name": "build", "commands": [_py(f"open(r'{log}','a').write('build\\n')")]},
        "test": {"commands": [_py(f"open(r'{log}','a').write('test\\n')")]},
    }

    assert run_tasks(tasks, "build") is True
    assert log.read_text(encoding="utf-8").splitlines() == ["build"]


def test_accepts_task_configs(capsys: pytest.CaptureFixture[str]) -> None:
    tasks = {"hello": TaskConfig("hello", ("echo hi",))}

    assert run_tasks(tasks, "hello") is True
    assert "Info: Command output: hi" in capsys.readouterr().out


def test_missing_task_name_is_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    for name in (None, ""):
        assert run_tasks({"a": {"commands": ["true"]}}, name) is False

    assert _errors(capsys.readouterr().err) == ["Error: Please provide a task name."] * 2


def test_unknown_task_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_tasks({"a": {"commands": ["true"]}}, "deploy") is False
    assert _errors(capsys.readouterr().err) == ["Error: Task 'deploy' not found."]


def test_task_without_commands_is_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert run_tasks({"lint": {}}, "lint") is False
    assert _errors(capsys.readouterr().err) == [
        "Error: Task 'lint' does not have a 'commands' field."
    ]


def test_failed_command_fails_the_task(capsys: pytest.CaptureFixture[str]) -> None:
    ok = execute_task(TaskConfig("check", ("true", "false")))
    errors = _errors(capsys.readouterr().err)

    assert ok is False
    assert errors[-1] == "Error: Task 'check' failed."
    assert len(errors) == 2


def test_task_name_field_is_used_in_messages(capsys: pytest.CaptureFixture[str]) -> None:
    run_tasks({"ci": {"name": "continuous", "commands": ["false"]}}, "ci")
    assert "Error: Task 'continuous' failed." in capsys.readouterr().err


def test_malformed_tasks_raise_config_error() -> None:
    with pytest.raises(ConfigError):
        run_tasks({"a": {"commands": "echo hi"}}, "a")
