import subprocess
import time
from typing import Iterable

import structlog

from architect import console

from .types import CommandResult, ExitStatusKind

log = structlog.get_logger("architect.executor")


def execute_command(command: str) -> CommandResult:
    start = time.monotonic()
    try:
        result = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        log.warning("executor.spawn_failed", command=command, error=str(exc))
        return CommandResult(
            command, False, ExitStatusKind.UNKNOWN, None, "", time.monotonic() - start
        )
    duration = time.monotonic() - start

    if result.returncode < 0:
        kind = ExitStatusKind.SIGNAL
        code = -result.returncode
    else:
        kind = ExitStatusKind.EXIT
        code = result.returncode

    log.debug(
        "executor.command_finished",
        command=command,
        returncode=result.returncode,
        duration_s=round(duration, 3),
    )
    return CommandResult(
        command, result.returncode == 0, kind, code, result.stdout or "", duration
    )


def run_commands(commands: Iterable[str]) -> bool:
    """Run every command in order and report each outcome.

    A failing command does not stop the ones after it. Returns True only if
    all of them succeeded.
    """
    all_successful = True

    for command in commands:
        result = execute_command(command)

        if result.output:
            console.info(f"Command output: {result.output}")

        if result.succeeded:
            console.info(f"Command successful: {command}")
        elif result.exit_code is None and result.exit_status_kind is ExitStatusKind.UNKNOWN:
            console.error(f"Unable to execute command: {command}")
            all_successful = False
        else:
            console.error(f"Command failed: {command} ({result.describe_exit()})")
            all_successful = False

    return all_successful
