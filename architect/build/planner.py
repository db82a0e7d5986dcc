from __future__ import annotations

import os
import shlex
import subprocess
from typing import Any, Mapping

import structlog

from architect import console
from architect.config.loader import build_config_from
from architect.config.types import BuildConfig
from architect.executor import run_commands

from .resolve import BuildPlan, resolve_plan

log = structlog.get_logger("architect.build")


def build(config: BuildConfig | Mapping[str, Any] | None = None) -> bool:
    """Compile the configured executable, then run the follow-up commands.

    Without anything to compile the commands run on their own. The result is
    the outcome of the compiler (follow-up failures are reported but do not
    change it), of the standalone commands, or False when there is nothing
    to do.
    """
    config = build_config_from(config)
    plan = resolve_plan(config)

    if plan.is_buildable():
        if not _compile(plan):
            console.error("Build failed! Please check your parameters.")
            return False

        console.success("Build complete!")
        if config.commands is not None:
            run_commands(config.commands)
        return True

    if config.commands is not None:
        console.info("Executing commands without building.")
        return run_commands(config.commands)

    console.error(
        "Not enough information provided for build or commands. "
        "Please check your parameters!"
    )
    return False


def _compile(plan: BuildPlan) -> bool:
    if plan.output_folder and not os.path.exists(plan.output_folder):
        try:
            os.mkdir(plan.output_folder)
        except OSError as exc:
            console.error(f"Unable to create output folder '{plan.output_folder}': {exc}")
            return False

    try:
        argv = plan.argv()
    except ValueError as exc:
        console.error(f"Unable to parse the compiler command: {exc}")
        return False

    console.info(f"Building command: {shlex.join(argv)}")

    try:
        result = subprocess.run(argv)
    except OSError as exc:
        log.warning("build.compiler_unavailable", compiler=plan.compiler, error=str(exc))
        return False

    log.debug("build.compiler_finished", returncode=result.returncode)
    return result.returncode == 0
