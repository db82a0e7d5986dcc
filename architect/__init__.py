"""Architect: a small declarative build and task runner.

A user script describes the build once and hands the requested action over::

    import sys

    from architect import BuildConfig, plan

    config = BuildConfig(source_files=("main.c",), output_folder="bin")
    plan(config, sys.argv[1] if len(sys.argv) > 1 else None)

Call :func:`architect.core.logging.setup_logging` first to route the
diagnostic log through stderr.
"""

from architect.build import build, clean
from architect.cli import plan
from architect.config import BuildConfig, ConfigError, TaskConfig
from architect.tasks import run_tasks

__all__ = [
    "BuildConfig",
    "TaskConfig",
    "ConfigError",
    "build",
    "clean",
    "plan",
    "run_tasks",
]
