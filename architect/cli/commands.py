from __future__ import annotations

import argparse
import sys
from typing import Any, Mapping

from architect import console
from architect.build import build, clean
from architect.config import BuildConfig, ConfigError, load_project
from architect.core.logging import setup_logging
from architect.tasks import run_tasks

from .args import build_parser


def plan(config: BuildConfig | Mapping[str, Any] | None, action: str | None) -> bool:
    match action:
        case "--build":
            return build(config)
        case "--clean":
            return clean(config)
        case "--version":
            print(console.VERSION)
            return True
        case _:
            print(console.USAGE)
            return False


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)

        if args.action is not None and args.task is not None:
            parser.error("a task name can't be combined with --build/--clean/--version")

        if args.action == "--version":
            return _exit_code(plan(None, args.action))
        if args.action is not None:
            return cmd_action(args)
        if args.task is not None:
            return cmd_task(args)

        print(console.USAGE)
        return 2

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_action(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    return _exit_code(plan(project.build, args.action))


def cmd_task(args: argparse.Namespace) -> int:
    project = load_project(args.config)
    return _exit_code(run_tasks(project.tasks, args.task))


def main() -> int:
    setup_logging()
    return run_cli(sys.argv[1:])


def _exit_code(ok: bool) -> int:
    return 0 if ok else 1
