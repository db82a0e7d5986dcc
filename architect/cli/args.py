from __future__ import annotations

import argparse

DEFAULT_CONFIG = "architect.yml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="architect")

    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to config file",
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        "--build",
        dest="action",
        action="store_const",
        const="--build",
        help="Compile the executable, then run the build commands",
    )
    actions.add_argument(
        "--clean",
        dest="action",
        action="store_const",
        const="--clean",
        help="Remove the executable and its output folder",
    )
    actions.add_argument(
        "--version",
        dest="action",
        action="store_const",
        const="--version",
        help="Print the version",
    )

    # task
    parser.add_argument(
        "task",
        nargs="?",
        help="Name of the task to run",
    )

    return parser
