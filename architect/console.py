"""Console messages shown to the user.

Three categories: info and success lines go to stdout, error lines to stderr.
"""

from __future__ import annotations

import sys

VERSION = "Architect version - v0.1"
USAGE = "Architect Usage: [--build | --clean | --version]"


def info(message: str) -> None:
    print(f"Info: {message}")


def success(message: str) -> None:
    print(f"Success: {message}")


def error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
