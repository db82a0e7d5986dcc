from __future__ import annotations

import os
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import PurePath
from typing import Mapping, Sequence

import structlog

from architect import console
from architect.config.types import BuildConfig

log = structlog.get_logger("architect.build")

C_COMPILER = "gcc"
CXX_COMPILER = "g++"

_COMPILER_BY_EXTENSION = {
    ".c": C_COMPILER,
    ".cpp": CXX_COMPILER,
    ".cc": CXX_COMPILER,
    ".cxx": CXX_COMPILER,
    ".c++": CXX_COMPILER,
    ".cp": CXX_COMPILER,
}

PKG_CONFIG = "pkg-config"


def detect_system_compiler(
    config: BuildConfig | None, environ: Mapping[str, str] | None = None
) -> str:
    """Pick a compiler when the configuration names none.

    ``CC`` wins whenever it is set and non-empty. Otherwise the first source
    file with a C or C++ extension decides, and an empty string means no
    compiler could be determined.
    """
    env = os.environ if environ is None else environ
    cc = env.get("CC")
    if cc:
        return cc

    if config is None:
        return ""

    for source in config.source_files:
        compiler = _COMPILER_BY_EXTENSION.get(PurePath(source).suffix)
        if compiler:
            return compiler

    return ""


def get_pkg_config_libs(libs: Sequence[str] | None) -> str:
    if not libs:
        return ""

    try:
        result = subprocess.run(
            [PKG_CONFIG, "--cflags", "--libs", *libs],
            stdout=subprocess.PIPE,
        )
    except OSError as exc:
        log.warning("build.pkg_config_unavailable", libs=list(libs), error=str(exc))
        return ""

    try:
        output = result.stdout.decode()
    except UnicodeDecodeError as exc:
        console.error(f"Unable to read pkg-config output: {exc}")
        return ""

    if output.endswith("\n"):
        output = output[:-1]

    log.debug("build.pkg_config", libs=list(libs), returncode=result.returncode)
    return output


@dataclass(frozen=True)
class BuildPlan:
    compiler: str
    source_files: tuple[str, ...]
    compiler_flags: str
    pkg_config_libs: str
    additional_flags: str
    output_folder: str
    output_executable: str

    @property
    def output_path(self) -> str:
        if self.output_folder:
            return f"{self.output_folder}/{self.output_executable}"
        return self.output_executable

    def is_buildable(self) -> bool:
        return bool(
            self.source_files and self.output_executable and self.compiler.strip()
        )

    def argv(self) -> list[str]:
        """Compiler invocation: inputs, then flag groups, then the output."""
        return [
            *shlex.split(self.compiler),
            *self.source_files,
            *shlex.split(self.compiler_flags),
            *shlex.split(self.pkg_config_libs),
            *shlex.split(self.additional_flags),
            "-o",
            self.output_path,
        ]


def resolve_plan(
    config: BuildConfig, environ: Mapping[str, str] | None = None
) -> BuildPlan:
    compiler = config.compiler
    if compiler is None:
        compiler = detect_system_compiler(config, environ)

    plan = BuildPlan(
        compiler=compiler,
        source_files=tuple(config.source_files),
        compiler_flags=config.compiler_flags,
        pkg_config_libs=get_pkg_config_libs(config.libs),
        additional_flags=config.additional_flags,
        output_folder=config.output_folder,
        output_executable=config.executable_name(),
    )
    log.debug("build.plan_resolved", compiler=plan.compiler, output=plan.output_path)
    return plan
