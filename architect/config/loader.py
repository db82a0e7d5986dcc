import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    BuildConfig,
    ConfigError,
    ProjectConfig,
    TaskConfig,
    UnsupportedConfigFormatError,
)

_PROJECT_KEYS = {"build", "tasks"}
_BUILD_STRING_KEYS = {
    "output_executable",
    "compiler",
    "compiler_flags",
    "additional_flags",
    "output_folder",
}
_BUILD_LIST_KEYS = {"source_files", "libs", "commands"}
_TASK_KEYS = {"name", "commands"}


def load_project(path: str | Path) -> ProjectConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    project = _build_project_config(raw_file)
    return project


def build_config_from(value: BuildConfig | Mapping[str, Any] | None) -> BuildConfig:
    """Coerce ``value`` into a validated :class:`BuildConfig`.

    ``None`` is an empty configuration. A mapping is checked the same way a
    ``build`` section of a config file is.
    """
    if value is None:
        return BuildConfig()

    if isinstance(value, BuildConfig):
        return value

    if not isinstance(value, Mapping):
        raise ConfigError(f"Build configuration must be a mapping, got {type(value)}")

    return _build_build_config(value)


def tasks_from(value: Mapping[str, Any] | None) -> dict[str, TaskConfig]:
    if value is None:
        return {}

    if not isinstance(value, Mapping):
        raise ConfigError(f"'tasks' must be a mapping, got {type(value)}")

    tasks: dict[str, TaskConfig] = {}

    for name, fields in value.items():
        if not isinstance(name, str):
            raise ConfigError(f"Task name must be a string, got {type(name)}")

        name_norm = name.strip()

        if len(name_norm) < 1:
            raise ConfigError("A task name can't be empty")

        if name_norm in tasks:
            raise ConfigError(f"Duplicate task name after normalization: {name_norm}")

        if isinstance(fields, TaskConfig):
            tasks[name_norm] = fields
            continue

        if fields is None:
            fields = {}

        if not isinstance(fields, Mapping):
            raise ConfigError(f"{name_norm} must be a mapping")

        tasks[name_norm] = _build_task_config(name_norm, fields)

    return tasks


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: YAML parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc

    return raw_file


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: JSON parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_project_config(raw: Mapping[str, Any]) -> ProjectConfig:
    for key in raw.keys():
        if key not in _PROJECT_KEYS:
            raise ConfigError(f"Can't process top-level field: {key}")

    if "build" in raw and not isinstance(raw["build"], Mapping):
        raise ConfigError(f"'build' must be a mapping, got {type(raw['build'])}")

    build = build_config_from(raw.get("build"))
    tasks = tasks_from(raw.get("tasks"))

    return ProjectConfig(build=build, tasks=tasks)


def _build_build_config(fields: Mapping[str, Any]) -> BuildConfig:
    values: dict[str, Any] = {}

    for key, item in fields.items():
        if key in _BUILD_STRING_KEYS:
            if item is None:
                continue
            if not isinstance(item, str):
                raise ConfigError(f"build: '{key}' should be a string")
            values[key] = item
        elif key in _BUILD_LIST_KEYS:
            if item is None:
                continue
            values[key] = _string_list(f"build: '{key}'", item)
        else:
            raise ConfigError(f"build: Can't process: {key}")

    return BuildConfig(**values)


def _build_task_config(name: str, fields: Mapping[str, Any]) -> TaskConfig:
    for field in fields.keys():
        if field not in _TASK_KEYS:
            raise ConfigError(f"{name}: Can't process: {field}")

    task_name = name
    if "name" in fields:
        if not isinstance(fields["name"], str) or len(fields["name"].strip()) < 1:
            raise ConfigError(f"{name}: The name should be a non-empty string")
        task_name = fields["name"].strip()

    # A missing 'commands' field is reported when the task is run.
    commands = None
    if fields.get("commands") is not None:
        commands = _string_list(f"{name}: 'commands'", fields["commands"])

    return TaskConfig(task_name, commands)


def _string_list(where: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"{where} should be a list")

    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{where}: {item!r} should be a string")

    return tuple(value)
