from .loader import build_config_from, load_project, tasks_from
from .types import BuildConfig, ConfigError, ProjectConfig, TaskConfig

__all__ = [
    "load_project",
    "build_config_from",
    "tasks_from",
    "BuildConfig",
    "ProjectConfig",
    "TaskConfig",
    "ConfigError",
]
