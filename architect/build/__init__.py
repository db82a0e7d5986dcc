from .cleaner import clean
from .planner import build
from .resolve import (
    BuildPlan,
    detect_system_compiler,
    get_pkg_config_libs,
    resolve_plan,
)

__all__ = [
    "build",
    "clean",
    "BuildPlan",
    "detect_system_compiler",
    "get_pkg_config_libs",
    "resolve_plan",
]
