from .commands import main, plan, run_cli

__all__ = ["main", "plan", "run_cli"]
