from .runner import execute_task, run_tasks

__all__ = ["execute_task", "run_tasks"]
