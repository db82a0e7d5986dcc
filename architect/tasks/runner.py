from __future__ import annotations

from typing import Any, Mapping

from architect import console
from architect.config.loader import tasks_from
from architect.config.types import TaskConfig
from architect.executor import run_commands


def execute_task(task: TaskConfig) -> bool:
    if task.commands is None:
        console.error(f"Task '{task.name}' does not have a 'commands' field.")
        return False

    if not run_commands(task.commands):
        console.error(f"Task '{task.name}' failed.")
        return False

    return True


def run_tasks(tasks: Mapping[str, Any] | None, task_name: str | None) -> bool:
    if not task_name:
        console.error("Please provide a task name.")
        return False

    task_list = tasks_from(tasks)

    if task_name not in task_list:
        console.error(f"Task '{task_name}' not found.")
        return False

    return execute_task(task_list[task_name])
