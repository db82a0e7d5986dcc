from .executor import execute_command, run_commands
from .types import CommandResult, ExitStatusKind

__all__ = ["execute_command", "run_commands", "CommandResult", "ExitStatusKind"]
