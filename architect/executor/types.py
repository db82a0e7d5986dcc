from dataclasses import dataclass
from enum import Enum


class ExitStatusKind(str, Enum):
    EXIT = "exit"
    SIGNAL = "signal"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CommandResult:
    command: str
    succeeded: bool
    exit_status_kind: ExitStatusKind
    exit_code: int | None
    output: str
    duration_s: float = 0.0

    def describe_exit(self) -> str:
        code = "unknown" if self.exit_code is None else str(self.exit_code)
        return f"exit status: {self.exit_status_kind.value}, exit code: {code}"
