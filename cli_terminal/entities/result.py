"""
Command result entities.

Every command reports its outcome as captured text. Failures are also kept as
``CommandError`` values so callers can branch on the kind of failure without
parsing the text.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    USAGE = "usage"
    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    CONFLICT = "conflict"
    IO = "io"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class CommandError:
    kind: ErrorKind
    command: str
    message: str
    target: Optional[str] = None


@dataclass
class CommandResult:
    """Captured output of a command plus the errors it reported."""

    output: str = ""
    errors: list[CommandError] = field(default_factory=list)
    exit_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_kinds(self) -> list[ErrorKind]:
        return [e.kind for e in self.errors]

    def write(self, text: str) -> None:
        self.output += text

    def fail(
        self,
        kind: ErrorKind,
        command: str,
        message: str,
        target: Optional[str] = None,
    ) -> CommandError:
        """Record an error and append its message to the captured output."""
        error = CommandError(kind=kind, command=command, message=message, target=target)
        self.errors.append(error)
        self.output += message
        return error

    @classmethod
    def error(
        cls,
        kind: ErrorKind,
        command: str,
        message: str,
        target: Optional[str] = None,
    ) -> "CommandResult":
        result = cls()
        result.fail(kind, command, message, target)
        return result
