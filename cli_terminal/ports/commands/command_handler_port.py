"""
Port and types for named terminal commands.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from cli_terminal.entities.result import CommandResult
from cli_terminal.entities.session import Session


class CommandSpec(TypedDict):
    """Specification of a command as shown by ``help``."""

    name: str
    usage: str
    description: str


class CommandHandlerPort(ABC):
    """
    Port interface for a group of terminal commands.

    A handler exposes the commands it owns and runs them against a session.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the commands this handler owns.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        """
        Run a command.

        Args:
            name: Command name
            args: Arguments, redirection already stripped
            session: Session whose current directory the command works in

        Returns:
            Captured output and errors of the command

        Raises:
            UnknownCommandError: If this handler does not own the command
        """
        pass
