"""
Commands "pwd", "cd" and "ls": moving around and looking at the current directory.
"""

import logging
from typing import Callable, Optional

from cli_terminal.entities.result import CommandResult, ErrorKind
from cli_terminal.entities.session import Session
from cli_terminal.exceptions import UnknownCommandError
from cli_terminal.ports.commands.command_handler_port import (
    CommandHandlerPort,
    CommandSpec,
)
from cli_terminal.ports.files.file_system_port import FileSystemPort, FsStatus
from cli_terminal.utils.paths import display_name, normalize_path, resolve_path

LS_SHOW_ALL = "-a"
LS_REVERSE = "-r"


class NavigationCommandsHandler(CommandHandlerPort):
    """Handler for the commands that read or change the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the navigation commands handler.

        Args:
            file_system: Port used to inspect the file system
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, Callable[[list[str], Session], CommandResult]] = {
            "pwd": self.pwd,
            "cd": self.cd,
            "ls": self.ls,
        }

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "pwd",
                "usage": "pwd",
                "description": "prints the current working directory",
            },
            {
                "name": "cd",
                "usage": "cd",
                "description": "changes the current working directory",
            },
            {
                "name": "ls",
                "usage": "ls",
                "description": "lists the contents of the current directory",
            },
            {
                "name": "ls",
                "usage": "ls -a",
                "description": "lists all contents even entries starting with .(hidden files)",
            },
            {
                "name": "ls",
                "usage": "ls -r",
                "description": "lists the contents of the current directory in reverse order",
            },
        ]

    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(name)
        return command(args, session)

    def pwd(self, args: list[str], session: Session) -> CommandResult:
        return CommandResult(output=session.current_directory + "\n")

    def cd(self, args: list[str], session: Session) -> CommandResult:
        result = CommandResult()
        if not args:
            return result
        if len(args) > 1:
            result.fail(ErrorKind.USAGE, "cd", "cd: too many arguments.\n")
            return result

        target = resolve_path(args[0], session.current_directory)
        name = display_name(target)
        if not self._fs.exists(target):
            result.fail(
                ErrorKind.NOT_FOUND,
                "cd",
                f"cd: no such file or directory: {name}\n",
                target,
            )
        elif not self._fs.is_dir(target):
            result.fail(
                ErrorKind.TYPE_MISMATCH, "cd", f"cd: not a directory: {name}\n", target
            )
        else:
            session.change_directory(normalize_path(target))
            self._logger.info(f"Changed directory to {session.current_directory}")
        return result

    def ls(self, args: list[str], session: Session) -> CommandResult:
        if len(args) > 1:
            return CommandResult.error(ErrorKind.USAGE, "ls", "ls: too many arguments\n")
        flag = args[0] if args else None
        if flag not in (None, LS_SHOW_ALL, LS_REVERSE):
            return CommandResult.error(
                ErrorKind.USAGE,
                "ls",
                "ls: invalid argument (currently only supports ls, ls -r, ls -a)\n",
            )

        directory = session.current_directory
        status, entries = self._fs.list_dir(directory)
        if status is not FsStatus.OK:
            return CommandResult.error(
                ErrorKind.IO,
                "ls",
                f"ls: cannot access '{display_name(directory)}'\n",
                directory,
            )

        if flag == LS_REVERSE:
            entries.reverse()
        if flag != LS_SHOW_ALL:
            entries = [e for e in entries if not e.startswith(".")]
        return CommandResult(output="".join(f"{e} " for e in entries) + "\n")
