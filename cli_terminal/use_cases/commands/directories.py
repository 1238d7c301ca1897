"""
Commands "mkdir" and "rmdir".
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
from cli_terminal.utils.paths import display_name, resolve_path


class DirectoryCommandsHandler(CommandHandlerPort):
    """Handler for creating and removing directories.

    Each argument is processed on its own: a failure adds a line to the output
    and the remaining arguments are still attempted.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, Callable[[list[str], Session], CommandResult]] = {
            "mkdir": self.mkdir,
            "rmdir": self.rmdir,
        }

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "mkdir",
                "usage": "mkdir",
                "description": "creates a new directory",
            },
            {
                "name": "rmdir",
                "usage": "rmdir",
                "description": "removes an empty directory",
            },
        ]

    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(name)
        return command(args, session)

    def mkdir(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.error(
                ErrorKind.USAGE, "mkdir", "mkdir: too few arguments\n"
            )

        result = CommandResult()
        for arg in args:
            path = resolve_path(arg, session.current_directory)
            name = display_name(path)
            status = self._fs.make_dirs(path)
            if status is FsStatus.OK:
                self._logger.info(f"Created directory {path}")
            elif status is FsStatus.EXISTS:
                result.fail(
                    ErrorKind.CONFLICT,
                    "mkdir",
                    f"mkdir: A subdirectory or file already exists: '{name}'\n",
                    path,
                )
            else:
                result.fail(
                    ErrorKind.IO,
                    "mkdir",
                    f"mkdir: An error occurred, can't create the directory: '{name}'\n",
                    path,
                )
        return result

    def rmdir(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.error(
                ErrorKind.USAGE, "rmdir", "rmdir: too few arguments\n"
            )

        result = CommandResult()
        for arg in args:
            path = resolve_path(arg, session.current_directory)
            name = display_name(path)
            status = self._fs.remove_dir(path)
            if status is FsStatus.OK:
                self._logger.info(f"Removed directory {path}")
            elif status is FsStatus.NOT_FOUND:
                result.fail(
                    ErrorKind.NOT_FOUND, "rmdir", f"rmdir: '{name}' does not exist.\n", path
                )
            elif status is FsStatus.NOT_A_DIRECTORY:
                result.fail(
                    ErrorKind.TYPE_MISMATCH,
                    "rmdir",
                    f"rmdir: '{name}' is not a directory.\n",
                    path,
                )
            elif status is FsStatus.NOT_EMPTY:
                result.fail(
                    ErrorKind.CONFLICT, "rmdir", f"rmdir: '{name}' is not empty.\n", path
                )
            else:
                result.fail(
                    ErrorKind.IO,
                    "rmdir",
                    f"rmdir: An error occurred while removing directory '{name}'\n",
                    path,
                )
        return result
