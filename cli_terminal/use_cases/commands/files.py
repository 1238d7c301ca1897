"""
Commands "touch", "rm", "mv" and "cat": working with regular files.
"""

import logging
import os
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


class FileCommandsHandler(CommandHandlerPort):
    """Handler for file commands."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the file commands handler.

        Args:
            file_system: Port used for every file access
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._commands: dict[str, Callable[[list[str], Session], CommandResult]] = {
            "touch": self.touch,
            "mv": self.mv,
            "rm": self.rm,
            "cat": self.cat,
        }

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "touch",
                "usage": "touch",
                "description": "creates a new file",
            },
            {
                "name": "mv",
                "usage": "mv",
                "description": (
                    "command is used to move or rename files and directories "
                    "from one location to another in a file system."
                ),
            },
            {
                "name": "rm",
                "usage": "rm",
                "description": "removes a file",
            },
            {
                "name": "cat",
                "usage": "cat",
                "description": "prints the contents of a file",
            },
        ]

    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(name)
        return command(args, session)

    def touch(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.error(
                ErrorKind.USAGE, "touch", "touch: missing file operand\n"
            )

        result = CommandResult()
        for arg in args:
            path = resolve_path(arg, session.current_directory)
            status = self._fs.create_file(path)
            # An existing file is left untouched
            if status in (FsStatus.OK, FsStatus.EXISTS):
                continue
            result.fail(
                ErrorKind.IO,
                "touch",
                f"touch: An error occurred while creating file '{display_name(path)}'\n",
                path,
            )
        return result

    def mv(self, args: list[str], session: Session) -> CommandResult:
        """
        Move or rename a file or directory.

        If the destination is an existing directory the source is moved into it
        under its own name, otherwise it is renamed to exactly the destination.
        """
        if not args:
            return CommandResult.error(ErrorKind.USAGE, "mv", "mv: missing file operand\n")
        if len(args) == 1:
            return CommandResult.error(
                ErrorKind.USAGE,
                "mv",
                f"mv: missing destination file operand after '{args[0]}'\n",
            )
        if len(args) > 2:
            return CommandResult.error(ErrorKind.USAGE, "mv", "mv: too many arguments\n")

        source = resolve_path(args[0], session.current_directory)
        destination = resolve_path(args[1], session.current_directory)
        if not self._fs.exists(source):
            return CommandResult.error(
                ErrorKind.NOT_FOUND,
                "mv",
                f"mv: cannot stat '{display_name(source)}': No such file or directory\n",
                source,
            )
        if self._fs.is_dir(destination):
            destination = os.path.join(destination, display_name(source))

        status = self._fs.rename(source, destination)
        if status is not FsStatus.OK:
            return CommandResult.error(
                ErrorKind.IO,
                "mv",
                f"mv: cannot move '{display_name(source)}' to '{display_name(destination)}'\n",
                source,
            )
        self._logger.info(f"Moved {source} to {destination}")
        return CommandResult()

    def rm(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.error(ErrorKind.USAGE, "rm", "rm: too few arguments\n")

        result = CommandResult()
        for arg in args:
            path = resolve_path(arg, session.current_directory)
            name = display_name(path)
            status = self._fs.remove_file(path)
            if status is FsStatus.OK:
                self._logger.info(f"Removed file {path}")
            elif status is FsStatus.NOT_FOUND:
                result.fail(
                    ErrorKind.NOT_FOUND,
                    "rm",
                    f"rm: The system cannot find the file specified: '{name}'\n",
                    path,
                )
            elif status is FsStatus.IS_A_DIRECTORY:
                result.fail(
                    ErrorKind.TYPE_MISMATCH,
                    "rm",
                    f"rm: cannot remove '{name}': is a directory\n",
                    path,
                )
            else:
                result.fail(
                    ErrorKind.IO,
                    "rm",
                    f"rm: An error occurred while trying to delete '{name}'\n",
                    path,
                )
        return result

    def cat(self, args: list[str], session: Session) -> CommandResult:
        if not args:
            return CommandResult.error(
                ErrorKind.USAGE, "cat", "cat: Invalid number of arguments\n"
            )

        result = CommandResult()
        for arg in args:
            path = resolve_path(arg, session.current_directory)
            name = display_name(path)
            status, content = self._fs.read_text(path)
            if status is FsStatus.OK:
                result.write(content)
            elif status is FsStatus.NOT_FOUND:
                result.fail(
                    ErrorKind.NOT_FOUND,
                    "cat",
                    f"cat: {name}: No such file or directory\n",
                    path,
                )
            elif status is FsStatus.IS_A_DIRECTORY:
                result.fail(
                    ErrorKind.TYPE_MISMATCH, "cat", f"cat: {name}: Is a directory\n", path
                )
            else:
                result.fail(
                    ErrorKind.IO,
                    "cat",
                    f"cat: An error occurred, can't read the file: '{name}'\n",
                    path,
                )
        return result
