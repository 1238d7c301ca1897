"""
Use case for executing one command line, honoring output redirection.
"""

import logging
from typing import Optional

from cli_terminal.entities.command import CommandInvocation, Redirection
from cli_terminal.entities.result import CommandError, CommandResult, ErrorKind
from cli_terminal.entities.session import Session
from cli_terminal.exceptions import UnknownCommandError
from cli_terminal.ports.commands.command_handler_port import CommandHandlerPort
from cli_terminal.ports.console.console_port import ConsolePort
from cli_terminal.ports.files.file_system_port import FileSystemPort, FsStatus
from cli_terminal.utils.paths import display_name, resolve_path


class ExecuteCommandUseCase:
    """Use case that dispatches a command and routes its output.

    Output goes either to the console or, when the arguments end with
    ``> file`` or ``>> file``, to that file. Never both.
    """

    def __init__(
        self,
        commands: CommandHandlerPort,
        file_system: FileSystemPort,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            commands: Dispatch table for every supported command
            file_system: Port used to write redirected output
            console: Console receiving output that is not redirected
            logger: Logger instance to use for logging
        """
        self._commands = commands
        self._fs = file_system
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    def execute_line(self, line: str, session: Session) -> Optional[CommandResult]:
        """
        Parse and execute a raw input line.

        Returns:
            The command result, or None for a blank line
        """
        invocation = CommandInvocation.parse(line)
        if invocation is None:
            return None
        return self.execute(invocation, session)

    def execute(self, invocation: CommandInvocation, session: Session) -> CommandResult:
        """
        Execute a parsed command.

        Args:
            invocation: Command name and arguments, possibly ending in a redirection
            session: Session the command runs in

        Returns:
            The command result; its output has already been printed or redirected
        """
        invocation, redirection = invocation.split_redirection()
        result = self._dispatch(invocation, session)
        if redirection is None:
            self._console.write(result.output)
        else:
            self._redirect(invocation.name, result, redirection, session)
        return result

    def _dispatch(self, invocation: CommandInvocation, session: Session) -> CommandResult:
        name = invocation.name
        self._logger.info(f"Executing command: {name} {' '.join(invocation.args)}")
        try:
            return self._commands.dispatch(name, list(invocation.args), session)
        except UnknownCommandError:
            return CommandResult.error(
                ErrorKind.UNKNOWN_COMMAND,
                name,
                f"'{name}' is not recognized as an internal or external command\n",
            )
        except Exception as e:
            self._logger.error(f"Error executing {name}: {e}")
            return CommandResult.error(ErrorKind.IO, name, f"{name}: {e}\n")

    def _redirect(
        self,
        name: str,
        result: CommandResult,
        redirection: Redirection,
        session: Session,
    ) -> None:
        target = resolve_path(redirection.target, session.current_directory)
        status = self._fs.write_text(target, result.output, append=redirection.append)
        if status is FsStatus.OK:
            self._logger.info(
                f"Wrote output of {name} to {target} ({redirection.mode.value})"
            )
            return
        message = f"{name}: cannot write to '{display_name(target)}'\n"
        result.errors.append(
            CommandError(kind=ErrorKind.IO, command=name, message=message, target=target)
        )
        self._console.write(message)
