"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from cli_terminal.adapters.console.rich_console_adapter import RichConsoleAdapter
from cli_terminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from cli_terminal.config.settings import Settings
from cli_terminal.entities.result import CommandResult
from cli_terminal.entities.session import Session
from cli_terminal.exceptions import UnknownCommandError
from cli_terminal.ports.commands.command_handler_port import (
    CommandHandlerPort,
    CommandSpec,
)
from cli_terminal.ports.console.console_port import ConsolePort
from cli_terminal.ports.files.file_system_port import FileSystemPort
from cli_terminal.use_cases.commands.directories import DirectoryCommandsHandler
from cli_terminal.use_cases.commands.files import FileCommandsHandler
from cli_terminal.use_cases.commands.navigation import NavigationCommandsHandler
from cli_terminal.use_cases.commands.system import SystemCommandsHandler
from cli_terminal.use_cases.terminal.execute_command import ExecuteCommandUseCase
from cli_terminal.use_cases.terminal.run_terminal import RunTerminalUseCase


class CompositeCommandsHandler(CommandHandlerPort):
    """Combine several command handlers into one dispatch table."""

    def __init__(self, *handlers: CommandHandlerPort) -> None:
        self._handlers = list(handlers)

    def register(self, handler: CommandHandlerPort) -> None:
        self._handlers.append(handler)

    def available_commands(self) -> list[CommandSpec]:
        commands: list[CommandSpec] = []
        for h in self._handlers:
            commands.extend(h.available_commands())
        return commands

    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        for h in self._handlers:
            try:
                return h.dispatch(name, args, session)
            except UnknownCommandError:
                # This handler doesn't own this command; try next
                continue
        raise UnknownCommandError(name)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, loaded from the environment on first use.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                encoding=self.get_settings().encoding
            )
        return self._instances["file_system"]

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter()
        return self._instances["console"]

    def get_commands_handler(self) -> CommandHandlerPort:
        """
        Get the dispatch table holding every supported command.

        Returns:
            Composite handler over the navigation, directory, file and system commands
        """
        if "commands_handler" not in self._instances:
            fs = self.get_file_system()
            composite = CompositeCommandsHandler(
                NavigationCommandsHandler(fs),
                DirectoryCommandsHandler(fs),
                FileCommandsHandler(fs),
            )
            composite.register(SystemCommandsHandler(composite.available_commands))
            self._instances["commands_handler"] = composite
        return self._instances["commands_handler"]

    def get_execute_command_use_case(self) -> ExecuteCommandUseCase:
        """
        Get execute command use case with injected dependencies.

        Returns:
            Configured ExecuteCommandUseCase
        """
        if "execute_command_use_case" not in self._instances:
            self._instances["execute_command_use_case"] = ExecuteCommandUseCase(
                self.get_commands_handler(),
                self.get_file_system(),
                self.get_console(),
            )
        return self._instances["execute_command_use_case"]

    def get_run_terminal_use_case(self) -> RunTerminalUseCase:
        """
        Get the interactive loop use case with injected dependencies.

        Returns:
            Configured RunTerminalUseCase
        """
        if "run_terminal_use_case" not in self._instances:
            self._instances["run_terminal_use_case"] = RunTerminalUseCase(
                self.get_execute_command_use_case(),
                self.get_console(),
                prompt_suffix=self.get_settings().prompt_suffix,
            )
        return self._instances["run_terminal_use_case"]

    def create_session(self, directory: Optional[str] = None) -> Session:
        """
        Create a new session.

        Args:
            directory: Starting directory; defaults to the configured start directory

        Returns:
            Session whose current directory is the absolute starting directory
        """
        start = directory or self.get_settings().start_directory
        session = Session(start)
        self._logger.info(f"Created session in {session.current_directory}")
        return session

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
