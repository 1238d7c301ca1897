"""
Use case for the interactive prompt/read/execute loop.
"""

import logging
from typing import Optional

from cli_terminal.entities.session import Session
from cli_terminal.ports.console.console_port import ConsolePort
from cli_terminal.use_cases.terminal.execute_command import ExecuteCommandUseCase


class RunTerminalUseCase:
    """Read lines until ``exit`` or end of input, executing each one to completion."""

    def __init__(
        self,
        execute_command_uc: ExecuteCommandUseCase,
        console: ConsolePort,
        prompt_suffix: str = " > ",
        logger: Optional[logging.Logger] = None,
    ):
        self._execute_command_uc = execute_command_uc
        self._console = console
        self._prompt_suffix = prompt_suffix
        self._logger = logger or logging.getLogger(__name__)

    def prompt(self, session: Session) -> str:
        return session.current_directory + self._prompt_suffix

    def execute(self, session: Session) -> int:
        """
        Run the loop.

        Returns:
            Exit code: the one requested by ``exit``, or 0 at end of input
        """
        self._logger.info(f"Terminal started in {session.current_directory}")
        while True:
            try:
                line = self._console.read_line(self.prompt(session))
            except EOFError:
                self._console.write("\n")
                self._logger.info("End of input")
                return 0
            except KeyboardInterrupt:
                # abandon the current line
                self._console.write("\n")
                continue

            result = self._execute_command_uc.execute_line(line, session)
            if result is not None and result.exit_code is not None:
                return result.exit_code
