"""
Commands "help" and "exit".
"""

import logging
from typing import Callable, Optional

from cli_terminal.entities.result import CommandResult
from cli_terminal.entities.session import Session
from cli_terminal.exceptions import UnknownCommandError
from cli_terminal.ports.commands.command_handler_port import (
    CommandHandlerPort,
    CommandSpec,
)

HELP_SPEC: CommandSpec = {
    "name": "help",
    "usage": "help",
    "description": "prints the list of supported commands",
}
EXIT_SPEC: CommandSpec = {
    "name": "exit",
    "usage": "exit",
    "description": "exits the terminal",
}
REDIRECTION_SPECS: list[CommandSpec] = [
    {
        "name": ">",
        "usage": ">",
        "description": (
            "Redirects the output of the first command to be written to a file. "
            "If the file does not exist, it will be created. "
            "If the file exists, its original content will be replaced."
        ),
    },
    {
        "name": ">>",
        "usage": ">>",
        "description": (
            "Redirects the output of the first command to be written to a file. "
            "If the file does not exist, it will be created. "
            "If the file exists, it appends to the file."
        ),
    },
]


def format_help(specs: list[CommandSpec]) -> str:
    """Render numbered ``N.usage -> description`` lines."""
    lines = []
    for i, spec in enumerate(specs, start=1):
        label = f"{i}.{spec['usage']}"
        lines.append(f"{label:<11}-> {spec['description']}\n")
    return "".join(lines)


class SystemCommandsHandler(CommandHandlerPort):
    """Handler for terminal-level commands.

    ``help`` lists every command known to ``spec_provider`` (usually the full
    dispatch table), so it never goes stale when a handler gains a command.
    """

    def __init__(
        self,
        spec_provider: Callable[[], list[CommandSpec]],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._spec_provider = spec_provider
        self._logger = logger or logging.getLogger(__name__)

    def available_commands(self) -> list[CommandSpec]:
        return [HELP_SPEC, EXIT_SPEC]

    def dispatch(self, name: str, args: list[str], session: Session) -> CommandResult:
        if name == "help":
            return self.help(args, session)
        if name == "exit":
            return self.exit(args, session)
        raise UnknownCommandError(name)

    def help(self, args: list[str], session: Session) -> CommandResult:
        others = [
            s for s in self._spec_provider() if s["name"] not in ("help", "exit")
        ]
        specs = [HELP_SPEC, *others, *REDIRECTION_SPECS, EXIT_SPEC]
        return CommandResult(output=format_help(specs))

    def exit(self, args: list[str], session: Session) -> CommandResult:
        self._logger.info("Exit requested")
        return CommandResult(output="exiting...\n", exit_code=0)
