"""
Console adapter built on rich.
"""

from rich.console import Console
from typing_extensions import override

from cli_terminal.ports.console.console_port import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Console port backed by a rich Console.

    Command output is written straight to the console's stream, bypassing
    rich rendering, so tabs and control characters reach the terminal as the
    command produced them.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console(
            markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    @override
    def write(self, text: str) -> None:
        if not text:
            return
        stream = self._console.file
        try:
            stream.write(text)
        except UnicodeEncodeError:
            # undecodable file names come back from the OS as surrogates
            encoding = getattr(stream, "encoding", None) or "utf-8"
            stream.write(text.encode(encoding, "replace").decode(encoding))
        stream.flush()

    @override
    def read_line(self, prompt: str) -> str:
        return self._console.input(prompt, markup=False, emoji=False)
