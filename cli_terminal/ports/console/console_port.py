"""
Console port interface: the line-oriented sink and source of the terminal.
"""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port interface for console input and output."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text exactly as given (no newline is added)."""
        pass

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Show the prompt and read one line.

        Raises:
            EOFError: When input is exhausted
        """
        pass
