"""
Command invocation entities: the parsed input line and its optional redirection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

REDIRECT_OVERWRITE = ">"
REDIRECT_APPEND = ">>"


class RedirectMode(Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


@dataclass(frozen=True)
class Redirection:
    mode: RedirectMode
    target: str

    @property
    def append(self) -> bool:
        return self.mode is RedirectMode.APPEND


@dataclass(frozen=True)
class CommandInvocation:
    """Command name and arguments produced from one input line."""

    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> Optional["CommandInvocation"]:
        """
        Split a raw input line on runs of whitespace.

        Args:
            line: Raw line typed by the user

        Returns:
            The invocation, or None for a blank line
        """
        parts = line.split()
        if not parts:
            return None
        return cls(name=parts[0], args=tuple(parts[1:]))

    def split_redirection(self) -> tuple["CommandInvocation", Optional[Redirection]]:
        """
        Detect a trailing ``> file`` or ``>> file`` and strip it from the arguments.

        Returns:
            The invocation without the redirection tokens, and the redirection if any
        """
        if len(self.args) < 2:
            return self, None
        marker = self.args[-2]
        if marker == REDIRECT_OVERWRITE:
            mode = RedirectMode.OVERWRITE
        elif marker == REDIRECT_APPEND:
            mode = RedirectMode.APPEND
        else:
            return self, None
        stripped = CommandInvocation(name=self.name, args=self.args[:-2])
        return stripped, Redirection(mode=mode, target=self.args[-1])
