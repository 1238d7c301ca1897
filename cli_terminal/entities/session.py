"""
Session domain entity.
"""

import os

from cli_terminal.exceptions import FileSystemError


class Session:
    """
    Terminal session holding the simulated current directory.

    The current directory is always absolute and normalized. It is only changed
    through ``change_directory``, which the ``cd`` command calls once it has
    checked that the target exists and is a directory.
    """

    def __init__(self, current_directory: str):
        """
        Initialize the session.

        Args:
            current_directory: Absolute path of an existing directory

        Raises:
            FileSystemError: If the path is not absolute or is not an existing directory
        """
        if not current_directory or not os.path.isabs(current_directory):
            raise FileSystemError(
                f"Session directory must be an absolute path: {current_directory!r}"
            )
        if not os.path.isdir(current_directory):
            raise FileSystemError(
                f"Session directory is not an existing directory: {current_directory}"
            )
        self._current_directory = os.path.normpath(current_directory)

    @property
    def current_directory(self) -> str:
        return self._current_directory

    def change_directory(self, path: str) -> None:
        self._current_directory = os.path.normpath(path)

    def __repr__(self) -> str:
        return f"Session(current_directory='{self._current_directory}')"
