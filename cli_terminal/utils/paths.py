from __future__ import annotations

import os

"""Path helpers shared by every command.

Relative arguments are joined onto the session's current directory. Nothing is
normalized here: ``.`` and ``..`` segments are left for the filesystem to
resolve, except when a path becomes the new current directory.
"""


def resolve_path(argument: str, current_directory: str) -> str:
    """Return ``argument`` unchanged if absolute, else joined onto ``current_directory``."""
    if os.path.isabs(argument):
        return argument
    return os.path.join(current_directory, argument)


def normalize_path(path: str) -> str:
    return os.path.normpath(path)


def display_name(path: str) -> str:
    """Last component of ``path``, as shown in command messages."""
    stripped = path.rstrip(os.sep)
    if not stripped:
        return path
    return os.path.basename(stripped)
