"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from enum import Enum


class FsStatus(Enum):
    """Outcome of a file system primitive."""

    OK = "ok"
    NOT_FOUND = "not_found"
    EXISTS = "exists"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_EMPTY = "not_empty"
    IO_ERROR = "io_error"


class FileSystemPort(ABC):
    """
    Port interface for file system operations.

    Queries return plain values. Mutating operations never raise for
    operating system failures: they return an ``FsStatus`` instead.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_dir(self, directory: str) -> tuple[FsStatus, list[str]]:
        """
        List the names of the immediate entries of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            Status and the entry names, in the order the file system returns them
        """
        pass

    @abstractmethod
    def make_dirs(self, path: str) -> FsStatus:
        """
        Create a directory, including missing intermediate directories.

        Args:
            path: Directory path to create

        Returns:
            FsStatus.EXISTS if something already exists at the path
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> FsStatus:
        """
        Remove an empty directory.

        Returns:
            NOT_FOUND, NOT_A_DIRECTORY, NOT_EMPTY, IO_ERROR or OK
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> FsStatus:
        """
        Create an empty regular file.

        Returns:
            FsStatus.EXISTS (without touching the file) if the path already exists
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> FsStatus:
        """
        Remove a regular file.

        Returns:
            NOT_FOUND, IS_A_DIRECTORY, IO_ERROR or OK
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> FsStatus:
        """
        Rename or move ``source`` to exactly ``destination``.

        Overwrite behavior is whatever the operating system rename provides.
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> tuple[FsStatus, str]:
        """
        Read the full content of a text file.

        Returns:
            Status and content (empty string unless the status is OK)
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str, append: bool = False) -> FsStatus:
        """
        Create or truncate (or append to) a text file.

        Args:
            path: Path of the file to write
            content: Text content to write
            append: Append instead of truncating (default: False)
        """
        pass
