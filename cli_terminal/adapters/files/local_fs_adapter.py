"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from cli_terminal.ports.files.file_system_port import FileSystemPort, FsStatus


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None, encoding: str = "utf-8"):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            encoding: Text encoding used by read_text and write_text
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._encoding = encoding

    def _io_error(self, action: str, path: str, error: Exception) -> FsStatus:
        self._logger.warning(f"Could not {action} {path}: {error}")
        return FsStatus.IO_ERROR

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def list_dir(self, directory: str) -> tuple[FsStatus, list[str]]:
        try:
            return FsStatus.OK, os.listdir(directory)
        except FileNotFoundError:
            return FsStatus.NOT_FOUND, []
        except NotADirectoryError:
            return FsStatus.NOT_A_DIRECTORY, []
        except OSError as e:
            return self._io_error("list directory", directory, e), []

    @override
    def make_dirs(self, path: str) -> FsStatus:
        if os.path.exists(path):
            return FsStatus.EXISTS
        try:
            os.makedirs(path)
            return FsStatus.OK
        except FileExistsError:
            return FsStatus.EXISTS
        except OSError as e:
            return self._io_error("create directory", path, e)

    @override
    def remove_dir(self, path: str) -> FsStatus:
        if not os.path.exists(path):
            return FsStatus.NOT_FOUND
        if not os.path.isdir(path):
            return FsStatus.NOT_A_DIRECTORY
        try:
            with os.scandir(path) as entries:
                if next(entries, None) is not None:
                    return FsStatus.NOT_EMPTY
            os.rmdir(path)
            return FsStatus.OK
        except OSError as e:
            return self._io_error("remove directory", path, e)

    @override
    def create_file(self, path: str) -> FsStatus:
        if os.path.exists(path):
            return FsStatus.EXISTS
        try:
            with open(path, "x", encoding=self._encoding):
                pass
            return FsStatus.OK
        except FileExistsError:
            return FsStatus.EXISTS
        except OSError as e:
            return self._io_error("create file", path, e)

    @override
    def remove_file(self, path: str) -> FsStatus:
        if not os.path.exists(path):
            return FsStatus.NOT_FOUND
        if not self.is_file(path):
            return FsStatus.IS_A_DIRECTORY
        try:
            os.remove(path)
            return FsStatus.OK
        except OSError as e:
            return self._io_error("remove file", path, e)

    @override
    def rename(self, source: str, destination: str) -> FsStatus:
        if not os.path.exists(source):
            return FsStatus.NOT_FOUND
        try:
            os.rename(source, destination)
            return FsStatus.OK
        except OSError as e:
            return self._io_error(f"move to {destination}", source, e)

    @override
    def read_text(self, path: str) -> tuple[FsStatus, str]:
        if not os.path.exists(path):
            return FsStatus.NOT_FOUND, ""
        if os.path.isdir(path):
            return FsStatus.IS_A_DIRECTORY, ""
        try:
            with open(path, "r", encoding=self._encoding, newline="") as f:
                return FsStatus.OK, f.read()
        except (OSError, UnicodeDecodeError) as e:
            return self._io_error("read file", path, e), ""

    @override
    def write_text(self, path: str, content: str, append: bool = False) -> FsStatus:
        # Encode before opening so a failure never truncates the target
        try:
            data = content.encode(self._encoding, "surrogateescape")
        except UnicodeEncodeError as e:
            return self._io_error("encode content for", path, e)
        mode = "ab" if append else "wb"
        try:
            with open(path, mode) as f:
                f.write(data)
            return FsStatus.OK
        except OSError as e:
            return self._io_error("write file", path, e)
