"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from collections import deque
from unittest.mock import MagicMock

import pytest

from cli_terminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from cli_terminal.container import DependencyContainer
from cli_terminal.entities.session import Session
from cli_terminal.ports.console.console_port import ConsolePort


class RecordingConsole(ConsolePort):
    """Console double: records writes and replays scripted input lines."""

    def __init__(self, lines=None):
        self.written: list[str] = []
        self.prompts: list[str] = []
        self._lines = deque(lines or [])

    @property
    def text(self) -> str:
        return "".join(self.written)

    def write(self, text: str) -> None:
        self.written.append(text)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        line = self._lines.popleft()
        if isinstance(line, BaseException):
            raise line
        return line


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    """Session started in the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def file_system(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def dependency_container(mock_logger, console):
    """
    Create a dependency container with a recording console for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    container._instances["console"] = console
    return container


@pytest.fixture
def terminal(dependency_container, session):
    """Run a line through the full stack: ``terminal("ls -a")`` returns the result."""
    execute_uc = dependency_container.get_execute_command_use_case()

    def run(line: str):
        return execute_uc.execute_line(line, session)

    return run


@pytest.fixture
def scripted_console():
    """Factory for consoles that replay the given input lines, then hit end of input."""
    return RecordingConsole
