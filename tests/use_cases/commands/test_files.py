"""
Tests for the FileCommandsHandler (touch, mv, rm, cat).
"""

import os
from unittest.mock import MagicMock

import pytest

from cli_terminal.entities.result import ErrorKind
from cli_terminal.ports.files.file_system_port import FileSystemPort, FsStatus
from cli_terminal.use_cases.commands.files import FileCommandsHandler


@pytest.fixture
def handler(file_system, mock_logger):
    return FileCommandsHandler(file_system, mock_logger)


def _read(path: str) -> str:
    with open(path) as f:
        return f.read()


class TestTouch:
    def test_missing_operand(self, handler, session):
        result = handler.dispatch("touch", [], session)

        assert result.output == "touch: missing file operand\n"
        assert result.error_kinds == [ErrorKind.USAGE]

    def test_creates_empty_files(self, handler, session, temp_directory):
        result = handler.dispatch("touch", ["a.txt", "b.txt"], session)

        assert result.ok
        for name in ("a.txt", "b.txt"):
            assert os.path.getsize(os.path.join(temp_directory, name)) == 0

    def test_is_idempotent(self, handler, session, temp_directory):
        first = handler.dispatch("touch", ["new.txt"], session)
        second = handler.dispatch("touch", ["new.txt"], session)

        assert first.ok and second.ok
        assert second.output == ""
        assert os.listdir(temp_directory).count("new.txt") == 1
        assert os.path.getsize(os.path.join(temp_directory, "new.txt")) == 0

    def test_existing_file_is_not_truncated(self, handler, session, temp_directory):
        handler.dispatch("touch", ["test1.txt"], session)

        assert _read(os.path.join(temp_directory, "test1.txt")) == "This is a test file."

    def test_missing_parent_directory(self, handler, session, temp_directory):
        result = handler.dispatch("touch", ["nope/a.txt", "ok.txt"], session)

        assert result.output == "touch: An error occurred while creating file 'a.txt'\n"
        assert result.error_kinds == [ErrorKind.IO]
        assert os.path.exists(os.path.join(temp_directory, "ok.txt"))


class TestMv:
    @pytest.mark.parametrize(
        "args, expected",
        [
            ([], "mv: missing file operand\n"),
            (["a"], "mv: missing destination file operand after 'a'\n"),
            (["a", "b", "c"], "mv: too many arguments\n"),
        ],
    )
    def test_usage_errors(self, handler, session, args, expected):
        result = handler.dispatch("mv", args, session)

        assert result.output == expected
        assert result.error_kinds == [ErrorKind.USAGE]

    def test_rename(self, handler, session, temp_directory):
        result = handler.dispatch("mv", ["test1.txt", "renamed.txt"], session)

        assert result.ok
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))
        assert _read(os.path.join(temp_directory, "renamed.txt")) == "This is a test file."

    def test_move_into_existing_directory(self, handler, session, temp_directory):
        handler.dispatch("mv", ["test2.py", "subdir"], session)

        assert not os.path.exists(os.path.join(temp_directory, "test2.py"))
        assert os.path.isfile(os.path.join(temp_directory, "subdir", "test2.py"))

    def test_move_directory(self, handler, session, temp_directory):
        handler.dispatch("mv", ["subdir", "moved"], session)

        assert os.path.isfile(os.path.join(temp_directory, "moved", "test3.md"))

    def test_source_missing(self, handler, session):
        result = handler.dispatch("mv", ["ghost.txt", "x.txt"], session)

        assert result.output == "mv: cannot stat 'ghost.txt': No such file or directory\n"
        assert result.error_kinds == [ErrorKind.NOT_FOUND]

    def test_rename_refused(self, mock_logger, session):
        fs = MagicMock(spec=FileSystemPort)
        fs.exists.return_value = True
        fs.is_dir.return_value = False
        fs.rename.return_value = FsStatus.IO_ERROR
        handler = FileCommandsHandler(fs, mock_logger)

        result = handler.dispatch("mv", ["a.txt", "b.txt"], session)

        assert result.output == "mv: cannot move 'a.txt' to 'b.txt'\n"
        assert result.error_kinds == [ErrorKind.IO]


class TestRm:
    def test_too_few_arguments(self, handler, session):
        assert handler.dispatch("rm", [], session).output == "rm: too few arguments\n"

    def test_removes_file(self, handler, session, temp_directory):
        handler.dispatch("touch", ["gone.txt"], session)
        before = len(os.listdir(temp_directory))

        result = handler.dispatch("rm", ["gone.txt"], session)

        assert result.ok
        assert len(os.listdir(temp_directory)) == before - 1

    def test_directory_is_refused(self, handler, session, temp_directory):
        result = handler.dispatch("rm", ["subdir"], session)

        assert result.output == "rm: cannot remove 'subdir': is a directory\n"
        assert result.error_kinds == [ErrorKind.TYPE_MISMATCH]
        assert os.path.isdir(os.path.join(temp_directory, "subdir"))

    def test_continues_after_missing_file(self, handler, session, temp_directory):
        result = handler.dispatch("rm", ["test1.txt", "missing", "test2.py"], session)

        assert result.output == (
            "rm: The system cannot find the file specified: 'missing'\n"
        )
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))
        assert not os.path.exists(os.path.join(temp_directory, "test2.py"))

    def test_io_error(self, mock_logger, session):
        fs = MagicMock(spec=FileSystemPort)
        fs.remove_file.return_value = FsStatus.IO_ERROR
        handler = FileCommandsHandler(fs, mock_logger)

        result = handler.dispatch("rm", ["locked"], session)

        assert result.output == "rm: An error occurred while trying to delete 'locked'\n"


class TestCat:
    def test_invalid_number_of_arguments(self, handler, session):
        assert handler.dispatch("cat", [], session).output == (
            "cat: Invalid number of arguments\n"
        )

    def test_missing_file(self, handler, session):
        result = handler.dispatch("cat", ["missing.txt"], session)

        assert result.output == "cat: missing.txt: No such file or directory\n"
        assert result.error_kinds == [ErrorKind.NOT_FOUND]

    def test_directory(self, handler, session):
        result = handler.dispatch("cat", ["subdir"], session)

        assert result.output == "cat: subdir: Is a directory\n"
        assert result.error_kinds == [ErrorKind.TYPE_MISMATCH]

    def test_concatenates_without_separator(self, handler, session):
        result = handler.dispatch("cat", ["test1.txt", "test2.py"], session)

        assert result.output == "This is a test file.print('Hello, world!')"
        assert result.ok

    def test_mixed_arguments_keep_order(self, handler, session):
        result = handler.dispatch("cat", ["test1.txt", "nope", "subdir/test3.md"], session)

        assert result.output == (
            "This is a test file."
            "cat: nope: No such file or directory\n"
            "# Test Markdown\n\nThis is a test."
        )

    def test_unreadable_file(self, handler, session, temp_directory):
        with open(os.path.join(temp_directory, "blob.bin"), "wb") as f:
            f.write(b"\xff\xfe\xfa")

        result = handler.dispatch("cat", ["blob.bin"], session)

        assert result.output == "cat: An error occurred, can't read the file: 'blob.bin'\n"
        assert result.error_kinds == [ErrorKind.IO]
