"""
Tests for the RunTerminalUseCase interactive loop.
"""

import os

from cli_terminal.use_cases.terminal.run_terminal import RunTerminalUseCase


def _loop(dependency_container, console):
    execute_uc = dependency_container.get_execute_command_use_case()
    return RunTerminalUseCase(execute_uc, console, prompt_suffix=" > ")


class TestRunTerminalUseCase:
    def test_prompt_shows_current_directory(self, dependency_container, scripted_console, session, temp_directory):
        console = scripted_console(["cd subdir", "exit"])
        dependency_container._instances["console"] = console

        code = _loop(dependency_container, console).execute(session)

        assert code == 0
        assert console.prompts == [
            f"{temp_directory} > ",
            f"{os.path.join(temp_directory, 'subdir')} > ",
        ]

    def test_exit_stops_reading(self, dependency_container, scripted_console, session, temp_directory):
        console = scripted_console(["exit", "touch never.txt"])
        dependency_container._instances["console"] = console

        code = _loop(dependency_container, console).execute(session)

        assert code == 0
        assert console.text == "exiting...\n"
        assert not os.path.exists(os.path.join(temp_directory, "never.txt"))

    def test_end_of_input(self, dependency_container, scripted_console, session):
        console = scripted_console(["", "pwd"])
        dependency_container._instances["console"] = console

        code = _loop(dependency_container, console).execute(session)

        assert code == 0
        assert console.text == session.current_directory + "\n" + "\n"
        assert len(console.prompts) == 3

    def test_keyboard_interrupt_abandons_line(self, dependency_container, scripted_console, session, temp_directory):
        console = scripted_console([KeyboardInterrupt(), "touch after.txt", "exit"])
        dependency_container._instances["console"] = console

        code = _loop(dependency_container, console).execute(session)

        assert code == 0
        assert os.path.isfile(os.path.join(temp_directory, "after.txt"))

    def test_failures_leave_session_usable(self, dependency_container, scripted_console, session, temp_directory):
        console = scripted_console(["cd nowhere", "rm subdir", "bogus", "mkdir made", "exit"])
        dependency_container._instances["console"] = console

        _loop(dependency_container, console).execute(session)

        assert console.text == (
            "cd: no such file or directory: nowhere\n"
            "rm: cannot remove 'subdir': is a directory\n"
            "'bogus' is not recognized as an internal or external command\n"
            "exiting...\n"
        )
        assert os.path.isdir(os.path.join(temp_directory, "made"))
