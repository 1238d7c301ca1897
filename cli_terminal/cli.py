import argparse
import logging
import os
import sys

from cli_terminal.container import container
from cli_terminal.exceptions import ConfigurationError, FileSystemError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cli-terminal",
        description=(
            "Interactive terminal emulator: pwd, cd, ls, mkdir, rmdir, touch, mv, rm, "
            "cat with > and >> output redirection."
        ),
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Starting directory (default: CLI_TERMINAL_START_DIR or the process cwd)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: CLI_TERMINAL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        help="Run a single command line and exit",
    )
    args = parser.parse_args(argv)

    try:
        settings = container.get_settings()
        level = (args.log_level or settings.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            parser.error(f"argument --log-level: invalid logging level: {args.log_level}")
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )
        start = os.path.abspath(os.path.expanduser(args.cwd)) if args.cwd else None
        session = container.create_session(start)
    except (ConfigurationError, FileSystemError) as e:
        print(f"cli-terminal: {e}", file=sys.stderr)
        return 2

    if args.command is not None:
        result = container.get_execute_command_use_case().execute_line(
            args.command, session
        )
        if result is not None and result.exit_code is not None:
            return result.exit_code
        return 0

    return container.get_run_terminal_use_case().execute(session)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
