"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from cli_terminal.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = self._get_directory_env(
            "CLI_TERMINAL_START_DIR", os.getcwd()
        )
        self.encoding: str = self._get_env("CLI_TERMINAL_ENCODING", "utf-8")
        self.log_level: str = self._get_log_level_env(
            "CLI_TERMINAL_LOG_LEVEL", "WARNING"
        )
        self.prompt_suffix: str = self._get_env("CLI_TERMINAL_PROMPT_SUFFIX", " > ")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_directory_env(self, key: str, default: str) -> str:
        """Get an existing directory from the environment, made absolute."""
        value = os.path.abspath(os.path.expanduser(self._get_env(key, default)))
        if not os.path.isdir(value):
            raise ConfigurationError(f"{key} is not an existing directory: {value}")
        return value

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a known level."""
        value = self._get_env(key, default).strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"{key} is not a valid logging level: {value}")
        return value
