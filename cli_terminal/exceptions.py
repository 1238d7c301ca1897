"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised for file system errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class UnknownCommandError(BaseAppError, ValueError):
    """Exception raised when a handler does not own the requested command."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name
