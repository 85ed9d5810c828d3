"""
Custom exceptions and process exit codes for the launcher.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status for each fatal failure mode."""

    SUCCESS = 0
    FAILURE = 1
    HOME_NOT_FOUND = 1
    CONFIG_INIT_FAILED = 3
    SPAWN_FAILED = 4
    STDIN_UNAVAILABLE = 8
    WRITE_FAILED = 16
    WAIT_FAILED = 32
    INVALID_OUTPUT = 64
    CANCELLED = 130


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(self, message: str, exit_code: int = ExitCode.FAILURE):
        super().__init__(message)
        self.exit_code = int(exit_code)


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class DescriptorError(BaseAppError):
    """Exception raised when a descriptor directory or file cannot be read."""

    pass


class SelectorError(BaseAppError):
    """Exception raised when the external selector cannot complete a round-trip."""

    pass


class SelectionCancelled(SelectorError):
    """Exception raised when the selector returned no choice."""

    def __init__(self, message: str = "Cancelled"):
        super().__init__(message, ExitCode.CANCELLED)
