# src/dev_helper/core/errors.py

"""
Error types raised by command handlers.

Handlers never exit the process themselves. They raise a HelperError subclass
and the dispatcher (cli/main.py) prints the message and picks the exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import CommandResult


class HelperError(Exception):
    """Base class for every failure that should be reported to the user."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserInputError(HelperError):
    """Empty text, out-of-range ordinal, malformed URL, ..."""


class ConfigurationError(HelperError):
    """Missing or unreadable config / credential."""


class TaskStoreError(HelperError):
    """Task file exists but is not a JSON array of strings."""


class CommandFailedError(HelperError):
    """An external command (git) exited non-zero or could not be spawned."""

    def __init__(self, result: CommandResult) -> None:
        super().__init__(f"Command failed: {result.command_text} ({result.describe_failure()})")
        self.result = result


class RemoteCallError(HelperError):
    """HTTP non-2xx, transport failure or an unexpected response body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
