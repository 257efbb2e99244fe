"""Interpreter errors for just-shell.

These exceptions are raised inside the interpreter and caught by the
execution engine, which turns them into diagnostics and exit statuses.
"""

from typing import Optional


class ShellError(Exception):
    """Base class for all just-shell errors."""


class ExitError(ShellError):
    """Raised by the exit builtin to end the session."""

    def __init__(self, exit_code: int = 0, stdout: str = "", stderr: str = ""):
        super().__init__(f"exit {exit_code}")
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class RedirectionError(ShellError):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.cause = cause
