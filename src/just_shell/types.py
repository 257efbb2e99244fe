"""Core types for just-shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ExecResult:
    """Output of a builtin command."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0


@dataclass(frozen=True)
class RedirectTarget:
    """A file that replaces a standard stream for one command."""

    path: str
    """Path as typed, resolved against the working directory on open."""

    mode: str = "w"
    """'w' (truncate) or 'a' (append)."""

    @property
    def append(self) -> bool:
        return self.mode == "a"


@dataclass
class Command:
    """One parsed input line: arguments plus optional stream targets."""

    args: list[str] = field(default_factory=list)
    """Cleaned argument vector; args[0] is the command name."""

    stdout: Optional[RedirectTarget] = None
    """Target for standard output, or None to inherit."""

    stderr: Optional[RedirectTarget] = None
    """Target for standard error, or None to inherit."""

    @property
    def name(self) -> str:
        return self.args[0] if self.args else ""


@dataclass
class ShellResult:
    """Status of one line executed through the Shell facade."""

    exit_code: int = 0
    exited: bool = False
    """True when the line ran the exit builtin."""
