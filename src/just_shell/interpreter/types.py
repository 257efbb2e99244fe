"""Interpreter types for just-shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableMapping

from ..parser import MAX_TOKENS


@dataclass
class ShellOptions:
    """Shell configuration."""

    prompt: str = "$ "
    """Prompt printed by the REPL before each line."""

    max_tokens: int = MAX_TOKENS
    """Maximum number of words parsed from one line."""

    strict_quotes: bool = True
    """Reject lines with an unterminated quote instead of absorbing the rest."""

    name: str = "just-shell"
    """Prefix for diagnostics the interpreter itself reports."""


@dataclass
class InterpreterState:
    """Mutable state maintained by the interpreter across lines."""

    env: MutableMapping[str, str] = field(default_factory=dict)
    """Environment; PATH and HOME are read from here on every use."""

    last_exit_code: int = 0
    """Exit code of last command."""

    exited: bool = False
    """Set once the exit builtin has run; no further lines are executed."""

    options: ShellOptions = field(default_factory=ShellOptions)
    """Shell options."""


@dataclass
class InterpreterContext:
    """Context provided to builtin handlers."""

    state: InterpreterState
    """Mutable interpreter state."""

    @property
    def env(self) -> MutableMapping[str, str]:
        return self.state.env
