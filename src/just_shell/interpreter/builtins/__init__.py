"""Builtin commands for just-shell.

Builtins run inside the interpreter and get direct access to the
InterpreterContext. Each handler takes the context and the argument list
(without the command name) and returns an ExecResult.
"""

from typing import TYPE_CHECKING, Awaitable, Callable

from .cd import handle_cd
from .control import handle_exit
from .misc import handle_echo, handle_pwd, handle_type

if TYPE_CHECKING:
    from ..types import InterpreterContext
    from ...types import ExecResult

BuiltinHandler = Callable[["InterpreterContext", list[str]], Awaitable["ExecResult"]]

# Dispatch priority order
BUILTINS: dict[str, BuiltinHandler] = {
    "exit": handle_exit,
    "echo": handle_echo,
    "pwd": handle_pwd,
    "cd": handle_cd,
    "type": handle_type,
}

BUILTIN_NAMES: tuple[str, ...] = tuple(BUILTINS)


def is_builtin(name: str) -> bool:
    """Check if name is a builtin command."""
    return name in BUILTINS


def get_builtin(name: str) -> BuiltinHandler | None:
    """Return the handler for a builtin, or None."""
    return BUILTINS.get(name)


__all__ = [
    "BUILTINS",
    "BUILTIN_NAMES",
    "BuiltinHandler",
    "get_builtin",
    "is_builtin",
    "handle_cd",
    "handle_echo",
    "handle_exit",
    "handle_pwd",
    "handle_type",
]
