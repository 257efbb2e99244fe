"""Interpreter module for just-shell."""

from .errors import ExitError, RedirectionError, ShellError
from .interpreter import Interpreter
from .path_resolver import find_executable, resolve_command, split_search_path
from .types import InterpreterContext, InterpreterState, ShellOptions

__all__ = [
    "Interpreter",
    "InterpreterContext",
    "InterpreterState",
    "ShellOptions",
    "ExitError",
    "RedirectionError",
    "ShellError",
    "find_executable",
    "resolve_command",
    "split_search_path",
]
