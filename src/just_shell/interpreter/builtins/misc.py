"""Miscellaneous builtins: echo, pwd, type.

These are simple builtins that don't need their own files.
"""

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import InterpreterContext
    from ...types import ExecResult


def _result(stdout: str, stderr: str, exit_code: int) -> "ExecResult":
    """Create an ExecResult."""
    from ...types import ExecResult
    return ExecResult(stdout=stdout, stderr=stderr, exit_code=exit_code)


async def handle_echo(
    ctx: "InterpreterContext", args: list[str]
) -> "ExecResult":
    """Execute the echo builtin - print arguments separated by single spaces."""
    return _result(" ".join(args) + "\n", "", 0)


async def handle_pwd(
    ctx: "InterpreterContext", args: list[str]
) -> "ExecResult":
    """Execute the pwd builtin - print the absolute working directory."""
    try:
        cwd = os.getcwd()
    except OSError as e:
        return _result("", f"pwd: {e.strerror or e}\n", 1)
    return _result(f"{cwd}\n", "", 0)


async def handle_type(
    ctx: "InterpreterContext", args: list[str]
) -> "ExecResult":
    """Execute the type builtin - display information about command type.

    Usage: type name [name ...]

    For each name, reports whether it is a shell builtin or the path of
    the executable the shell would run. Names that are neither are
    reported on stderr and make the exit status 1.
    """
    from . import is_builtin
    from ..path_resolver import resolve_command

    if not args:
        return _result("", "type: usage: type name [name ...]\n", 1)

    output = []
    stderr_output = []
    exit_code = 0

    for name in args:
        if is_builtin(name):
            output.append(f"{name} is a shell builtin\n")
            continue
        path = resolve_command(name, ctx.env)
        if path is not None:
            output.append(f"{name} is {path}\n")
        else:
            stderr_output.append(f"{name}: not found\n")
            exit_code = 1

    return _result("".join(output), "".join(stderr_output), exit_code)
