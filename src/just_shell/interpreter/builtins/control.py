"""Control flow builtins: exit.

These builtins control the lifetime of the session.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import InterpreterContext
    from ...types import ExecResult

from ..errors import ExitError


async def handle_exit(ctx: "InterpreterContext", args: list[str]) -> "ExecResult":
    """Execute the exit builtin.

    Usage: exit [n]

    Exit the shell with status n. If n is omitted, the status is 0.
    """
    exit_code = 0
    if args:
        try:
            exit_code = int(args[0]) & 255  # Mask to 0-255
        except ValueError:
            raise ExitError(
                2,
                stderr=f"exit: {args[0]}: numeric argument required\n",
            )

    raise ExitError(exit_code)
