"""Cd builtin implementation.

Usage: cd [dir]

Change the current working directory to dir. If dir is not specified,
or is ~, change to $HOME.
"""

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import InterpreterContext
    from ...types import ExecResult

logger = logging.getLogger(__name__)


def _failure(stderr: str) -> "ExecResult":
    from ...types import ExecResult
    return ExecResult(stdout="", stderr=stderr, exit_code=1)


def _expand_home(target: str, home: str | None) -> str | None:
    """Map ~ and ~/rest onto home. Returns None when home is needed but unset."""
    if target == "~":
        return home
    if target.startswith("~/"):
        if home is None:
            return None
        return os.path.join(home, target[2:])
    return target


async def handle_cd(ctx: "InterpreterContext", args: list[str]) -> "ExecResult":
    """Execute the cd builtin."""
    from ...types import ExecResult

    # cd accepts at most one argument
    if len(args) > 1:
        return _failure("cd: too many arguments\n")

    home = ctx.env.get("HOME") or None
    target = args[0] if args else "~"

    new_dir = _expand_home(target, home)
    if new_dir is None:
        return _failure("cd: HOME not set\n")

    old_dir = os.getcwd()
    try:
        os.chdir(new_dir)
    except FileNotFoundError:
        return _failure(f"cd: {target}: No such file or directory\n")
    except NotADirectoryError:
        return _failure(f"cd: {target}: Not a directory\n")
    except PermissionError:
        return _failure(f"cd: {target}: Permission denied\n")
    except OSError as e:
        return _failure(f"cd: {target}: {e.strerror or e}\n")
    except ValueError:
        # Embedded NUL cannot name any directory
        return _failure(f"cd: {target}: No such file or directory\n")

    # Update state
    new_cwd = os.getcwd()
    ctx.env["OLDPWD"] = old_dir
    ctx.env["PWD"] = new_cwd
    logger.debug("cd %s -> %s", old_dir, new_cwd)

    return ExecResult(stdout="", stderr="", exit_code=0)
