"""Main Shell class - the primary API for just-shell.

Example usage:
    from just_shell import Shell

    # Synchronous usage (for REPL, scripts)
    shell = Shell()
    result = shell.run("echo hello world > greeting.txt")
    print(result.exit_code)  # 0

    # Async usage (for async applications)
    shell = Shell()
    result = await shell.exec("type ls")

    # With a custom environment and options
    shell = Shell(env={"PATH": "/usr/bin", "HOME": "/tmp"},
                  options=ShellOptions(strict_quotes=False))

Output is written to the real file descriptors 1 and 2 (or the files
named by redirections), exactly as an interactive shell would.
"""

import asyncio
import os
from typing import MutableMapping, Optional

import nest_asyncio  # type: ignore[import-untyped]

from .interpreter import ExitError, Interpreter, InterpreterState, ShellOptions
from .types import ShellResult


class Shell:
    """Main shell interpreter class.

    Provides a high-level API for executing one command line at a time
    against the real filesystem and process table.
    """

    def __init__(
        self,
        *,
        env: Optional[MutableMapping[str, str]] = None,
        options: Optional[ShellOptions] = None,
    ):
        """Initialize the shell.

        Args:
            env: Environment for lookups and child processes. Defaults to a
                copy of os.environ. PATH and HOME are read from it on every
                command, so later changes take effect immediately.
            options: Shell options.
        """
        self._env = env if env is not None else dict(os.environ)
        self._options = options or ShellOptions()
        self._interpreter = Interpreter(
            state=InterpreterState(env=self._env, options=self._options),
        )

    @property
    def cwd(self) -> str:
        """Get the current working directory."""
        return os.getcwd()

    @property
    def env(self) -> MutableMapping[str, str]:
        """Get the environment variables."""
        return self._interpreter.state.env

    @property
    def options(self) -> ShellOptions:
        """Get the shell options."""
        return self._options

    @property
    def last_exit_code(self) -> int:
        """Exit status of the most recent command."""
        return self._interpreter.state.last_exit_code

    @property
    def exited(self) -> bool:
        """True once the exit builtin has run."""
        return self._interpreter.state.exited

    async def exec(self, line: str) -> ShellResult:
        """Execute one command line.

        Args:
            line: The input line, without its trailing newline.

        Returns:
            ShellResult with the exit status and whether the session ended.
        """
        if self.exited:
            return ShellResult(exit_code=self.last_exit_code, exited=True)

        try:
            exit_code = await self._interpreter.execute_line(line)
        except ExitError as error:
            return ShellResult(exit_code=error.exit_code, exited=True)
        return ShellResult(exit_code=exit_code, exited=False)

    def run(self, line: str) -> ShellResult:
        """Execute one command line synchronously.

        This is a convenience wrapper around exec() that works in any context,
        including Jupyter notebooks and async frameworks.

        Example:
            >>> shell = Shell()
            >>> shell.run("cd /tmp").exit_code
            0
        """
        try:
            asyncio.get_running_loop()
            # We're in an existing event loop (Jupyter, async framework, etc.)
            # Apply nest_asyncio to allow nested event loops
            nest_asyncio.apply()
        except RuntimeError:
            # No running event loop, asyncio.run() will work fine
            pass
        return asyncio.run(self.exec(line))

    def reset(self) -> None:
        """Reset the interpreter state, keeping environment and options."""
        self._interpreter = Interpreter(
            state=InterpreterState(env=self._env, options=self._options),
        )
