"""Interpreter - Command Execution Engine.

Runs one input line at a time:

    tokenize -> extract redirections -> open targets
             -> builtin (streams retargeted in-process)
              | external (child process with targets attached)
             -> close targets

Delegates to specialized modules for:
- Word splitting (parser/lexer.py)
- Redirection extraction (parser/redirections.py)
- Search path lookup (path_resolver.py)
- Built-in commands (builtins/)
- Descriptor handling (redirections.py)
"""

import asyncio
import logging
from typing import Optional

from ..parser import ParseError, extract_redirections, tokenize
from ..types import Command, ExecResult
from .builtins import BuiltinHandler, get_builtin
from .errors import ExitError, RedirectionError
from .path_resolver import resolve_command
from .redirections import (
    STDERR_FILENO,
    STDOUT_FILENO,
    OpenedTargets,
    flush_python_streams,
    open_targets,
    redirected_streams,
    write_fd,
)
from .types import InterpreterContext, InterpreterState

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_SYNTAX_ERROR = 2
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


class Interpreter:
    """Executes input lines against the real process environment."""

    def __init__(self, state: Optional[InterpreterState] = None):
        """Initialize the interpreter.

        Args:
            state: Optional initial state (creates default if not provided)
        """
        self._state = state or InterpreterState()
        self._ctx = InterpreterContext(state=self._state)

    @property
    def state(self) -> InterpreterState:
        """Get the interpreter state."""
        return self._state

    def _report(self, message: str, fd: Optional[int] = None) -> None:
        """Write a diagnostic line to fd, or the interpreter's stderr."""
        write_fd(STDERR_FILENO if fd is None else fd, message + "\n")

    async def execute_line(self, line: str) -> int:
        """Execute one line of input and return its exit status.

        Blank lines do nothing and keep the previous status. ExitError
        propagates to the caller once the exit builtin has run.
        """
        options = self._state.options
        try:
            tokens = tokenize(
                line,
                max_tokens=options.max_tokens,
                strict=options.strict_quotes,
            )
        except ParseError as e:
            self._report(f"{options.name}: syntax error: {e}")
            self._state.last_exit_code = EXIT_SYNTAX_ERROR
            return EXIT_SYNTAX_ERROR

        if not tokens:
            return self._state.last_exit_code

        logger.debug("tokens: %r", tokens)
        command = extract_redirections(tokens)
        return await self.execute_command(command)

    async def execute_command(self, command: Command) -> int:
        """Execute a parsed command and record its exit status."""
        logger.debug(
            "command %r stdout=%r stderr=%r",
            command.args, command.stdout, command.stderr,
        )
        try:
            opened = open_targets(command)
        except RedirectionError as e:
            self._report(f"{self._state.options.name}: {e}")
            self._state.last_exit_code = EXIT_FAILURE
            return EXIT_FAILURE

        handler = get_builtin(command.name)
        exit_code = EXIT_SUCCESS
        try:
            if not command.args:
                # Only redirections: targets are created, nothing runs
                exit_code = EXIT_SUCCESS
            elif handler is not None:
                exit_code = await self._execute_builtin(handler, command, opened)
            else:
                exit_code = await self._execute_external(command, opened)
        finally:
            opened.close()

        self._state.last_exit_code = exit_code
        return exit_code

    async def _execute_builtin(
        self, handler: BuiltinHandler, command: Command, opened: OpenedTargets
    ) -> int:
        """Execute a shell builtin with its output streams retargeted.

        Builtins get direct access to InterpreterContext so they can
        modify interpreter state.
        """
        with redirected_streams(opened):
            try:
                result = await handler(self._ctx, command.args[1:])
            except ExitError as error:
                self._emit(ExecResult(error.stdout, error.stderr, error.exit_code))
                self._state.last_exit_code = error.exit_code
                self._state.exited = True
                raise
            except OSError as e:
                result = ExecResult(
                    stderr=f"{command.name}: {e.strerror or e}\n",
                    exit_code=EXIT_FAILURE,
                )
            self._emit(result)

        return result.exit_code

    def _emit(self, result: ExecResult) -> None:
        if result.stdout:
            write_fd(STDOUT_FILENO, result.stdout)
        if result.stderr:
            write_fd(STDERR_FILENO, result.stderr)

    async def _execute_external(self, command: Command, opened: OpenedTargets) -> int:
        """Resolve and run an external program, waiting for it to finish."""
        name = command.name
        error_fd = opened.stderr

        path = resolve_command(name, self._state.env)
        if path is None:
            self._report(f"{name}: command not found", error_fd)
            return EXIT_NOT_FOUND

        flush_python_streams()

        try:
            process = await asyncio.create_subprocess_exec(
                name,
                *command.args[1:],
                executable=path,
                stdout=opened.stdout,
                stderr=opened.stderr,
                env=dict(self._state.env),
            )
        except (OSError, ValueError) as e:
            # ValueError: an argument or environment entry holds a NUL character
            reason = getattr(e, "strerror", None) or e
            self._report(f"{self._state.options.name}: {name}: {reason}", error_fd)
            return EXIT_CANNOT_EXECUTE
        finally:
            # The child holds its own copies now
            opened.close()

        logger.debug("spawned %s (pid %d)", path, process.pid)
        returncode = await process.wait()
        logger.debug("pid %d exited with %d", process.pid, returncode)

        if returncode < 0:
            # Killed by a signal
            return 128 - returncode
        return returncode
