"""Interactive read loop for just-shell.

Reads one line at a time, hands it to a Shell and stops on the exit
builtin or end of input. When GNU readline is available it provides
line editing and tab completion of builtin names.
"""

import logging
import sys
from typing import Callable, Optional

from .interpreter.builtins import BUILTIN_NAMES
from .shell import Shell

logger = logging.getLogger(__name__)


class BuiltinCompleter:
    """Readline completer over the builtin command names."""

    def __init__(self, names: tuple[str, ...] = BUILTIN_NAMES):
        self.names = names
        self.matches: list[str] = []

    def candidates(self, text: str) -> list[str]:
        """Return the builtin names starting with text, each with a trailing space."""
        return [name + " " for name in self.names if name.startswith(text)]

    def complete(self, text: str, state: int) -> Optional[str]:
        """Readline completer protocol: return the state-th match or None."""
        if state == 0:
            self.matches = self.candidates(text)
        if state < len(self.matches):
            return self.matches[state]
        return None


def install_completion(completer: Optional[BuiltinCompleter] = None) -> bool:
    """Register tab completion with readline. Returns False if unavailable."""
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable, tab completion disabled")
        return False

    completer = completer or BuiltinCompleter()
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")
    return True


class Repl:
    """The read-execute loop."""

    def __init__(
        self,
        shell: Shell,
        input_fn: Callable[[str], str] = input,
    ):
        self.shell = shell
        self.input_fn = input_fn

    def read_line(self) -> Optional[str]:
        """Prompt for and read one line. Returns None at end of input."""
        sys.stdout.flush()
        try:
            return self.input_fn(self.shell.options.prompt)
        except EOFError:
            sys.stdout.write("\n")
            sys.stdout.flush()
            return None

    def run(self) -> int:
        """Run until exit or end of input and return the last exit status."""
        while True:
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                # Discard the partial line and prompt again
                sys.stdout.write("\n")
                continue

            if line is None:
                break
            if not line.strip():
                continue

            try:
                result = self.shell.run(line)
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                continue
            if result.exited:
                return result.exit_code

        return self.shell.last_exit_code
