"""just-shell - a small interactive command interpreter.

Example usage:
    from just_shell import Shell

    shell = Shell()
    shell.run("echo 'hello  world' > out.txt")
"""

__version__ = "0.1.0"

from .shell import Shell
from .types import Command, ExecResult, RedirectTarget, ShellResult
from .interpreter import ExitError, Interpreter, ShellOptions
from .parser import ParseError, extract_redirections, tokenize
from .repl import Repl

__all__ = [
    "Shell",
    "ShellOptions",
    "ShellResult",
    "Interpreter",
    "Command",
    "ExecResult",
    "RedirectTarget",
    "ExitError",
    "ParseError",
    "Repl",
    "extract_redirections",
    "tokenize",
    "__version__",
]
