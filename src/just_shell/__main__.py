"""Command-line entry point: python -m just_shell."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .interpreter import ShellOptions
from .repl import Repl, install_completion
from .shell import Shell


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list to parse. Defaults to sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        prog="just-shell",
        description="A small interactive command interpreter.",
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="execute one command line and exit with its status",
    )
    parser.add_argument(
        "--prompt",
        default=ShellOptions.prompt,
        help="prompt shown before each line (default: %(default)r)",
    )
    parser.add_argument(
        "--no-strict-quotes",
        dest="strict_quotes",
        action="store_false",
        help="treat an unterminated quote as running to the end of the line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug output to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    shell = Shell(
        options=ShellOptions(prompt=args.prompt, strict_quotes=args.strict_quotes),
    )

    if args.command is not None:
        return shell.run(args.command).exit_code

    install_completion()
    return Repl(shell).run()


if __name__ == "__main__":
    sys.exit(main())
