"""Redirection extraction for just-shell.

Recognizes whole-word output redirection operators in a word list and
removes each operator together with the filename that follows it:

    >  1>    stdout, truncate
    >> 1>>   stdout, append
    2>       stderr, truncate
    2>>      stderr, append

Operators may appear anywhere in the list. When a stream is redirected
more than once, the last redirection wins. An operator with no word after
it is left in place as an ordinary argument.
"""

from __future__ import annotations

from ..types import Command, RedirectTarget

STDOUT = 1
STDERR = 2

# operator -> (stream, open mode)
REDIRECT_OPERATORS: dict[str, tuple[int, str]] = {
    ">": (STDOUT, "w"),
    "1>": (STDOUT, "w"),
    ">>": (STDOUT, "a"),
    "1>>": (STDOUT, "a"),
    "2>": (STDERR, "w"),
    "2>>": (STDERR, "a"),
}


def is_redirect_operator(word: str) -> bool:
    """Check if a word is an output redirection operator."""
    return word in REDIRECT_OPERATORS


def extract_redirections(args: list[str]) -> Command:
    """Split a word list into a Command with its stream targets.

    The input list is left untouched; the returned Command holds a new
    list with operator/filename pairs removed and the remaining words in
    their original relative order.
    """
    cleaned = list(args)
    stdout: RedirectTarget | None = None
    stderr: RedirectTarget | None = None

    i = 0
    while i < len(cleaned):
        word = cleaned[i]
        if word in REDIRECT_OPERATORS and i + 1 < len(cleaned):
            stream, mode = REDIRECT_OPERATORS[word]
            target = RedirectTarget(path=cleaned[i + 1], mode=mode)
            if stream == STDOUT:
                stdout = target
            else:
                stderr = target
            del cleaned[i:i + 2]
            continue
        i += 1

    return Command(args=cleaned, stdout=stdout, stderr=stderr)
