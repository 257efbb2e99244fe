"""Lexer for just-shell.

Splits a single input line into argument words, resolving quoting and
escaping the way a POSIX shell does for simple commands:

- Single quotes preserve every character literally, including backslash.
- Double quotes preserve everything except that backslash escapes ``"``
  and ``\\``; any other backslash is kept.
- Outside quotes, backslash makes the next character literal, whitespace
  and quote characters included.

Adjacent quoted and unquoted segments join into one word, so
``'a'"b"c`` is the single word ``abc``.
"""

from __future__ import annotations

# Maximum number of words produced for one line; extra words are dropped
MAX_TOKENS = 1024

WHITESPACE = frozenset(" \t\n\r")
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"

# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPES = frozenset((DOUBLE_QUOTE, BACKSLASH))


class ParseError(Exception):
    """Raised when a line cannot be split into words."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class Lexer:
    """Word splitter for one input line."""

    def __init__(self, line: str, max_tokens: int = MAX_TOKENS, strict: bool = True):
        """Initialize the lexer.

        Args:
            line: Raw input line without its trailing newline.
            max_tokens: Upper bound on the number of words produced.
            strict: Raise ParseError on an unterminated quote instead of
                treating the rest of the line as quoted.
        """
        self.line = line
        self.max_tokens = max_tokens
        self.strict = strict
        self.pos = 0

    def tokenize(self) -> list[str]:
        """Scan the whole line and return its words in order."""
        tokens: list[str] = []
        while len(tokens) < self.max_tokens:
            self._skip_whitespace()
            if self.pos >= len(self.line):
                break
            tokens.append(self._read_word())
        return tokens

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.line) and self.line[self.pos] in WHITESPACE:
            self.pos += 1

    def _read_word(self) -> str:
        """Read one word starting at a non-whitespace character."""
        parts: list[str] = []
        line = self.line
        while self.pos < len(line):
            char = line[self.pos]
            if char in WHITESPACE:
                break
            if char == SINGLE_QUOTE:
                parts.append(self._read_single_quoted())
            elif char == DOUBLE_QUOTE:
                parts.append(self._read_double_quoted())
            elif char == BACKSLASH:
                if self.pos + 1 < len(line):
                    parts.append(line[self.pos + 1])
                    self.pos += 2
                else:
                    # Trailing backslash has nothing to escape
                    parts.append(char)
                    self.pos += 1
            else:
                start = self.pos
                while (
                    self.pos < len(line)
                    and line[self.pos] not in WHITESPACE
                    and line[self.pos] not in (SINGLE_QUOTE, DOUBLE_QUOTE, BACKSLASH)
                ):
                    self.pos += 1
                parts.append(line[start:self.pos])
        return "".join(parts)

    def _read_single_quoted(self) -> str:
        start = self.pos
        end = self.line.find(SINGLE_QUOTE, start + 1)
        if end == -1:
            self._unterminated(SINGLE_QUOTE, start)
            self.pos = len(self.line)
            return self.line[start + 1:]
        self.pos = end + 1
        return self.line[start + 1:end]

    def _read_double_quoted(self) -> str:
        start = self.pos
        self.pos += 1
        chars: list[str] = []
        line = self.line
        while self.pos < len(line):
            char = line[self.pos]
            if char == DOUBLE_QUOTE:
                self.pos += 1
                return "".join(chars)
            if (
                char == BACKSLASH
                and self.pos + 1 < len(line)
                and line[self.pos + 1] in DOUBLE_QUOTE_ESCAPES
            ):
                chars.append(line[self.pos + 1])
                self.pos += 2
                continue
            chars.append(char)
            self.pos += 1
        self._unterminated(DOUBLE_QUOTE, start)
        return "".join(chars)

    def _unterminated(self, quote: str, start: int) -> None:
        if self.strict:
            raise ParseError(
                f"unexpected EOF while looking for matching `{quote}'",
                position=start,
            )


def tokenize(line: str, max_tokens: int = MAX_TOKENS, strict: bool = True) -> list[str]:
    """Split a line into words.

    Example:
        >>> tokenize("echo 'a  b' c\\\\ d")
        ['echo', 'a  b', 'c d']
    """
    return Lexer(line, max_tokens=max_tokens, strict=strict).tokenize()
