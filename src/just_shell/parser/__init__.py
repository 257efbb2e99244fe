"""Parser module for just-shell."""

from .lexer import (
    Lexer,
    ParseError,
    tokenize,
    MAX_TOKENS,
)
from .redirections import (
    REDIRECT_OPERATORS,
    extract_redirections,
    is_redirect_operator,
)

__all__ = [
    # Lexer
    "Lexer",
    "ParseError",
    "tokenize",
    "MAX_TOKENS",
    # Redirections
    "REDIRECT_OPERATORS",
    "extract_redirections",
    "is_redirect_operator",
]
