"""
minilex — a small maximal-munch lexical scanner

Turns source text into a stream of classified tokens (identifiers, numbers,
keywords, single-character operators) with line/column positions, an
explicit end-of-input token and recoverable INVALID tokens for bad input.
Zero runtime dependencies.

Quick Start:
    >>> from minilex import tokenize
    >>> tokenize("if x = 5")
    [Token(KEYWORD, 'if', 1:0), Token(IDENTIFIER, 'x', 1:3), Token(OPERATOR, '=', 1:5), Token(NUMBER, '5', 1:7), Token(EOF, '', 1:8)]

    >>> # Pull tokens one at a time from a file
    >>> from minilex import open_session
    >>> with open_session("prog.src") as session:
    ...     token = session.next_token()
    ...     while not token.is_eof:
    ...         token = session.next_token()
"""

from minilex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from minilex.errors import ConfigError, Diagnostic, MinilexError, SourceOpenError
from minilex.keywords import KEYWORDS, is_keyword
from minilex.lexer import Cursor, Scanner
from minilex.location import SourceLocation
from minilex.session import (
    Session,
    close_session,
    next_token,
    open_session,
    open_sessions,
    tokenize,
    tokenize_file,
)
from minilex.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "ConfigError",
    "Cursor",
    "Diagnostic",
    "LexConfig",
    "MinilexError",
    "Scanner",
    "Session",
    "SourceLocation",
    "SourceOpenError",
    "Token",
    "TokenType",
    "__version__",
    "close_session",
    "get_lex_config",
    "is_keyword",
    "lex_config_context",
    "next_token",
    "open_session",
    "open_sessions",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
    "tokenize_file",
]
