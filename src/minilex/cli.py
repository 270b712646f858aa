"""Command-line entry point: scan a source file and print its tokens.

    minilex prog.src
    minilex --quiet --max-lexeme-length 32 prog.src

Exit status is 0 when the source was opened (even if it contains invalid
characters), 1 when it could not be opened, 2 on bad arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from minilex import __version__
from minilex.config import MAX_LEXEME_LENGTH, LexConfig
from minilex.errors import ConfigError, SourceOpenError
from minilex.session import Session
from minilex.tokens import Token, TokenType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilex",
        description="Scan a source file and print its token stream.",
    )
    parser.add_argument("source", help="Path to the source file")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Drain the token stream without printing tokens",
    )
    parser.add_argument(
        "--max-lexeme-length",
        type=int,
        default=MAX_LEXEME_LENGTH,
        metavar="N",
        help=f"Truncate stored lexemes to N characters (default: {MAX_LEXEME_LENGTH})",
    )
    parser.add_argument(
        "--separators",
        action="store_true",
        help="Emit SEPARATOR tokens for ( ) { } [ ] ; , instead of INVALID",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Source file encoding (default: utf-8)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scanner diagnostics to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_token(token: Token) -> str:
    return f"{token.line}:{token.column}\t{token.type.name}\t{token.text!r}"


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        config = LexConfig(
            max_lexeme_length=args.max_lexeme_length,
            separators_enabled=args.separators,
            encoding=args.encoding,
        )
    except ConfigError as e:
        parser.error(str(e))

    try:
        session = Session.open(args.source, config=config)
    except SourceOpenError as e:
        print(f"minilex: error: {e}", file=sys.stderr)
        return 1

    count = 0
    invalid = 0
    with session:
        for token in session:
            if not args.quiet:
                print(format_token(token))
            count += 1
            if token.type is TokenType.INVALID:
                invalid += 1

    print(f"{args.source}: {count} tokens, {invalid} invalid", file=sys.stderr)
    return 0
