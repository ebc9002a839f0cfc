"""Command-line driver: scan, dump tokens, recognize, print diagnostics.

Usage:
    minilang 'x = 1;'
    minilang --file program.ml --strict
    python -m minilang --json 'print (1 + 2;'

Exit status is 0 after a normal run, whatever the diagnostics, and 1 when
no source was given, the source file cannot be read, or ``--strict`` saw a
diagnostic.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from minilang import __version__, tokenize
from minilang.config import DEFAULT_MAX_DEPTH, ParseConfig, parse_config_context
from minilang.diagnostics import Diagnostic
from minilang.errors import ConfigError, RecognitionError
from minilang.parser import Recognizer
from minilang.serialization import to_json
from minilang.tokens import Token
from minilang.utils.logger import get_logger

logger = get_logger(__name__)

USAGE_HINT = "Provide MiniLang Code As Argument!\nminilang 'print(x);'"


def format_token(token: Token) -> str:
    """Render one token dump line."""
    return f"Type: {token.kind.name}, Value: {token.text}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Scan MiniLang source, print its tokens, and report syntax errors.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("source", nargs="?", help="MiniLang source text")
    source.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read the source from a file instead of the command line",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print tokens and diagnostics as one JSON document",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any syntax error is reported",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Deepest rule nesting before giving up (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log recognizer activity to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    source_file: str | None = None
    if args.file is not None:
        try:
            source = args.file.read_text(encoding="utf-8")
        except OSError as e:
            print(f"minilang: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
        source_file = str(args.file)
    elif args.source is not None:
        source = args.source
    else:
        print(USAGE_HINT)
        return 1

    try:
        config = ParseConfig(max_depth=args.max_depth, strict=args.strict)
    except ConfigError as e:
        print(f"minilang: {e}", file=sys.stderr)
        return 1

    tokens = tokenize(source, source_file=source_file)
    logger.debug("Scanned %d token(s)", len(tokens))

    if not args.json:
        for token in tokens:
            print(format_token(token))

    def _print_diagnostic(diagnostic: Diagnostic) -> None:
        print(diagnostic.message)

    recognizer = Recognizer(tokens, None if args.json else _print_diagnostic)
    with parse_config_context(config):
        try:
            diagnostics = recognizer.recognize()
        except RecognitionError as e:
            if args.json:
                print(to_json(tokens, e.diagnostics, indent=2))
            print(f"minilang: {e}", file=sys.stderr)
            return 1

    if args.json:
        print(to_json(tokens, diagnostics, indent=2))
    return 0
