"""Command-line interface for toylang.

Usage:
    toylang scan <file>
    python -m toylang scan <file>

Prints the debug representation of every token on one line, separated by
spaces. Exits with status 1 and a message on stderr if the file cannot be
read or contains a lexical error.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from toylang.errors import LexError
from toylang.lexer import Scanner
from toylang.tokens import Token
from toylang.utils.logger import get_logger

logger = get_logger(__name__)


def scan_file(path: Path, stream: TextIO | None = None) -> list[Token]:
    """Scan a file and print its tokens.

    Args:
        path: Source file to read (UTF-8)
        stream: Where to print the tokens (stdout if None)

    Returns:
        The scanned tokens

    Raises:
        OSError: The file cannot be read
        UnicodeDecodeError: The file is not valid UTF-8
        LexError: The file contains a lexical error (nothing is printed)
    """
    if stream is None:
        stream = sys.stdout

    source = path.read_text(encoding="utf-8")
    tokens = Scanner(source, source_file=str(path)).scan_all()

    stream.write(" ".join(repr(token) for token in tokens) + "\n")
    return tokens


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toylang", description="Demonstrates features of the toy compiler"
    )
    subparsers = parser.add_subparsers(dest="command")

    scan = subparsers.add_parser(
        "scan",
        help="Scans a given file and outputs the tokens",
        description="Scans a given file and outputs the tokens",
    )
    scan.add_argument("file", type=Path, help="Input source file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    if args.command == "scan":
        try:
            scan_file(args.file)
        except (OSError, UnicodeDecodeError, LexError) as e:
            logger.debug("Scan of %s failed", args.file, exc_info=True)
            print(f"Scan error: {e}", file=sys.stderr)
            return 1

    return 0
