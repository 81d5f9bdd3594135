#!/usr/bin/env python3
"""
CLI for roam-bible - Converts one chapter of an OpenSong Bible to Roam import JSON.

Usage:
    python -m roam_bible Joshua 11                  # Read ESV.xml
    python -m roam_bible -f KJV.xml 1 John 3        # Multi-word book names
    python -m roam_bible -f KJV.xml --page Ps 23    # Full page with title
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .errors import ConversionError, EmptyChapter, InvalidReference
from .pipeline import run
from .source import read_source


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_FILE = "ESV.xml"
LOG_FORMAT = "%(levelname)s: %(message)s"


# =============================================================================
# Helpers
# =============================================================================

def parse_reference(tokens: Sequence[str]) -> tuple[str, int]:
    """
    Split "<book> <chapter>" into its parts.

    The last token is the chapter; everything before it is the book name, so
    "1 John 3" gives ("1 John", 3).

    Raises:
        InvalidReference: if there is no book or the chapter is not an integer
    """
    words = " ".join(tokens).split()
    text = " ".join(words)
    if len(words) < 2:
        raise InvalidReference(text)

    try:
        chapter = int(words[-1])
    except ValueError:
        raise InvalidReference(text) from None

    return " ".join(words[:-1]), chapter


def report_error(error: ConversionError):
    """
    Print a failure to stderr, with a hint line when there is one.

    Chapters with no verse text are flagged as a source-data warning; every other
    failure is an error line.
    """
    icon = "⚠️" if isinstance(error, EmptyChapter) else "❌"
    print(f"{icon} {error}", file=sys.stderr)
    hint = error.hint()
    if hint:
        print(f"   {hint}", file=sys.stderr)


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roam-bible",
        description="Convert one chapter of an OpenSong XML Bible to Roam Research import JSON.",
    )
    parser.add_argument(
        "reference",
        nargs="+",
        help="Book and chapter, e.g. 'Joshua 11' or '1 John 3'"
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        default=DEFAULT_FILE,
        help=f"OpenSong XML file or http(s) URL (default: {DEFAULT_FILE})"
    )
    parser.add_argument(
        "--page",
        action="store_true",
        help="Emit a titled page linking the chapter to its book"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with this indent (default: compact)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each stage to stderr"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        book, chapter = parse_reference(args.reference)
        data = read_source(args.file)
    except ConversionError as e:
        report_error(e)
        return 1

    result = run(data, book, chapter, page=args.page, indent=args.indent)
    if not result.ok:
        report_error(result.error)
        return 1

    sys.stdout.buffer.write(result.output + b"\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
