#!/usr/bin/env python3
"""
Longest Word

Finds the longest and second-longest words in a word list that are
concatenations of two or more other words from the same list.

Usage: longest-word [-v] [--min-length N] [--presorted] <file>
"""

from __future__ import annotations

import argparse
import logging
import sys

from longword import __version__
from longword.cli import run_cli
from longword.constants import MIN_WORD_LENGTH, USAGE
from longword.dictionary import WordList


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("longword")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="longest-word",
        description="Longest Word -- finds the longest words made of other words in a list",
    )
    parser.add_argument("files", nargs="*", metavar="file",
                        help="Word list, one word per line (- for stdin)")
    parser.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                        help="Skip lines shorter than this (default: %(default)s)")
    parser.add_argument("--presorted", action="store_true",
                        help="Keep file order instead of sorting words before insertion")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def usage() -> None:
    print(USAGE)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if len(args.files) != 1:
        usage()
        return 1
    path = args.files[0]

    word_list = WordList(min_length=args.min_length, presorted=args.presorted)
    try:
        word_list.load(path)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Unable to open file %s: %s", path,
                  getattr(exc, "strerror", None) or exc)
        usage()
        return 1

    run_cli(word_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())
