"""Shared constants for the longest-word finder."""

from __future__ import annotations

import string

# Words are spelled over a fixed 26-letter lowercase alphabet.
ALPHABET: frozenset[str] = frozenset(string.ascii_lowercase)

# Lines shorter than this (after stripping) are skipped.
MIN_WORD_LENGTH = 1

# Placeholder printed when a leaderboard slot is empty.
NULL_WORD = "NULL"

LONGEST_TEMPLATE = "Longest concatenated word is : {}"
SECOND_LONGEST_TEMPLATE = "2nd longest concatenated word is : {}"
TOTAL_TEMPLATE = "There are {} concatenated words in the file."

USAGE = """arguments :
  <file>     file with words, one per line ("-" reads standard input)"""
