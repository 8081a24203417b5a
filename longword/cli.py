"""Terminal output for the longest-word finder."""

from __future__ import annotations

import logging
import time

from longword.constants import (
    LONGEST_TEMPLATE,
    NULL_WORD,
    SECOND_LONGEST_TEMPLATE,
    TOTAL_TEMPLATE,
)
from longword.dictionary import WordList
from longword.tracker import Candidate, CandidateTracker

log = logging.getLogger("longword")


def _word_or_null(slot: Candidate | None) -> str:
    return slot.word if slot is not None else NULL_WORD


def format_report(tracker: CandidateTracker) -> list[str]:
    """The three result lines, in print order."""
    return [
        LONGEST_TEMPLATE.format(_word_or_null(tracker.longest)),
        SECOND_LONGEST_TEMPLATE.format(_word_or_null(tracker.second_longest)),
        TOTAL_TEMPLATE.format(tracker.total),
    ]


def run_cli(word_list: WordList) -> CandidateTracker:
    """Resolve a loaded word list and print the report."""
    log.info("Checking %s candidate words...", f"{len(word_list.pending):,}")

    t0 = time.time()
    tracker = word_list.resolve()
    elapsed = time.time() - t0

    log.info("Found %d concatenated words in %.2fs.", tracker.total, elapsed)

    for line in format_report(tracker):
        print(line)
    return tracker
