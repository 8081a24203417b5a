"""Word list loading: filters input lines and builds the trie and queue."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

from longword.constants import ALPHABET, MIN_WORD_LENGTH
from longword.pending import PendingQueue
from longword.tracker import CandidateTracker
from longword.trie import Trie

log = logging.getLogger("longword")


class WordList:
    """Vocabulary with its prefix trie and queue of decomposition candidates.

    Words are inserted in lexicographic order unless *presorted* is set,
    so that every prefix word is in the trie before its extensions are
    inserted.  The trie is only built once all lines have been read.
    """

    def __init__(self, min_length: int = MIN_WORD_LENGTH, presorted: bool = False):
        self.min_length = min_length
        self.presorted = presorted
        self.words: list[str] = []
        self._seen: set[str] = set()
        self.skipped = 0
        self.duplicates = 0
        self.trie = Trie()
        self.pending = PendingQueue()

    def load(self, path: str) -> None:
        """Read words from *path* ("-" for stdin).  Raises OSError."""
        if path == "-":
            self.add_lines(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8-sig") as f:
                self.add_lines(f)
        log.info("Loaded %s words from %s", f"{len(self.words):,}", path)
        log.debug("Skipped %s lines, %s duplicates",
                  f"{self.skipped:,}", f"{self.duplicates:,}")

    def add_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            word = line.strip()
            if len(word) < self.min_length or not word or not set(word) <= ALPHABET:
                self.skipped += 1
                continue
            if word in self._seen:
                self.duplicates += 1
                continue
            self._seen.add(word)
            self.words.append(word)
        self._build()

    def _build(self) -> None:
        self.trie = Trie()
        self.pending = PendingQueue()
        order = self.words if self.presorted else sorted(self.words)
        for word in order:
            self.pending.push(word, self.trie.insert(word))
        log.debug("Trie has %s nodes; %s candidate words queued",
                  f"{self.trie.node_count:,}", f"{len(self.pending):,}")

    def resolve(self) -> CandidateTracker:
        """Run the resolution pass and return the filled leaderboard."""
        tracker = CandidateTracker()
        matches, _total = self.pending.resolve_all(self.trie)
        tracker.offer_all(matches)
        return tracker

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.words)
