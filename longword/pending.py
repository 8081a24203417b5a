"""Deferred resolution of decomposition candidates.

Insertion can only tell that a word *starts* with a known word; whether
the rest of it is made of words depends on the whole vocabulary.  Each
such word is parked here with its missing suffixes and checked once the
trie is complete.
"""

from __future__ import annotations

import logging
from typing import Iterator

from longword.decompose import can_decompose
from longword.trie import Trie

logger = logging.getLogger("longword.pending")


class PendingEntry:
    """A word that passed at least one known word end while being inserted."""

    __slots__ = ("word", "missing")

    def __init__(self, word: str, missing: list[str]):
        self.word = word
        self.missing = missing  # in the order the boundaries were found

    def resolve(self, trie: Trie) -> str | None:
        """First missing suffix that decomposes, or None."""
        for suffix in self.missing:
            if can_decompose(trie, suffix):
                return suffix
        return None

    def __repr__(self) -> str:
        return f"PendingEntry({self.word!r}, missing={self.missing!r})"


class PendingQueue:
    """FIFO of :class:`PendingEntry`, resolved against a finished trie."""

    def __init__(self):
        self._entries: list[PendingEntry] = []

    def push(self, word: str, missing: list[str]) -> None:
        """Queue *word*; words with no missing suffix are never candidates."""
        if missing:
            self._entries.append(PendingEntry(word, missing))

    def resolve_all(self, trie: Trie) -> tuple[list[tuple[str, int]], int]:
        """Confirm queued words against *trie*.

        Returns ``(matches, total)`` where *matches* lists each
        concatenated word once, as ``(word, length)``, in queue order.
        The queue is left intact, so resolving again gives the same
        answer.
        """
        matches: list[tuple[str, int]] = []
        for entry in self._entries:
            suffix = entry.resolve(trie)
            if suffix is None:
                continue
            logger.debug("%s is concatenated (%s + %s)",
                         entry.word, entry.word[: -len(suffix)], suffix)
            matches.append((entry.word, len(entry.word)))
        return matches, len(matches)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PendingEntry]:
        return iter(self._entries)
