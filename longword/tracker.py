"""Running leaderboard of the two longest concatenated words."""

from __future__ import annotations

from typing import Iterable


class Candidate:
    """A confirmed concatenated word and its length."""

    __slots__ = ("word", "length")

    def __init__(self, word: str, length: int | None = None):
        self.word = word
        self.length = len(word) if length is None else length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self.word == other.word and self.length == other.length

    def __hash__(self) -> int:
        return hash((self.word, self.length))

    def __repr__(self) -> str:
        return f"Candidate({self.word!r}, {self.length})"


class CandidateTracker:
    """Keeps the longest and second-longest words offered so far.

    Comparisons are strict, so a later word of equal length never
    displaces an earlier one.  Every offer counts toward :attr:`total`,
    not just the two that are kept.
    """

    def __init__(self):
        self.longest: Candidate | None = None
        self.second_longest: Candidate | None = None
        self.total = 0

    @staticmethod
    def _length(slot: Candidate | None) -> int:
        return slot.length if slot is not None else 0

    def offer(self, word: str, length: int | None = None) -> None:
        candidate = Candidate(word, length)
        if candidate.length > self._length(self.longest):
            self.second_longest = self.longest
            self.longest = candidate
        elif candidate.length > self._length(self.second_longest):
            self.second_longest = candidate
        self.total += 1

    def offer_all(self, matches: Iterable[tuple[str, int]]) -> None:
        for word, length in matches:
            self.offer(word, length)

    def __repr__(self) -> str:
        return (
            f"CandidateTracker(longest={self.longest!r}, "
            f"second_longest={self.second_longest!r}, total={self.total})"
        )
