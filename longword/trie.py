"""Prefix trie over the vocabulary, reporting word boundaries on insert."""

from __future__ import annotations

from longword.constants import ALPHABET


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word_end")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word_end: bool = False


class Trie:
    """Prefix trie for exact-word and prefix checks.

    Unlike a plain trie, :meth:`insert` also reports every point where
    the word being inserted passes through the end of a word that is
    already known.  Those remainders are what the decomposition search
    later has to cover.
    """

    def __init__(self):
        self.root = TrieNode()
        self.node_count = 1
        self._size = 0

    def insert(self, word: str) -> list[str]:
        """Insert *word* and return its missing suffixes.

        A suffix is recorded each time the walk stands on a known word
        end with characters still left to consume, e.g. with ``cat``
        and ``catdog`` known, inserting ``catdogfish`` returns
        ``["dogfish", "fish"]``.
        """
        missing: list[str] = []
        if not word:
            return missing

        node = self.root
        for i, ch in enumerate(word):
            if ch not in ALPHABET:
                raise ValueError(f"invalid character {ch!r} in word {word!r}")
            if node.is_word_end:
                missing.append(word[i:])
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
                self.node_count += 1
            node = child

        if not node.is_word_end:
            node.is_word_end = True
            self._size += 1
        return missing

    def contains_exact(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word_end

    is_word = contains_exact

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains_exact(word)

    def __len__(self) -> int:
        return self._size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
