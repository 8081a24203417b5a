"""Decomposition search: can a string be spelled as a run of known words?"""

from __future__ import annotations

from longword.trie import Trie, TrieNode


def can_decompose(trie: Trie, text: str) -> bool:
    """True if *text* splits into one or more words of the completed *trie*.

    The search walks states ``(node, pos)``: the trie node reached by
    the word currently being spelled, and how much of *text* has been
    consumed.  From each state it either keeps spelling the current
    word (descend into the child for ``text[pos]``) or, when *node*
    ends a word, starts a new word at the root without consuming
    anything.  It succeeds on reaching the end of *text* at a word end.

    Each state is expanded at most once, so the cost is bounded by
    ``len(text)`` times the trie depth rather than by the number of
    ways to split *text*.

    Callers pass the remainder left after a known word-ending prefix,
    never a whole word, which is what guarantees at least two parts.
    """
    root = trie.root
    end = len(text)
    stack: list[tuple[TrieNode, int]] = [(root, 0)]
    visited: set[tuple[TrieNode, int]] = set()

    while stack:
        state = stack.pop()
        if state in visited:
            continue
        visited.add(state)
        node, pos = state

        if pos == end:
            if node.is_word_end:
                return True
            continue

        # Pushed first so that extending the current word is tried first.
        if node.is_word_end and node is not root:
            stack.append((root, pos))
        child = node.children.get(text[pos])
        if child is not None:
            stack.append((child, pos + 1))

    return False
