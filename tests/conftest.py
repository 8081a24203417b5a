"""Shared fixtures for the longest-word tests."""

import pytest

from longword.dictionary import WordList
from longword.trie import Trie


def build_trie(words):
    trie = Trie()
    for word in words:
        trie.insert(word)
    return trie


@pytest.fixture
def make_trie():
    """Factory for a trie holding the given words."""
    return build_trie


@pytest.fixture
def make_word_list():
    """Factory for a loaded WordList built from in-memory lines."""
    def _make(lines, **kwargs):
        word_list = WordList(**kwargs)
        word_list.add_lines(lines)
        return word_list
    return _make


@pytest.fixture
def word_file(tmp_path):
    """Write lines to a temporary word file and return its path."""
    def _write(lines, newline="\n"):
        path = tmp_path / "words.txt"
        path.write_text("".join(line + newline for line in lines), encoding="utf-8")
        return str(path)
    return _write
