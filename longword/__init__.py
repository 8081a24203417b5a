"""Longest Word -- concatenated-word finder."""

from longword.constants import ALPHABET, MIN_WORD_LENGTH
from longword.trie import Trie, TrieNode
from longword.decompose import can_decompose
from longword.pending import PendingEntry, PendingQueue
from longword.tracker import Candidate, CandidateTracker
from longword.dictionary import WordList

__version__ = "1.0.0"

__all__ = [
    "ALPHABET",
    "MIN_WORD_LENGTH",
    "Candidate",
    "CandidateTracker",
    "PendingEntry",
    "PendingQueue",
    "Trie",
    "TrieNode",
    "WordList",
    "can_decompose",
]
