"""
Tests for tracker.py - the top-2 leaderboard.
"""

from longword.tracker import Candidate, CandidateTracker


class TestCandidate:

    def test_length_defaults_to_word_length(self):
        assert Candidate("catsdog").length == 7

    def test_explicit_length(self):
        assert Candidate("abc", 10).length == 10

    def test_equality(self):
        assert Candidate("aa") == Candidate("aa", 2)
        assert Candidate("aa") != Candidate("bb")


class TestCandidateTracker:
    """Tests for CandidateTracker.offer."""

    def test_empty(self):
        tracker = CandidateTracker()
        assert tracker.longest is None
        assert tracker.second_longest is None
        assert tracker.total == 0

    def test_first_offer_becomes_longest(self):
        tracker = CandidateTracker()
        tracker.offer("aa")
        assert tracker.longest == Candidate("aa")
        assert tracker.second_longest is None
        assert tracker.total == 1

    def test_longer_offer_demotes_longest(self):
        tracker = CandidateTracker()
        tracker.offer("aa")
        tracker.offer("aaa")
        assert tracker.longest.word == "aaa"
        assert tracker.second_longest.word == "aa"

    def test_shorter_offer_fills_second(self):
        tracker = CandidateTracker()
        tracker.offer("aaa")
        tracker.offer("aa")
        assert tracker.longest.word == "aaa"
        assert tracker.second_longest.word == "aa"

    def test_tie_keeps_first_seen(self):
        tracker = CandidateTracker()
        tracker.offer("abcd")
        tracker.offer("efgh")
        assert tracker.longest.word == "abcd"
        assert tracker.second_longest.word == "efgh"

    def test_tie_for_second_keeps_first_seen(self):
        tracker = CandidateTracker()
        tracker.offer("abcdef")
        tracker.offer("abc")
        tracker.offer("xyz")
        assert tracker.second_longest.word == "abc"

    def test_small_offers_only_count(self):
        tracker = CandidateTracker()
        tracker.offer_all([("abcdef", 6), ("abcde", 5), ("ab", 2), ("cd", 2)])
        assert tracker.longest.word == "abcdef"
        assert tracker.second_longest.word == "abcde"
        assert tracker.total == 4

    def test_lengths_never_decrease(self):
        tracker = CandidateTracker()
        seen = []
        for word in ["aaa", "a", "aaaaa", "aa", "aaaa"]:
            tracker.offer(word)
            seen.append((tracker.longest.length, tracker.second_longest.length
                         if tracker.second_longest else 0))
        assert seen == [(3, 0), (3, 1), (5, 3), (5, 3), (5, 4)]
