"""
Tests for the core dataclasses and the MergeRanker binding.
"""

import dataclasses

import pytest

from ranked_roster.exceptions import ValidationError
from ranked_roster.models import Entry, Ordering, RosterTransition
from ranked_roster.ranking import MergeRanker


class TestEntry:
    """Test Entry construction."""

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Entry(entry_id="", display_name="Ana", score=1, admitted_at=1)

    def test_entries_are_frozen(self) -> None:
        entry = Entry("p1", "Ana", 1, 1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.score = 99  # type: ignore[misc]


class TestRosterTransition:
    """Test transition helpers."""

    def test_rank_of_and_moves(self) -> None:
        a = Entry("a", "A", 10, 1)
        b = Entry("b", "B", 5, 2)
        c = Entry("c", "C", 7, 3)
        transition = RosterTransition(action="add", before=(a, b), after=(a, c, b), entry_id="c")

        assert transition.rank_of("c") == 2
        assert transition.rank_of("zzz") is None
        assert transition.moved_ids() == {"b", "c"}

    def test_removal_moves(self) -> None:
        a = Entry("a", "A", 10, 1)
        b = Entry("b", "B", 5, 2)
        transition = RosterTransition(action="remove", before=(a, b), after=(b,), entry_id="a")

        assert transition.moved_ids() == {"b"}


class TestMergeRanker:
    """Test MergeRanker through the Ranker interface."""

    def test_ranker_round_trip(self) -> None:
        # Arrange
        ranker = MergeRanker()
        entries = [Entry("x", "X", 1, 1), Entry("y", "Y", 3, 2)]

        # Act
        board = ranker.sort(entries)
        board = ranker.insert(board, Entry("z", "Z", 2, 3))
        board = ranker.remove(board, "y")

        # Assert
        assert [e.entry_id for e in board] == ["z", "x"]
        assert ranker.remove(board, "missing") == board
        assert ranker.compare(board[0], board[1]) is Ordering.BEFORE
