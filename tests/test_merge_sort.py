"""
Tests for the merge-sort ranking primitives.

Focus on ordering invariants and incremental vs bulk equivalence.
"""

import random

from ranked_roster.models import Entry, Ordering
from ranked_roster.ranking import compare, insert, is_sorted, merge, precedes, remove, sort


def make_entry(score: int, admitted_at: int, entry_id: str | None = None) -> Entry:
    """Build an entry with a predictable id."""
    return Entry(
        entry_id=entry_id or f"e{admitted_at}",
        display_name=f"player {admitted_at}",
        score=score,
        admitted_at=admitted_at,
    )


def random_entries(rng: random.Random, count: int, score_range: int = 10) -> list[Entry]:
    """Entries with many duplicate scores and increasing admission stamps."""
    return [make_entry(rng.randint(-score_range, score_range), t) for t in range(count)]


def ids(entries) -> list[str]:
    return [e.entry_id for e in entries]


class TestComparator:
    """Test compare/precedes total order."""

    def test_higher_score_comes_first(self) -> None:
        """Score is the primary key, descending."""
        high = make_entry(200, 5)
        low = make_entry(150, 1)

        assert compare(high, low) is Ordering.BEFORE
        assert compare(low, high) is Ordering.AFTER

    def test_equal_score_earlier_admission_first(self) -> None:
        """On equal score the earlier admission ranks ahead."""
        early = make_entry(100, 1)
        late = make_entry(100, 2)

        assert compare(early, late) is Ordering.BEFORE
        assert compare(late, early) is Ordering.AFTER

    def test_exact_tie_prefers_left_operand(self) -> None:
        """Equal score and stamp resolve to BEFORE in both directions."""
        a = make_entry(100, 7, "a")
        b = make_entry(100, 7, "b")

        assert compare(a, b) is Ordering.BEFORE
        assert compare(b, a) is Ordering.BEFORE
        assert precedes(a, b) and precedes(b, a)

    def test_negative_scores_are_ordered(self) -> None:
        """Signed scores compare numerically."""
        assert precedes(make_entry(-1, 2), make_entry(-5, 1))

    def test_is_sorted(self) -> None:
        """is_sorted checks every adjacent pair."""
        ordered = [make_entry(3, 1), make_entry(3, 2), make_entry(1, 0)]
        unordered = [make_entry(3, 2), make_entry(3, 1)]

        assert is_sorted(ordered)
        assert not is_sorted(unordered)
        assert is_sorted([])
        assert is_sorted([make_entry(1, 1)])


class TestMerge:
    """Test the two-cursor stable merge."""

    def test_merge_interleaves_two_runs(self) -> None:
        """Both runs are consumed in ranking order."""
        # Arrange
        left = (make_entry(200, 1), make_entry(120, 3))
        right = (make_entry(180, 2), make_entry(100, 4))

        # Act
        merged = merge(left, right)

        # Assert
        assert [e.score for e in merged] == [200, 180, 120, 100]

    def test_merge_with_empty_side_returns_other(self) -> None:
        """Empty inputs are valid and degenerate to the other run."""
        run = (make_entry(5, 1), make_entry(3, 2))

        assert merge(run, ()) == run
        assert merge((), run) == run
        assert merge((), ()) == ()

    def test_merge_returns_tuple(self) -> None:
        """Results are immutable snapshots even for list inputs."""
        merged = merge([make_entry(1, 1)], [make_entry(2, 2)])

        assert isinstance(merged, tuple)

    def test_merge_equal_scores_by_admission(self) -> None:
        """The earlier admission wins a score tie regardless of which side it is on."""
        left = (make_entry(50, 9, "late"),)
        right = (make_entry(50, 2, "early"),)

        assert ids(merge(left, right)) == ["early", "late"]

    def test_merge_exact_tie_prefers_left(self) -> None:
        """Full ties emit the left head first."""
        left = (make_entry(50, 3, "incumbent"),)
        right = (make_entry(50, 3, "newcomer"),)

        assert ids(merge(left, right)) == ["incumbent", "newcomer"]

    def test_merge_does_not_mutate_inputs(self) -> None:
        """Inputs are left untouched."""
        left = [make_entry(5, 1)]
        right = [make_entry(7, 2)]

        merge(left, right)

        assert ids(left) == ["e1"]
        assert ids(right) == ["e2"]


class TestSort:
    """Test the top-down merge sort."""

    def test_scenario_bulk_sort(self) -> None:
        """Scores 120, 200, 150 with increasing stamps sort to 200, 150, 120."""
        entries = [make_entry(120, 1), make_entry(200, 2), make_entry(150, 3)]

        result = sort(entries)

        assert [e.score for e in result] == [200, 150, 120]

    def test_trivial_inputs(self) -> None:
        """Zero or one element is already sorted."""
        single = make_entry(1, 1)

        assert sort([]) == ()
        assert sort([single]) == (single,)

    def test_demo_roster_order(self) -> None:
        """The demo board sorts to Raghu, Ritin, Priyanshu, Sahil, Ayush."""
        entries = [
            Entry("p1", "Sahil", 150, 1),
            Entry("p2", "Raghu", 200, 2),
            Entry("p3", "Ayush", 120, 3),
            Entry("p4", "Ritin", 180, 4),
            Entry("p5", "Priyanshu", 160, 5),
        ]

        result = sort(entries)

        assert [e.display_name for e in result] == ["Raghu", "Ritin", "Priyanshu", "Sahil", "Ayush"]

    def test_sort_is_stable_for_exact_ties(self) -> None:
        """Entries equal in score and stamp keep their input order."""
        entries = [make_entry(10, 0, f"x{i}") for i in range(7)]

        assert ids(sort(entries)) == [f"x{i}" for i in range(7)]

    def test_sort_matches_builtin_key_order(self) -> None:
        """Random inputs agree with sorting on (-score, admitted_at)."""
        rng = random.Random(1234)
        for size in (2, 3, 8, 33, 100):
            entries = random_entries(rng, size)
            rng.shuffle(entries)

            result = sort(entries)

            expected = sorted(entries, key=lambda e: (-e.score, e.admitted_at))
            assert list(result) == expected
            assert is_sorted(result)


class TestInsert:
    """Test incremental insertion."""

    def test_scenario_incumbent_first_on_tie(self) -> None:
        """A later arrival with the same score goes after the incumbent."""
        current = (make_entry(200, 10, "old"),)

        result = insert(current, make_entry(200, 11, "new"))

        assert ids(result) == ["old", "new"]

    def test_insert_into_empty(self) -> None:
        """Inserting into an empty board yields a single-entry board."""
        entry = make_entry(3, 1)

        assert insert((), entry) == (entry,)

    def test_insert_preserves_ids(self) -> None:
        """The result holds exactly the old ids plus the new one."""
        rng = random.Random(7)
        current = sort(random_entries(rng, 40))
        new_entry = make_entry(0, 999, "fresh")

        result = insert(current, new_entry)

        assert sorted(ids(result)) == sorted(ids(current) + ["fresh"])
        assert len(set(ids(result))) == len(result)
        assert is_sorted(result)

    def test_scenario_incremental_matches_bulk(self) -> None:
        """Five one-at-a-time inserts give the same order as one sort."""
        arrivals = [
            make_entry(150, 1),
            make_entry(200, 2),
            make_entry(120, 3),
            make_entry(180, 4),
            make_entry(160, 5),
        ]

        board: tuple[Entry, ...] = ()
        for entry in arrivals:
            board = insert(board, entry)

        assert board == sort(arrivals)

    def test_incremental_matches_bulk_randomized(self) -> None:
        """Equivalence holds with many duplicate scores."""
        rng = random.Random(42)
        for _ in range(20):
            arrivals = random_entries(rng, rng.randint(0, 60), score_range=3)

            board: tuple[Entry, ...] = ()
            for entry in arrivals:
                board = insert(board, entry)
                assert is_sorted(board)

            assert board == sort(arrivals)

    def test_equal_score_earlier_stamp_precedes(self) -> None:
        """An entry with an earlier stamp moves ahead of equal scores even if inserted later."""
        current = (make_entry(50, 5, "b"), make_entry(10, 6, "c"))

        result = insert(current, make_entry(50, 1, "a"))

        assert ids(result) == ["a", "b", "c"]


class TestRemove:
    """Test removal by id."""

    def test_remove_preserves_order(self) -> None:
        """Removing an entry keeps the rest in place."""
        board = sort([make_entry(s, t) for t, s in enumerate([5, 9, 1, 7])])

        result = remove(board, "e3")

        assert [e.score for e in result] == [9, 5, 1]
        assert is_sorted(result)

    def test_scenario_remove_absent_is_noop(self) -> None:
        """Removing an unknown id returns the same ids in the same order."""
        board = sort([make_entry(s, t) for t, s in enumerate([5, 9, 1])])

        result = remove(board, "missing")

        assert result == board

    def test_remove_is_idempotent(self) -> None:
        """Removing twice equals removing once."""
        rng = random.Random(3)
        board = sort(random_entries(rng, 25))
        target = board[10].entry_id

        once = remove(board, target)

        assert remove(once, target) == once
        assert target not in ids(once)
        assert len(once) == len(board) - 1

    def test_remove_from_empty(self) -> None:
        """Empty boards are valid input."""
        assert remove((), "x") == ()
