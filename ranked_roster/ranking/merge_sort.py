"""
Merge-based maintenance of a ranked sequence.

`sort` is only used for the initial bulk load. Every later arrival goes
through `insert`, which merges a one-element run into the existing ranking in
linear time instead of re-sorting.
"""

from collections.abc import Sequence

from ..models import Entry, SortedSequence
from .comparator import precedes


def merge(left: Sequence[Entry], right: Sequence[Entry]) -> SortedSequence:
    """
    Stable merge of two ranked sequences.

    Both inputs must already be in ranking order. On a full tie (same score
    and same admission time) the head of `left` is emitted first.

    Args:
        left: Ranked sequence, preferred on exact ties
        right: Ranked sequence

    Returns:
        New tuple holding every element of both inputs in ranking order
    """
    result: list[Entry] = []
    i = j = 0

    while i < len(left) and j < len(right):
        if precedes(left[i], right[j]):
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    # One side is exhausted; the other is already ranked
    result.extend(left[i:])
    result.extend(right[j:])
    return tuple(result)


def sort(entries: Sequence[Entry]) -> SortedSequence:
    """Full top-down merge sort, splitting positionally at n // 2."""
    if len(entries) <= 1:
        return tuple(entries)

    middle = len(entries) // 2
    return merge(sort(entries[:middle]), sort(entries[middle:]))


def insert(current: Sequence[Entry], new_entry: Entry) -> SortedSequence:
    """Fold one new entry into a ranked sequence in O(n).

    The existing ranking is passed as the left run so incumbents win exact ties.
    """
    return merge(current, (new_entry,))


def remove(current: Sequence[Entry], target_id: str) -> SortedSequence:
    """Drop the entry with `target_id`. Absent ids leave the sequence unchanged."""
    return tuple(entry for entry in current if entry.entry_id != target_id)
