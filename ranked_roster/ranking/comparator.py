"""
Total order over roster entries.

Score descending, then admission time ascending. Exact ties resolve to
BEFORE so the left operand of a comparison always wins.
"""

from collections.abc import Sequence

from ..models import Entry, Ordering


def compare(a: Entry, b: Entry) -> Ordering:
    """Return BEFORE if `a` ranks ahead of `b`, AFTER otherwise."""
    if a.score > b.score:
        return Ordering.BEFORE
    if a.score < b.score:
        return Ordering.AFTER
    if a.admitted_at <= b.admitted_at:
        return Ordering.BEFORE
    return Ordering.AFTER


def precedes(a: Entry, b: Entry) -> bool:
    """Shorthand for `compare(a, b) is Ordering.BEFORE`."""
    return compare(a, b) is Ordering.BEFORE


def is_sorted(entries: Sequence[Entry]) -> bool:
    """Check that every adjacent pair is in ranking order."""
    return all(precedes(a, b) for a, b in zip(entries, entries[1:]))
