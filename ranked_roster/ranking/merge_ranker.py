"""
Merge-sort ranker implementation.

Binds the pure merge primitives to the Ranker interface and logs each step.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from ..interfaces import Ranker
from ..logging_config import get_logger
from ..models import Entry, Ordering, SortedSequence
from . import comparator, merge_sort


class MergeRanker(Ranker):
    """
    Ranker backed by a stable top-down merge sort.

    Bulk loads pay O(n log n) once; each later arrival is a single linear merge.
    Holds no roster state of its own.
    """

    def __init__(self):
        """Initialize merge ranker."""
        self.logger: Logger = get_logger("merge_ranker")

    @override
    def sort(self, entries: Sequence[Entry]) -> SortedSequence:
        """Rank a bulk-loaded collection."""
        ranked = merge_sort.sort(entries)
        self.logger.debug(f"Sorted {len(ranked)} entries")
        return ranked

    @override
    def insert(self, current: SortedSequence, new_entry: Entry) -> SortedSequence:
        """Merge one entry into the current ranking."""
        ranked = merge_sort.insert(current, new_entry)
        self.logger.debug(
            f"Merged {new_entry.entry_id} (score={new_entry.score}) into {len(current)} entries"
        )
        return ranked

    @override
    def remove(self, current: SortedSequence, entry_id: str) -> SortedSequence:
        """Filter one entry out of the current ranking."""
        ranked = merge_sort.remove(current, entry_id)
        if len(ranked) == len(current):
            self.logger.debug(f"Remove of {entry_id} was a no-op")
        else:
            self.logger.debug(f"Removed {entry_id}, {len(ranked)} entries left")
        return ranked

    @override
    def compare(self, a: Entry, b: Entry) -> Ordering:
        """Compare two entries."""
        return comparator.compare(a, b)
