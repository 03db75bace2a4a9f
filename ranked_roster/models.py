"""
Core dataclasses for the ranked roster system.

Defines Entry, the Ordering enum and RosterTransition.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import ValidationError


class Ordering(Enum):
    """Result of comparing two entries."""

    BEFORE = "before"
    AFTER = "after"
    EQUIVALENT = "equivalent"


@dataclass(frozen=True)
class Entry:
    """One ranked participant. Never mutated once admitted."""

    entry_id: str
    display_name: str
    score: int
    admitted_at: int

    def __post_init__(self) -> None:
        """Validate entry data."""
        if not self.entry_id:
            raise ValidationError("entry_id cannot be empty")


SortedSequence = tuple[Entry, ...]


@dataclass(frozen=True)
class RosterTransition:
    """Before/after snapshots handed to presenters after each intent."""

    action: str
    before: SortedSequence
    after: SortedSequence
    entry_id: str | None = None

    def rank_of(self, entry_id: str) -> int | None:
        """1-based rank of an entry in the resulting snapshot, or None."""
        for rank, entry in enumerate(self.after, 1):
            if entry.entry_id == entry_id:
                return rank
        return None

    def moved_ids(self) -> set[str]:
        """Ids whose position changed between the two snapshots."""
        previous = {entry.entry_id: index for index, entry in enumerate(self.before)}
        return {
            entry.entry_id
            for index, entry in enumerate(self.after)
            if previous.get(entry.entry_id) != index
        }
