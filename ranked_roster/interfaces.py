"""
Abstract base classes defining the interfaces for the ranked roster system.

All interfaces are synchronous; the controller is the only writer.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from .models import Entry, Ordering, RosterTransition, SortedSequence


class Ranker(ABC):
    """Interface for producing and maintaining a ranked sequence."""

    @abstractmethod
    def sort(self, entries: Sequence[Entry]) -> SortedSequence:
        """Rank an arbitrary, unsorted collection of entries."""
        pass

    @abstractmethod
    def insert(self, current: SortedSequence, new_entry: Entry) -> SortedSequence:
        """
        Return a new ranking with `new_entry` folded in.

        `current` must already be ranked and must not contain `new_entry.entry_id`.
        """
        pass

    @abstractmethod
    def remove(self, current: SortedSequence, entry_id: str) -> SortedSequence:
        """Return a new ranking without `entry_id` (no-op if absent)."""
        pass

    @abstractmethod
    def compare(self, a: Entry, b: Entry) -> Ordering:
        """Compare two entries under the ranking order."""
        pass


class AdmissionClock(ABC):
    """Interface for assigning identities and admission stamps to new entries."""

    @abstractmethod
    def next_id(self) -> str:
        """Return an id not handed out before by this clock."""
        pass

    @abstractmethod
    def next_timestamp(self) -> int:
        """Return a stamp strictly greater than every previous one."""
        pass


class Presenter(ABC):
    """Interface for collaborators that render roster updates."""

    @abstractmethod
    def present(self, transition: RosterTransition) -> None:
        """
        Render one roster update.

        Snapshots in `transition` are immutable; presenters must not try to
        feed intents back into the controller from here.
        """
        pass


class RosterSource(ABC):
    """Interface for bulk-loading the starting roster."""

    @abstractmethod
    def list_seeds(self) -> Iterable[tuple[str, int]]:
        """Return (display_name, score) pairs in admission order."""
        pass
