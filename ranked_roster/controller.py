"""
Controller for the ranked roster.

Owns the authoritative ranked sequence, applies add/remove intents through the
ranker and hands each resulting snapshot to the presenters.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import CapacityError, ConfigurationError, RosterBusyError, ValidationError
from .interfaces import AdmissionClock, Presenter, Ranker
from .logging_config import get_logger
from .models import Entry, RosterTransition, SortedSequence


@dataclass
class RosterConfig:
    """Configuration for a roster controller."""

    max_entries: int = 5000
    max_name_length: int = 64
    bar_width: int = 30  # width of the leading score's bar in table output

    def __post_init__(self):
        """Validate configuration."""
        if self.max_entries <= 0:
            raise ConfigurationError(f"max_entries must be positive, got {self.max_entries}")
        if self.max_name_length <= 0:
            raise ConfigurationError(f"max_name_length must be positive, got {self.max_name_length}")
        if self.bar_width <= 0:
            raise ConfigurationError(f"bar_width must be positive, got {self.bar_width}")


def parse_score(raw: object) -> int:
    """
    Turn user input into an integer score.

    Accepts ints and strings holding an integer (surrounding whitespace
    allowed). Anything else, including bools and floats, is rejected.
    """
    if isinstance(raw, bool):
        raise ValidationError(f"Score must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise ValidationError(f"Score must be an integer, got {raw!r}") from None
    raise ValidationError(f"Score must be an integer, got {raw!r}")


class RosterController:
    """Single writer of the ranked roster."""

    def __init__(
        self,
        ranker: Ranker,
        clock: AdmissionClock,
        presenters: Sequence[Presenter] = (),
        config: RosterConfig | None = None,
    ):
        """Initialize controller with an empty roster."""
        self.ranker: Ranker = ranker
        self.clock: AdmissionClock = clock
        self.presenters: list[Presenter] = list(presenters)
        self.config: RosterConfig = config or RosterConfig()

        self._entries: SortedSequence = ()
        self._busy: bool = False

        self.logger: Logger = get_logger("roster_controller")

    @property
    def entries(self) -> SortedSequence:
        """Current ranked snapshot."""
        return self._entries

    @property
    def busy(self) -> bool:
        """True while an intent is being applied or presented."""
        return self._busy

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, presenter: Presenter) -> None:
        """Register a presenter for future updates."""
        self.presenters.append(presenter)

    def get(self, entry_id: str) -> Entry | None:
        """Look up an entry by id."""
        for entry in self._entries:
            if entry.entry_id == entry_id:
                return entry
        return None

    def rank_of(self, entry_id: str) -> int | None:
        """1-based rank of an entry, or None if it is not on the board."""
        for rank, entry in enumerate(self._entries, 1):
            if entry.entry_id == entry_id:
                return rank
        return None

    def load(self, seeds: Iterable[tuple[str, object]]) -> SortedSequence:
        """
        Replace the board with a bulk-loaded roster.

        Seeds are admitted in iteration order and ranked with a single full sort.

        Args:
            seeds: (display_name, score) pairs

        Returns:
            The new ranked snapshot
        """
        self._begin("load")
        try:
            new_entries = [self._new_entry(name, score) for name, score in seeds]
            if len(new_entries) > self.config.max_entries:
                raise CapacityError(
                    f"Seed roster has {len(new_entries)} entries, limit is {self.config.max_entries}"
                )
            before = self._entries
            self._entries = self.ranker.sort(new_entries)
            self.logger.info(f"Loaded roster with {len(self._entries)} entries")
            self._notify(RosterTransition(action="load", before=before, after=self._entries))
        finally:
            self._busy = False
        return self._entries

    def add(self, name: str, score: object) -> Entry:
        """
        Admit a new participant.

        Args:
            name: Display name (stripped, must be non-empty)
            score: Integer score, or a string holding one

        Returns:
            The admitted entry
        """
        self._begin("add")
        try:
            if len(self._entries) >= self.config.max_entries:
                raise CapacityError(f"Roster is full ({self.config.max_entries} entries)")
            entry = self._new_entry(name, score)
            before = self._entries
            self._entries = self.ranker.insert(before, entry)
            self.logger.info(
                f"Added {entry.display_name} ({entry.entry_id}) with score {entry.score} at rank {self.rank_of(entry.entry_id)}"
            )
            self._notify(RosterTransition(action="add", before=before, after=self._entries, entry_id=entry.entry_id))
        finally:
            self._busy = False
        return entry

    def remove(self, entry_id: str) -> bool:
        """
        Remove a participant by id.

        Removing an id that is not on the board is a no-op.

        Returns:
            True if an entry was removed
        """
        self._begin("remove")
        try:
            before = self._entries
            after = self.ranker.remove(before, entry_id)
            if len(after) == len(before):
                self.logger.info(f"Remove ignored, no entry with id {entry_id}")
                return False
            self._entries = after
            self.logger.info(f"Removed {entry_id}, {len(after)} entries remain")
            self._notify(RosterTransition(action="remove", before=before, after=after, entry_id=entry_id))
            return True
        finally:
            self._busy = False

    def _begin(self, action: str) -> None:
        """Claim the single-writer slot or reject the intent."""
        if self._busy:
            self.logger.warning(f"Rejected {action} intent: another update is in progress")
            raise RosterBusyError(f"Cannot {action} while another update is in progress")
        self._busy = True

    def _new_entry(self, name: str, score: object) -> Entry:
        """Validate user input and stamp a new entry."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Player name cannot be empty")
        name = name.strip()
        if len(name) > self.config.max_name_length:
            raise ValidationError(
                f"Player name exceeds {self.config.max_name_length} characters"
            )
        value = parse_score(score)
        return Entry(
            entry_id=self.clock.next_id(),
            display_name=name,
            score=value,
            admitted_at=self.clock.next_timestamp(),
        )

    def _notify(self, transition: RosterTransition) -> None:
        """Hand the transition to every presenter (busy flag still held)."""
        for presenter in self.presenters:
            presenter.present(transition)
