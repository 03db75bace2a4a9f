"""
Recording presenter implementation.

Collects transitions instead of rendering them. Useful for tests and for
embedding the controller in another program.
"""

from typing_extensions import override

from ..interfaces import Presenter
from ..models import RosterTransition


class RecordingPresenter(Presenter):
    """Presenter that stores every transition it receives."""

    def __init__(self):
        self.transitions: list[RosterTransition] = []

    @override
    def present(self, transition: RosterTransition) -> None:
        self.transitions.append(transition)

    @property
    def last(self) -> RosterTransition | None:
        """Most recent transition, if any."""
        return self.transitions[-1] if self.transitions else None

    def actions(self) -> list[str]:
        """Actions in the order they were presented."""
        return [t.action for t in self.transitions]
