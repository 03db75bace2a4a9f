"""
Demo roster source.

The five players shown on a fresh demo board, listed in admission order.
"""

from collections.abc import Iterable

from typing_extensions import override

from ..interfaces import RosterSource

DEMO_PLAYERS: tuple[tuple[str, int], ...] = (
    ("Sahil", 150),
    ("Raghu", 200),
    ("Ayush", 120),
    ("Ritin", 180),
    ("Priyanshu", 160),
)


class DemoRosterSource(RosterSource):
    """Seeds the board with DEMO_PLAYERS."""

    @override
    def list_seeds(self) -> Iterable[tuple[str, int]]:
        return list(DEMO_PLAYERS)
