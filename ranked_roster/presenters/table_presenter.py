"""
Table presenter implementation.

Renders the ranking with prettytable: rank badges for the podium, a bar
column scaled to the leading score, and a marker on rows that moved.
"""

import sys
from typing import TextIO

from prettytable import PrettyTable
from typing_extensions import override

from ..interfaces import Presenter
from ..logging_config import get_logger
from ..models import RosterTransition, SortedSequence

# Module-level logger
logger = get_logger("table_presenter")

PODIUM_BADGES = {1: "1st", 2: "2nd", 3: "3rd"}
MOVED_MARKER = "*"
BAR_CHAR = "#"


def rank_label(rank: int) -> str:
    """Badge for the top three ranks, plain number otherwise."""
    return PODIUM_BADGES.get(rank, str(rank))


def score_bar(score: int, max_score: int, width: int) -> str:
    """Bar proportional to `score / max_score`; `max_score` is the leading score."""
    if max_score <= 0 or score <= 0:
        return ""
    filled = round(width * score / max_score)
    return BAR_CHAR * filled


def build_table(entries: SortedSequence, bar_width: int = 30, moved: set[str] | None = None) -> PrettyTable:
    """
    Build the leaderboard table for a ranked snapshot.

    Args:
        entries: Ranked snapshot to render
        bar_width: Width of the bar for the leading score
        moved: Ids to flag as having changed position

    Returns:
        PrettyTable ready to print
    """
    moved = moved or set()
    max_score = max((entry.score for entry in entries), default=0)

    table = PrettyTable()
    table.field_names = ["Rank", "Player", "Score", "Bar", "Id"]
    table.align["Rank"] = "r"
    table.align["Player"] = "l"
    table.align["Score"] = "r"
    table.align["Bar"] = "l"
    table.align["Id"] = "l"

    for rank, entry in enumerate(entries, 1):
        label = rank_label(rank)
        if entry.entry_id in moved:
            label = f"{MOVED_MARKER}{label}"
        table.add_row([
            label,
            entry.display_name,
            entry.score,
            score_bar(entry.score, max_score, bar_width),
            entry.entry_id,
        ])

    return table


class TablePresenter(Presenter):
    """Prints the resulting ranking of every transition to a text stream."""

    def __init__(self, stream: TextIO | None = None, bar_width: int = 30, show_moves: bool = True):
        """
        Initialize table presenter.

        Args:
            stream: Output stream (defaults to sys.stdout at present time)
            bar_width: Width of the bar for the leading score
            show_moves: Mark rows whose rank changed in this transition
        """
        self.stream = stream
        self.bar_width = bar_width
        self.show_moves = show_moves

    @override
    def present(self, transition: RosterTransition) -> None:
        stream = self.stream or sys.stdout
        moved = transition.moved_ids() if self.show_moves and transition.action != "load" else set()
        logger.debug(f"Rendering {len(transition.after)} entries after {transition.action}")

        if not transition.after:
            print("Leaderboard is empty.", file=stream)
            return

        print(build_table(transition.after, self.bar_width, moved), file=stream)
