"""
Ranked Roster - Incrementally Maintained Leaderboard

Keeps participants ranked by score (highest first, earliest admission wins
ties) and folds each new arrival in with a single linear merge instead of
re-sorting the whole board.
"""

from .models import Entry, Ordering, RosterTransition, SortedSequence
from .interfaces import AdmissionClock, Presenter, Ranker, RosterSource
from .ranking import compare, insert, merge, remove, sort, MergeRanker
from .controller import RosterConfig, RosterController

__version__ = "0.1.0"
__all__ = [
    "Entry",
    "Ordering",
    "RosterTransition",
    "SortedSequence",
    "AdmissionClock",
    "Presenter",
    "Ranker",
    "RosterSource",
    "compare",
    "merge",
    "sort",
    "insert",
    "remove",
    "MergeRanker",
    "RosterConfig",
    "RosterController",
]
