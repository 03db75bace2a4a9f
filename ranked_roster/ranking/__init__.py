"""
Ranking implementations.

Provides the pure merge-sort primitives and the MergeRanker implementation of
the Ranker interface built on top of them.
"""

from .comparator import compare, is_sorted, precedes
from .merge_ranker import MergeRanker
from .merge_sort import insert, merge, remove, sort

__all__ = [
    "compare",
    "precedes",
    "is_sorted",
    "merge",
    "sort",
    "insert",
    "remove",
    "MergeRanker",
]
