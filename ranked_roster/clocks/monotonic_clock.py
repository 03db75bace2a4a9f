"""
Monotonic wall clock implementation.

Stamps entries with epoch milliseconds, never repeating a value even when
several entries arrive within the same millisecond.
"""

import time
from collections.abc import Callable

from typing_extensions import override

from ..interfaces import AdmissionClock


class MonotonicClock(AdmissionClock):
    """
    Wall-clock admission stamps in milliseconds.

    If the wall clock has not moved past the previous stamp (same millisecond,
    or the system clock stepped backwards) the previous stamp plus one is used.
    Ids are derived from the stamp so they are unique for the clock's lifetime.
    """

    def __init__(self, prefix: str = "p", now_ms: Callable[[], int] | None = None):
        """
        Initialize monotonic clock.

        Args:
            prefix: Prefix for generated ids
            now_ms: Source of epoch milliseconds (defaults to time.time_ns)
        """
        self.prefix = prefix
        self._now_ms = now_ms or (lambda: time.time_ns() // 1_000_000)
        self._last_stamp: int | None = None
        self._last_id_stamp: int | None = None

    @staticmethod
    def _bump(stamp: int, last: int | None) -> int:
        """Return `stamp`, or `last + 1` if the clock has not moved past `last`."""
        if last is not None and stamp <= last:
            return last + 1
        return stamp

    @override
    def next_timestamp(self) -> int:
        self._last_stamp = self._bump(self._now_ms(), self._last_stamp)
        return self._last_stamp

    @override
    def next_id(self) -> str:
        self._last_id_stamp = self._bump(self._now_ms(), self._last_id_stamp)
        return f"{self.prefix}{self._last_id_stamp}"
