"""
Counter clock implementation.

Deterministic stamps for tests and reproducible demo boards.
"""

from typing_extensions import override

from ..interfaces import AdmissionClock


class CounterClock(AdmissionClock):
    """Hands out consecutive integers as both stamps and id suffixes."""

    def __init__(self, start: int = 1, prefix: str = "p"):
        self.prefix = prefix
        self._next_stamp = start
        self._next_serial = start

    @override
    def next_id(self) -> str:
        serial = self._next_serial
        self._next_serial += 1
        return f"{self.prefix}{serial}"

    @override
    def next_timestamp(self) -> int:
        stamp = self._next_stamp
        self._next_stamp += 1
        return stamp
