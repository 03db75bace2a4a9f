"""
Admission clock implementations.

Provides implementations of the AdmissionClock interface used to stamp new
roster entries.

Available implementations:
- MonotonicClock: Wall-clock milliseconds, forced strictly increasing
- CounterClock: Deterministic counter for tests and demo rosters
"""

from .counter_clock import CounterClock
from .monotonic_clock import MonotonicClock

__all__ = ["CounterClock", "MonotonicClock"]
