"""
Roster source implementations.

Provides implementations of the RosterSource interface for seeding the board.

Available implementations:
- DemoRosterSource: The built-in five-player demo board
- JSONRosterSource: Reads name/score pairs from a JSON file
"""

from .demo_source import DEMO_PLAYERS, DemoRosterSource
from .json_source import JSONRosterSource

__all__ = ["DEMO_PLAYERS", "DemoRosterSource", "JSONRosterSource"]
