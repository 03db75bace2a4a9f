"""
Presenter implementations.

Provides implementations of the Presenter interface that receive roster
snapshots after every update.

Available implementations:
- TablePresenter: Renders the ranking as a prettytable with a score bar column
- RecordingPresenter: Keeps every transition in memory
"""

from .recording_presenter import RecordingPresenter
from .table_presenter import TablePresenter

__all__ = ["RecordingPresenter", "TablePresenter"]
