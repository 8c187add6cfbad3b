"""
Action history storage.

This module provides:
- ActionLog: append-only store of (id, action) entries
- StageIndex: staged sequence and skip set over the log
"""

from .store import ActionLog, LogEntry
from .index import StageIndex

__all__ = [
    "ActionLog",
    "LogEntry",
    "StageIndex",
]
