"""
Instrument CLI - time-travel history tooling

Commands:
- instrument snapshot show - Inspect an exported lifted-state snapshot
- instrument replay - Recompute a snapshot under a reducer
- instrument history - Apply a time-travel operation to a snapshot
"""

__version__ = "0.1.0"
