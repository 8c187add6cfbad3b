"""
Lifted-state snapshots.

Provides:
- LiftedSnapshot: validated model of the exchange format
- Export of live lifted state to a detached snapshot
- Canonical JSON serialization and hashing
- Single-file save/load
"""

from .model import LiftedSnapshot, PerformActionRecord, ComputedStateRecord
from .serialize import (
    export_lifted_state,
    snapshot_to_json,
    snapshot_from_json,
    compute_snapshot_hash,
    save_snapshot,
    load_snapshot,
    read_snapshot_document,
)

__all__ = [
    "LiftedSnapshot",
    "PerformActionRecord",
    "ComputedStateRecord",
    "export_lifted_state",
    "snapshot_to_json",
    "snapshot_from_json",
    "compute_snapshot_hash",
    "save_snapshot",
    "load_snapshot",
    "read_snapshot_document",
]
