"""
Core primitives of the lifted-state engine.

This module provides:
- Actions: application action validation and the monitor action vocabulary
- State: ComputedState cache entries and the owned LiftedState
- Reducer: invocation wrapper with replay tagging and failure capture
- Canonical: deterministic serialization
"""

from .errors import InstrumentError, InvalidActionError, ConfigurationError, SnapshotError
from .actions import ActionTypes, ActionCreators, INIT_ACTION, validate_action
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .state import ComputedState, LiftedState
from .reducer import INTERRUPTED_ERROR, compute_next_entry, ensure_reducer, tag_action

__all__ = [
    "InstrumentError",
    "InvalidActionError",
    "ConfigurationError",
    "SnapshotError",
    "ActionTypes",
    "ActionCreators",
    "INIT_ACTION",
    "validate_action",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "ComputedState",
    "LiftedState",
    "INTERRUPTED_ERROR",
    "compute_next_entry",
    "ensure_reducer",
    "tag_action",
]
