"""
Time-Travel Instrumentation

Lifted-state engine for reducer-driven stores: records every dispatched action,
replays history on demand and supports commit, rollback, toggling and jumping
without full recomputation.
"""

__version__ = "0.1.0"

from .core.actions import ActionTypes, ActionCreators, INIT_ACTION
from .core.errors import InstrumentError, InvalidActionError, ConfigurationError, SnapshotError
from .core.state import ComputedState, LiftedState
from .lifted.instrument import instrument, InstrumentedStore
from .store import Store, create_store, compose

__all__ = [
    "ActionTypes",
    "ActionCreators",
    "INIT_ACTION",
    "InstrumentError",
    "InvalidActionError",
    "ConfigurationError",
    "SnapshotError",
    "ComputedState",
    "LiftedState",
    "instrument",
    "InstrumentedStore",
    "Store",
    "create_store",
    "compose",
]
