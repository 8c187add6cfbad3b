"""
Lifted store: time-travel operations and the store adapter.
"""

from .instrument import instrument, InstrumentedStore
from .reducer import LiftedReducer
from .operations import Invalidation

__all__ = [
    "instrument",
    "InstrumentedStore",
    "LiftedReducer",
    "Invalidation",
]
