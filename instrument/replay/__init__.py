"""
Replay system for the computed-state cache.

Replay folds the reducer over the staged sequence, starting from the committed
state, and only over the positions an operation invalidated.
"""

from .runner import RecomputeResult, recompute_states

__all__ = [
    "RecomputeResult",
    "recompute_states",
]
