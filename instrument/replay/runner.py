"""
Recompute engine: keep the computed-state cache consistent with history.

Only the invalidated suffix of the cache is rebuilt. Appending one action costs
one reducer call; toggling the action at position k costs at most
(length - k) calls; jumping costs none.
"""

from dataclasses import dataclass
from typing import Any, List

from ..core.reducer import INTERRUPTED_ERROR, Reducer, compute_next_entry
from ..core.state import ComputedState
from ..log.index import StageIndex
from ..log.store import ActionLog


@dataclass(frozen=True)
class RecomputeResult:
    """
    Result of a recompute sweep.

    Fields:
        computed_states: Cache after the sweep (same object if nothing was invalidated)
        rebuilt: Number of cache positions rewritten
    """
    computed_states: List[ComputedState]
    rebuilt: int


def recompute_states(
    computed_states: List[ComputedState],
    min_invalidated: int,
    reducer: Reducer,
    committed_state: Any,
    log: ActionLog,
    index: StageIndex,
    replaying: bool,
) -> RecomputeResult:
    """
    Rebuild the cache from min_invalidated to the end of the staged sequence.

    Positions below min_invalidated are never touched. The list is truncated
    and extended in place.

    Args:
        computed_states: Current cache
        min_invalidated: First position whose entry is stale
        reducer: Application reducer
        committed_state: Fold seed for position 0
        log: Action log holding the staged actions
        index: Stage/skip index
        replaying: Replay indicator passed to every reducer call of this sweep

    Returns:
        RecomputeResult with the cache and the number of rebuilt positions
    """
    staged = index.staged
    if min_invalidated >= len(computed_states) and len(computed_states) == len(staged):
        return RecomputeResult(computed_states=computed_states, rebuilt=0)

    start = min(min_invalidated, len(computed_states))
    del computed_states[start:]

    for i in range(start, len(staged)):
        action_id = staged[i]
        previous = computed_states[i - 1] if i > 0 else ComputedState(state=committed_state)

        if index.is_skipped(action_id):
            entry = previous
        elif previous.error is not None:
            entry = ComputedState(state=previous.state, error=INTERRUPTED_ERROR)
        else:
            entry = compute_next_entry(reducer, log.get(action_id).action, previous.state, replaying)

        computed_states.append(entry)

    return RecomputeResult(computed_states=computed_states, rebuilt=len(staged) - start)
