"""
Time-travel operations as explicit transitions over LiftedState.

Each transition mutates the lifted state and returns the smallest correct
Invalidation: the first cache position the recompute engine must rebuild and
the replay indicator for that sweep. Transitions never call the reducer.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.actions import validate_action
from ..core.state import ComputedState, LiftedState
from ..log.store import LogEntry
from ..snapshot.model import LiftedSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invalidation:
    """
    Recompute request produced by a transition.

    Fields:
        position: First stale cache position, or None for no recompute
        replaying: Replay indicator for the sweep
    """
    position: Optional[int]
    replaying: bool = True


NO_RECOMPUTE = Invalidation(position=None)


def _clear_history(lifted: LiftedState) -> None:
    lifted.log.reset()
    lifted.index.reset()
    lifted.current_state_index = 0
    lifted.computed_states = []


def perform_action(lifted: LiftedState, action: Mapping[str, Any], timestamp: int) -> Invalidation:
    """Append a new application action; the pointer follows only if it was at the tail."""
    validate_action(action)
    if lifted.current_state_index == len(lifted.index) - 1:
        lifted.current_state_index += 1
    action_id = lifted.log.append(action, timestamp)
    position = lifted.index.stage(action_id)
    return Invalidation(position=position, replaying=False)


def reset(lifted: LiftedState, initial_committed_state: Any) -> Invalidation:
    lifted.committed_state = initial_committed_state
    _clear_history(lifted)
    return Invalidation(position=0)


def commit(lifted: LiftedState) -> Invalidation:
    """The current state becomes the new baseline and prior history is dropped."""
    lifted.committed_state = lifted.computed_states[lifted.current_state_index].state
    _clear_history(lifted)
    return Invalidation(position=0)


def rollback(lifted: LiftedState) -> Invalidation:
    _clear_history(lifted)
    return Invalidation(position=0)


def toggle_action(lifted: LiftedState, action_id: int) -> Invalidation:
    position = lifted.index.position(action_id)
    if position is None:
        logger.warning("Ignoring toggle of unstaged action id %r", action_id)
        return NO_RECOMPUTE
    skipped = lifted.index.toggle(action_id)
    logger.debug("Action %d %s", action_id, "skipped" if skipped else "restored")
    return Invalidation(position=position)


def sweep(lifted: LiftedState) -> Invalidation:
    # Shift the cursor left past the skipped ids at or before it
    passed = sum(
        1
        for position, action_id in enumerate(lifted.index.staged)
        if position <= lifted.current_state_index and lifted.index.is_skipped(action_id)
    )
    removed = lifted.index.sweep()
    current = max(lifted.current_state_index - passed, 0)
    lifted.current_state_index = min(current, len(lifted.index) - 1)
    logger.debug("Swept %d skipped actions", len(removed))
    return Invalidation(position=0)


def jump_to_state(lifted: LiftedState, index: int) -> Invalidation:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(lifted.index):
        logger.warning("Ignoring jump to out-of-range state index %r", index)
        return NO_RECOMPUTE
    lifted.current_state_index = index
    return NO_RECOMPUTE


def jump_to_action(lifted: LiftedState, action_id: int) -> Invalidation:
    position = lifted.index.position(action_id)
    if position is None:
        logger.warning("Ignoring jump to unstaged action id %r", action_id)
        return NO_RECOMPUTE
    lifted.current_state_index = position
    return NO_RECOMPUTE


def import_state(lifted: LiftedState, snapshot: LiftedSnapshot) -> Invalidation:
    """
    Replace the lifted state wholesale with a validated snapshot.

    The imported cache is adopted, then fully recomputed under the current
    reducer with the replay indicator set.
    """
    entries = {
        action_id: LogEntry(
            id=action_id,
            action=copy.deepcopy(record.action),
            timestamp=record.timestamp,
        )
        for action_id, record in snapshot.actions_by_id.items()
    }
    lifted.log.replace(entries, snapshot.next_action_id)
    lifted.index.replace(snapshot.staged_action_ids, snapshot.skipped_action_ids)
    lifted.committed_state = copy.deepcopy(snapshot.committed_state)
    lifted.current_state_index = snapshot.current_state_index
    lifted.computed_states = [
        ComputedState(state=copy.deepcopy(record.state), error=record.error)
        for record in snapshot.computed_states
    ]
    lifted.monitor_state = copy.deepcopy(snapshot.monitor_state)
    logger.info(
        "Imported lifted state with %d staged actions (%d skipped)",
        len(lifted.index.staged),
        len(lifted.index.skipped),
    )
    return Invalidation(position=0)
