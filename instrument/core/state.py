"""
Lifted state model.

LiftedState is the engine's bookkeeping (log, stage index, computed-state cache,
current pointer) as distinct from the plain application state it derives.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..log.index import StageIndex
from ..log.store import ActionLog


@dataclass(frozen=True)
class ComputedState:
    """
    Cached result of folding the reducer up to one staged position.

    Fields:
        state: Application state at this position (None is a legal "empty" state)
        error: One-line failure description, or None
    """
    state: Any = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {"state": self.state, "error": self.error}


@dataclass
class LiftedState:
    """
    Owned, mutable lifted state.

    Only the transitions in instrument.lifted.operations mutate it. The
    invariant maintained by those transitions: computed_states[i] is the fold
    of committed_state through index.staged[0..i] under the current reducer
    and the current skip set.

    Fields:
        log: Action log
        index: Stage/skip index
        committed_state: Baseline the staged sequence is replayed from
        computed_states: Cache, one entry per staged position
        current_state_index: Position whose state is visible outside
        monitor_state: State kept by the optional monitor reducer
    """
    log: ActionLog = field(default_factory=ActionLog)
    index: StageIndex = field(default_factory=StageIndex)
    committed_state: Any = None
    computed_states: List[ComputedState] = field(default_factory=list)
    current_state_index: int = 0
    monitor_state: Any = None

    @property
    def staged_action_ids(self) -> List[int]:
        return self.index.staged

    @property
    def skipped_action_ids(self) -> List[int]:
        return self.index.skipped

    def visible_state(self) -> Any:
        """
        State seen outside the engine.

        The current position's state, or if that is None the nearest lower
        position whose state is not None, falling back to committed_state.
        """
        upper = min(self.current_state_index, len(self.computed_states) - 1)
        for position in range(upper, -1, -1):
            state = self.computed_states[position].state
            if state is not None:
                return state
        return self.committed_state
