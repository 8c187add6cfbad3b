"""
Lifted reducer: (LiftedState, lifted_action) -> LiftedState.

Routes each lifted action to its transition, then asks the recompute engine to
rebuild only the invalidated suffix of the cache.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from ..core.actions import STORE_INIT, STORE_REPLACE, ActionTypes
from ..core.reducer import Reducer, ensure_reducer
from ..core.state import LiftedState
from ..logging_config import get_logger
from ..replay.runner import recompute_states
from ..snapshot.model import LiftedSnapshot
from ..snapshot.serialize import export_lifted_state
from .. import metrics
from . import operations
from .operations import Invalidation, NO_RECOMPUTE

MonitorReducer = Callable[[Any, Mapping[str, Any]], Any]


def _null_monitor_reducer(monitor_state: Any, lifted_action: Mapping[str, Any]) -> Any:
    return None


class LiftedReducer:
    """
    Reducer over the lifted state.

    Usage:
        lifted_reducer = LiftedReducer(counter, initial_committed_state=0)
        lifted_store = create_store(lifted_reducer)
    """

    def __init__(
        self,
        reducer: Reducer,
        initial_committed_state: Any = None,
        monitor_reducer: Optional[MonitorReducer] = None,
        store_id: Optional[str] = None,
    ) -> None:
        self.reducer = ensure_reducer(reducer)
        self.initial_committed_state = initial_committed_state
        self.monitor_reducer = monitor_reducer or _null_monitor_reducer
        self.logger = get_logger(__name__, store_id=store_id)
        self._transitions: Dict[str, Callable[[LiftedState, Mapping[str, Any]], Invalidation]] = {
            ActionTypes.PERFORM_ACTION: lambda s, a: operations.perform_action(s, a.get("action"), a.get("timestamp", 0)),
            ActionTypes.RESET: lambda s, a: operations.reset(s, self.initial_committed_state),
            ActionTypes.COMMIT: lambda s, a: operations.commit(s),
            ActionTypes.ROLLBACK: lambda s, a: operations.rollback(s),
            ActionTypes.TOGGLE_ACTION: lambda s, a: operations.toggle_action(s, a["id"]),
            ActionTypes.SWEEP: lambda s, a: operations.sweep(s),
            ActionTypes.JUMP_TO_STATE: lambda s, a: operations.jump_to_state(s, a["index"]),
            ActionTypes.JUMP_TO_ACTION: lambda s, a: operations.jump_to_action(s, a["action_id"]),
            ActionTypes.IMPORT_STATE: self._import_state,
            STORE_INIT: lambda s, a: Invalidation(position=0, replaying=False),
            STORE_REPLACE: lambda s, a: Invalidation(position=0),
        }

    def initial_state(self) -> LiftedState:
        return LiftedState(
            committed_state=self.initial_committed_state,
            monitor_state=self.monitor_reducer(None, {}),
        )

    def _import_state(self, lifted: LiftedState, lifted_action: Mapping[str, Any]) -> Invalidation:
        next_lifted_state = lifted_action["next_lifted_state"]
        if isinstance(next_lifted_state, LiftedState):
            next_lifted_state = export_lifted_state(next_lifted_state)
        return operations.import_state(lifted, LiftedSnapshot.parse(next_lifted_state))

    def __call__(self, lifted_state: Optional[LiftedState], lifted_action: Mapping[str, Any]) -> LiftedState:
        if lifted_state is None:
            lifted_state = self.initial_state()

        action_type = lifted_action.get("type")
        transition = self._transitions.get(action_type)
        invalidation = transition(lifted_state, lifted_action) if transition else NO_RECOMPUTE

        if invalidation.position is not None:
            result = recompute_states(
                lifted_state.computed_states,
                invalidation.position,
                self.reducer,
                lifted_state.committed_state,
                lifted_state.log,
                lifted_state.index,
                invalidation.replaying,
            )
            lifted_state.computed_states = result.computed_states
            metrics.record_recompute(str(action_type), result.rebuilt)
            self.logger.debug(
                "Recomputed %d positions from %d after %s",
                result.rebuilt,
                invalidation.position,
                action_type,
            )

        lifted_state.monitor_state = self.monitor_reducer(lifted_state.monitor_state, lifted_action)
        return lifted_state
