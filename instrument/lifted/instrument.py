"""
Lifted store adapter.

instrument() is a store enhancer: the store it builds looks like the plain
store from outside (dispatch/get_state/subscribe/replace_reducer) while its
`lifted_store` attribute exposes the lifted state and accepts monitor actions.
"""

import itertools
from typing import Any, Callable, Mapping, Optional

from ..core.actions import ActionCreators, validate_action
from ..core.errors import ConfigurationError
from ..core.reducer import Reducer, ensure_reducer
from ..core.state import LiftedState
from ..logging_config import get_logger
from ..snapshot.serialize import export_lifted_state
from ..store import Enhancer, Listener, StoreCreator
from .reducer import LiftedReducer, MonitorReducer

DOUBLE_INSTRUMENT_MESSAGE = (
    "DevTools instrumentation should not be applied more than once. "
    "Check your store configuration."
)

_store_ids = itertools.count(1)


class InstrumentedStore:
    """
    Store facade backed by a lifted store.

    Fields:
        lifted_store: Underlying store whose state is the LiftedState
        store_id: Id used to correlate log lines of this store
    """

    def __init__(self, lifted_store: Any, lift_reducer: Callable[[Reducer], LiftedReducer], store_id: str) -> None:
        self.lifted_store = lifted_store
        self.store_id = store_id
        self._lift_reducer = lift_reducer
        self._logger = get_logger(__name__, store_id=store_id)

    def dispatch(self, action: Mapping[str, Any]) -> Mapping[str, Any]:
        """
        Record and apply an application action.

        Raises:
            InvalidActionError: If action has no "type" (the log is untouched)
        """
        validate_action(action)
        self.lifted_store.dispatch(ActionCreators.perform_action(action))
        return action

    def get_state(self) -> Any:
        return self.get_lifted_state().visible_state()

    def get_lifted_state(self) -> LiftedState:
        return self.lifted_store.get_state()

    def export_state(self) -> dict:
        return export_lifted_state(self.get_lifted_state())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.lifted_store.subscribe(listener)

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the application reducer; the whole history is re-derived under it."""
        self.lifted_store.replace_reducer(self._lift_reducer(next_reducer))
        self._logger.info("Application reducer replaced, history recomputed")


def instrument(monitor_reducer: Optional[MonitorReducer] = None) -> Enhancer:
    """
    Build the time-travel store enhancer.

    Args:
        monitor_reducer: Optional (monitor_state, lifted_action) -> monitor_state

    Returns:
        Enhancer for create_store

    Example:
        store = create_store(counter, 0, instrument())
        store.dispatch({"type": "INCREMENT"})
        store.lifted_store.dispatch(ActionCreators.rollback())
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_instrumented_store(reducer: Reducer, preloaded_state: Any = None, *args: Any) -> InstrumentedStore:
            ensure_reducer(reducer)
            store_id = f"store-{next(_store_ids)}"

            def lift_reducer(r: Reducer) -> LiftedReducer:
                return LiftedReducer(
                    r,
                    initial_committed_state=preloaded_state,
                    monitor_reducer=monitor_reducer,
                    store_id=store_id,
                )

            lifted_store = create_store(lift_reducer(reducer), None, *args)
            if hasattr(lifted_store, "lifted_store"):
                raise ConfigurationError(DOUBLE_INSTRUMENT_MESSAGE)

            return InstrumentedStore(lifted_store, lift_reducer, store_id)

        return create_instrumented_store

    return enhancer
