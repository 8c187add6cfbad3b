"""
Minimal reducer-driven store.

This is the collaborator the instrumentation wraps: it holds one state value,
folds dispatched actions through its reducer and notifies subscribers after
every dispatch. Enhancers (such as instrument()) wrap create_store.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional

from .core.actions import STORE_INIT, STORE_REPLACE, validate_action
from .core.errors import InstrumentError
from .core.reducer import Reducer, ensure_reducer

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
StoreCreator = Callable[..., Any]
Enhancer = Callable[[StoreCreator], StoreCreator]


class Store:
    """
    Single-state container driven by a pure reducer.

    Usage:
        store = create_store(counter)
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch({"type": "INCREMENT"})
    """

    def __init__(self, reducer: Reducer, preloaded_state: Any = None) -> None:
        self._reducer = ensure_reducer(reducer)
        self._state = preloaded_state
        self._listeners: List[Listener] = []
        self._is_dispatching = False
        self.dispatch({"type": STORE_INIT})

    def get_state(self) -> Any:
        return self._state

    def dispatch(self, action: Mapping[str, Any]) -> Mapping[str, Any]:
        """
        Fold action into the state and notify subscribers.

        Raises:
            InvalidActionError: If action is malformed
            InstrumentError: If called from inside a reducer
        """
        validate_action(action)
        if self._is_dispatching:
            raise InstrumentError("Reducers may not dispatch actions.")

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener (safe to call twice)
        """
        if not callable(listener):
            raise InstrumentError("Expected the listener to be a function.")
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the reducer and re-derive the state under it."""
        self._reducer = ensure_reducer(next_reducer)
        logger.debug("Reducer replaced")
        self.dispatch({"type": STORE_REPLACE})


def create_store(reducer: Reducer, preloaded_state: Any = None, enhancer: Optional[Enhancer] = None) -> Any:
    """
    Create a store, optionally through an enhancer.

    Args:
        reducer: Pure function (state, action) -> state
        preloaded_state: Initial state passed to the first reducer call
        enhancer: Store enhancer such as instrument()

    Returns:
        Store (or whatever the enhancer builds)
    """
    if enhancer is not None:
        if not callable(enhancer):
            raise InstrumentError("Expected the enhancer to be a function.")
        return enhancer(create_store)(reducer, preloaded_state)
    return Store(reducer, preloaded_state)


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Right-to-left function composition.

    compose(f, g)(x) == f(g(x)); compose() is the identity.
    """
    if not funcs:
        return lambda arg: arg
    if len(funcs) == 1:
        return funcs[0]

    def composed(arg: Any) -> Any:
        for func in reversed(funcs):
            arg = func(arg)
        return arg

    return composed
