"""
Reducer invocation wrapper.

Every reducer call made by the engine goes through compute_next_entry, which:
- tags the action with the replay indicator
- converts raised exceptions into recorded error states
- never lets a reducer failure escape the dispatch call
"""

import logging
import traceback
from typing import Any, Callable, Dict, Mapping

from .errors import ConfigurationError
from .state import ComputedState
from .. import metrics

logger = logging.getLogger(__name__)

# Reducer signature: (state, action) -> new_state
Reducer = Callable[[Any, Dict[str, Any]], Any]

INTERRUPTED_ERROR = "Interrupted by an error up the chain"


def ensure_reducer(reducer: Any) -> Reducer:
    """
    Validate that reducer can be called.

    Raises:
        ConfigurationError: If reducer is not callable
    """
    if callable(reducer):
        return reducer
    default = reducer.get("default") if isinstance(reducer, Mapping) else getattr(reducer, "default", None)
    if callable(default):
        raise ConfigurationError(
            "Expected the reducer to be a function. "
            'Instead got an object with a "default" field. '
            "Did you pass a module instead of the reducer itself? "
            "Try passing module.default instead."
        )
    raise ConfigurationError("Expected the reducer to be a function.")


def tag_action(action: Mapping[str, Any], replaying: bool) -> Dict[str, Any]:
    """Copy of action carrying the replay indicator. The stored action is untouched."""
    tagged = dict(action)
    tagged["replaying"] = replaying
    return tagged


def describe_error(exc: BaseException) -> str:
    """One-line "ExcType: message" description."""
    return "".join(traceback.format_exception_only(type(exc), exc)).strip()


def compute_next_entry(reducer: Reducer, action: Mapping[str, Any], state: Any, replaying: bool) -> ComputedState:
    """
    Run one reducer step.

    Args:
        reducer: Application reducer
        action: Stored application action
        state: Previous state
        replaying: False only for the live forward dispatch of a new action

    Returns:
        ComputedState with the new state, or the previous state and an error
    """
    metrics.record_reducer_call(replaying)
    try:
        next_state = reducer(state, tag_action(action, replaying))
    except Exception as e:
        metrics.record_reducer_error()
        logger.error(
            "Reducer failed on action %r: %s",
            action.get("type"),
            describe_error(e),
            exc_info=True,
        )
        return ComputedState(state=state, error=describe_error(e))
    return ComputedState(state=next_state)
