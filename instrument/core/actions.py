"""
Action vocabulary for the lifted store.

Application actions are plain mappings with a mandatory "type" key.
Monitor actions (the ones the lifted store understands) are built with
ActionCreators and carry one of the ActionTypes constants.
"""

import time
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidActionError

INIT_ACTION: Dict[str, Any] = {"type": "@@INIT"}

# Dispatched by the underlying store, not by monitors.
STORE_INIT = "@@store/INIT"
STORE_REPLACE = "@@store/REPLACE"

UNDEFINED_TYPE_MESSAGE = (
    'Actions may not have an undefined "type" property. '
    "Have you misspelled a constant?"
)


class ActionTypes:
    """Monitor action types recognized by the lifted reducer."""

    PERFORM_ACTION = "PERFORM_ACTION"
    RESET = "RESET"
    ROLLBACK = "ROLLBACK"
    COMMIT = "COMMIT"
    SWEEP = "SWEEP"
    TOGGLE_ACTION = "TOGGLE_ACTION"
    JUMP_TO_STATE = "JUMP_TO_STATE"
    JUMP_TO_ACTION = "JUMP_TO_ACTION"
    IMPORT_STATE = "IMPORT_STATE"


def validate_action(action: Any) -> Mapping[str, Any]:
    """
    Reject actions that cannot be recorded.

    Args:
        action: Candidate application action

    Returns:
        The action unchanged

    Raises:
        InvalidActionError: If action is not a mapping or its "type" is None
    """
    if not isinstance(action, Mapping):
        raise InvalidActionError(
            f"Actions must be mappings with a \"type\" key, got {type(action).__name__}."
        )
    if action.get("type") is None:
        raise InvalidActionError(UNDEFINED_TYPE_MESSAGE)
    return action


def now_ms() -> int:
    return int(time.time() * 1000)


class ActionCreators:
    """
    Builders for monitor actions.

    Usage:
        lifted_store.dispatch(ActionCreators.toggle_action(2))
        lifted_store.dispatch(ActionCreators.jump_to_state(0))
    """

    @staticmethod
    def perform_action(action: Mapping[str, Any], timestamp: Optional[int] = None) -> Dict[str, Any]:
        validate_action(action)
        return {
            "type": ActionTypes.PERFORM_ACTION,
            "action": action,
            "timestamp": now_ms() if timestamp is None else timestamp,
        }

    @staticmethod
    def reset() -> Dict[str, Any]:
        return {"type": ActionTypes.RESET, "timestamp": now_ms()}

    @staticmethod
    def rollback() -> Dict[str, Any]:
        return {"type": ActionTypes.ROLLBACK, "timestamp": now_ms()}

    @staticmethod
    def commit() -> Dict[str, Any]:
        return {"type": ActionTypes.COMMIT, "timestamp": now_ms()}

    @staticmethod
    def sweep() -> Dict[str, Any]:
        return {"type": ActionTypes.SWEEP}

    @staticmethod
    def toggle_action(action_id: int) -> Dict[str, Any]:
        return {"type": ActionTypes.TOGGLE_ACTION, "id": action_id}

    @staticmethod
    def jump_to_state(index: int) -> Dict[str, Any]:
        return {"type": ActionTypes.JUMP_TO_STATE, "index": index}

    @staticmethod
    def jump_to_action(action_id: int) -> Dict[str, Any]:
        return {"type": ActionTypes.JUMP_TO_ACTION, "action_id": action_id}

    @staticmethod
    def import_state(next_lifted_state: Any) -> Dict[str, Any]:
        """
        Build an import action.

        Args:
            next_lifted_state: Exported snapshot dict (or a LiftedState)
        """
        return {"type": ActionTypes.IMPORT_STATE, "next_lifted_state": next_lifted_state}
