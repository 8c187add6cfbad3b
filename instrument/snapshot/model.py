"""
Snapshot model for exported lifted state.

An exported snapshot is a plain, serializable structure isomorphic to
LiftedState. Imported snapshots are validated here before the engine adopts
them, so a malformed snapshot never leaves the lifted state half-replaced.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..core.actions import ActionTypes, validate_action
from ..core.errors import InvalidActionError, SnapshotError


class PerformActionRecord(BaseModel):
    """One recorded action as stored under actionsById."""

    model_config = ConfigDict(extra="ignore")

    type: str = ActionTypes.PERFORM_ACTION
    action: Dict[str, Any]
    timestamp: int = 0

    @field_validator("action")
    @classmethod
    def _action_has_type(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        try:
            validate_action(value)
        except InvalidActionError as e:
            raise ValueError(str(e)) from e
        return value


class ComputedStateRecord(BaseModel):
    state: Any = None
    error: Optional[str] = None


class LiftedSnapshot(BaseModel):
    """
    Validated lifted-state snapshot.

    Field aliases are the camelCase keys of the exchange format:
    actionsById, nextActionId, stagedActionIds, skippedActionIds,
    committedState, currentStateIndex, computedStates, monitorState.
    """

    model_config = ConfigDict(populate_by_name=True)

    actions_by_id: Dict[int, PerformActionRecord] = Field(alias="actionsById")
    next_action_id: int = Field(alias="nextActionId")
    staged_action_ids: List[int] = Field(alias="stagedActionIds")
    skipped_action_ids: List[int] = Field(default_factory=list, alias="skippedActionIds")
    committed_state: Any = Field(default=None, alias="committedState")
    current_state_index: int = Field(default=0, alias="currentStateIndex")
    computed_states: List[ComputedStateRecord] = Field(default_factory=list, alias="computedStates")
    monitor_state: Any = Field(default=None, alias="monitorState")

    @model_validator(mode="after")
    def _check_consistency(self) -> "LiftedSnapshot":
        if not self.staged_action_ids:
            raise ValueError("stagedActionIds must contain at least the init action")
        missing = [i for i in self.staged_action_ids if i not in self.actions_by_id]
        if missing:
            raise ValueError(f"stagedActionIds reference unknown actions: {missing}")
        unstaged = [i for i in self.skipped_action_ids if i not in self.staged_action_ids]
        if unstaged:
            raise ValueError(f"skippedActionIds reference unstaged actions: {unstaged}")
        if not 0 <= self.current_state_index < len(self.staged_action_ids):
            raise ValueError(
                f"currentStateIndex {self.current_state_index} is outside "
                f"0..{len(self.staged_action_ids) - 1}"
            )
        return self

    @classmethod
    def parse(cls, data: Any) -> "LiftedSnapshot":
        """
        Validate raw snapshot data.

        Raises:
            SnapshotError: If data does not describe a consistent lifted state
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SnapshotError(f"Invalid lifted state snapshot: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
