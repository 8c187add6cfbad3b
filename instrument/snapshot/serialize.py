"""
Snapshot export, serialization and single-file persistence.

Ensures the same lifted state always produces the same bytes.
"""

import copy
import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Union

from ..core.canonical import canonical_json_bytes, canonical_json_str
from ..core.state import LiftedState
from .model import LiftedSnapshot


def export_lifted_state(lifted_state: LiftedState) -> Dict[str, Any]:
    """
    Export lifted state as a detached, serializable snapshot.

    The result shares no mutable containers with the live engine, so later
    dispatches do not alter it.

    Args:
        lifted_state: Live lifted state

    Returns:
        Dict with camelCase keys (see LiftedSnapshot)
    """
    snapshot = {
        "actionsById": lifted_state.log.to_records(),
        "nextActionId": lifted_state.log.next_action_id,
        "stagedActionIds": list(lifted_state.index.staged),
        "skippedActionIds": list(lifted_state.index.skipped),
        "committedState": lifted_state.committed_state,
        "currentStateIndex": lifted_state.current_state_index,
        "computedStates": [entry.to_dict() for entry in lifted_state.computed_states],
        "monitorState": lifted_state.monitor_state,
    }
    return copy.deepcopy(snapshot)


def snapshot_to_json(snapshot: Dict[str, Any], indent: Any = None) -> str:
    """Canonical JSON text of an exported snapshot."""
    return canonical_json_str(snapshot, indent=indent)


def snapshot_from_json(text: Union[str, bytes]) -> Dict[str, Any]:
    """
    Parse and validate snapshot JSON.

    JSON object keys are strings; action ids are coerced back to ints.

    Raises:
        SnapshotError: If the document is not a valid snapshot
    """
    return LiftedSnapshot.parse(json.loads(text)).to_dict()


def compute_snapshot_hash(snapshot: Dict[str, Any]) -> str:
    """
    Compute SHA-256 hash of a snapshot.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(snapshot)).hexdigest()


def save_snapshot(path: Union[str, Path], snapshot: Dict[str, Any]) -> str:
    """
    Write snapshot to a JSON file (directories created as needed).

    Returns:
        Path written
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        f.write(snapshot_to_json(snapshot, indent=2))
    return str(target)


def read_snapshot_document(path: Union[str, Path]) -> Any:
    """Parsed JSON of a snapshot file, unvalidated and exactly as stored."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_snapshot(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and validate a snapshot JSON file."""
    return LiftedSnapshot.parse(read_snapshot_document(path)).to_dict()
