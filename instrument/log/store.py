"""
Append-only action log.

Every recorded action gets a monotonic integer id. Entries are never mutated;
the log is only appended to, reset to the init action, or replaced wholesale
by an import.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional

from ..core.actions import INIT_ACTION, ActionTypes


@dataclass(frozen=True)
class LogEntry:
    """
    Immutable log record.

    Fields:
        id: Monotonic action id (0 is always the init action)
        action: The application action as dispatched
        timestamp: Milliseconds since epoch when the action was recorded
    """
    id: int
    action: Mapping[str, Any]
    timestamp: int = 0

    def to_record(self) -> Dict[str, Any]:
        """Lifted perform-action record used in exported snapshots."""
        return {
            "type": ActionTypes.PERFORM_ACTION,
            "action": dict(self.action),
            "timestamp": self.timestamp,
        }


class ActionLog:
    """
    Store of (id, action) pairs.

    Usage:
        log = ActionLog()
        action_id = log.append({"type": "INCREMENT"}, timestamp=1)
        log.get(action_id).action
    """

    def __init__(self) -> None:
        self._entries: Dict[int, LogEntry] = {}
        self.next_action_id = 0
        self.reset()

    def reset(self) -> None:
        """Discard every entry and re-seed the init action at id 0."""
        self._entries = {0: LogEntry(id=0, action=dict(INIT_ACTION))}
        self.next_action_id = 1

    def append(self, action: Mapping[str, Any], timestamp: int = 0) -> int:
        """
        Append action to log.

        Args:
            action: Validated application action
            timestamp: Recording time

        Returns:
            Id assigned to the new entry
        """
        action_id = self.next_action_id
        self._entries[action_id] = LogEntry(id=action_id, action=action, timestamp=timestamp)
        self.next_action_id += 1
        return action_id

    def replace(self, entries: Mapping[int, LogEntry], next_action_id: Optional[int] = None) -> None:
        """
        Adopt an imported log atomically.

        The id counter continues after the highest imported id even when the
        imported counter is behind.
        """
        adopted = {int(k): v for k, v in entries.items()}
        floor = max(adopted) + 1 if adopted else 0
        self._entries = adopted
        self.next_action_id = max(next_action_id or 0, floor)

    def get(self, action_id: int) -> LogEntry:
        return self._entries[action_id]

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        for action_id in sorted(self._entries):
            yield self._entries[action_id]

    def to_records(self) -> Dict[int, Dict[str, Any]]:
        return {entry.id: entry.to_record() for entry in self}
