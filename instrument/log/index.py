"""
Stage/skip index over the action log.

`staged` is the chronological list of ids eligible for replay. `skipped` holds
the ids excluded from the replay fold; they stay in `staged` (and in the log)
until a sweep compacts them away.
"""

from typing import Iterable, List, Optional


class StageIndex:
    def __init__(self, staged: Optional[Iterable[int]] = None, skipped: Optional[Iterable[int]] = None) -> None:
        self.staged: List[int] = list(staged) if staged is not None else [0]
        self.skipped: List[int] = list(skipped) if skipped is not None else []

    def reset(self) -> None:
        """Back to just the init action."""
        self.staged = [0]
        self.skipped = []

    def replace(self, staged: Iterable[int], skipped: Iterable[int]) -> None:
        self.staged = list(staged)
        self.skipped = list(skipped)

    def stage(self, action_id: int) -> int:
        """
        Append id to the staged sequence.

        Returns:
            Position of the newly staged id
        """
        self.staged.append(action_id)
        return len(self.staged) - 1

    def is_skipped(self, action_id: int) -> bool:
        return action_id in self.skipped

    def toggle(self, action_id: int) -> bool:
        """
        Flip membership of id in the skip set.

        Returns:
            True if the id is now skipped
        """
        if action_id in self.skipped:
            self.skipped = [i for i in self.skipped if i != action_id]
            return False
        self.skipped = [action_id] + self.skipped
        return True

    def position(self, action_id: int) -> Optional[int]:
        try:
            return self.staged.index(action_id)
        except ValueError:
            return None

    def sweep(self) -> List[int]:
        """
        Physically drop skipped ids, keeping the order of the rest.

        Returns:
            Ids that were removed
        """
        dropped = set(self.skipped)
        removed = [i for i in self.staged if i in dropped]
        self.staged = [i for i in self.staged if i not in dropped]
        self.skipped = []
        return removed

    def __len__(self) -> int:
        return len(self.staged)
