from __future__ import annotations

from dataclasses import dataclass

from wordtracker.data_models.occurrence_record import OccurrenceRecord


@dataclass
class TreeNode:
    """One tree node. Children are owned by their parent; there is no back-link."""

    payload: OccurrenceRecord
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def key(self) -> str:
        return self.payload.word
