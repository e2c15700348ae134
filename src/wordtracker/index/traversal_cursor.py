from collections.abc import Iterable

from wordtracker.data_models.occurrence_record import OccurrenceRecord


class TraversalCursor:
    """Forward-only cursor over a traversal taken eagerly at creation time.

    The cursor holds its own copy of the sequence, so later inserts or
    removals on the tree never change what it yields. The records themselves
    are shared with the tree. To start over, ask the tree for a new cursor.
    """

    def __init__(self, records: Iterable[OccurrenceRecord]) -> None:
        self._records = list(records)
        self._pos = 0

    def has_next(self) -> bool:
        return self._pos < len(self._records)

    def next(self) -> OccurrenceRecord:
        if not self.has_next():
            raise StopIteration("No more records in this traversal")
        record = self._records[self._pos]
        self._pos += 1
        return record

    def __next__(self) -> OccurrenceRecord:
        return self.next()

    def __iter__(self) -> "TraversalCursor":
        return self

    def __len__(self) -> int:
        return len(self._records) - self._pos
