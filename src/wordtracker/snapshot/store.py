"""File-backed store for tree snapshots."""

import os
from pathlib import Path
import tempfile

from wordtracker.index.ordered_index_tree import OrderedIndexTree
from wordtracker.snapshot.codec import deserialize, serialize


class SnapshotStore:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> bytes | None:
        if not self.exists():
            return None
        return self._path.read_bytes()

    def write(self, data: bytes) -> None:
        """Replace the snapshot atomically: temp file, fsync, then os.replace."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def load_tree(self) -> OrderedIndexTree:
        """Return the stored tree, or an empty one if nothing is stored yet.

        Raises CorruptSnapshotError if a snapshot exists but cannot be decoded;
        deciding whether to discard it is up to the caller.
        """
        data = self.read()
        if data is None:
            return OrderedIndexTree()
        return deserialize(data)

    def save_tree(self, tree: OrderedIndexTree) -> None:
        self.write(serialize(tree))
