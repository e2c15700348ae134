"""Unbalanced binary search tree of OccurrenceRecords keyed by word.

Ordering: keys in a node's left subtree are <= its key, keys in its right
subtree are >. Equal keys descend left on insert, so a duplicate lands below
the first occurrence on its left side. There is no rebalancing, so a sorted
insert sequence degrades to a linked list. Every walk uses an explicit stack.
"""

from collections.abc import Iterator

from wordtracker.data_models.occurrence_record import OccurrenceRecord
from wordtracker.index.traversal_cursor import TraversalCursor
from wordtracker.index.tree_node import TreeNode


class OrderedIndexTree:
    def __init__(self) -> None:
        self._root: TreeNode | None = None
        self._count = 0

    # --- Size / shape ---

    def size(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def root(self) -> OccurrenceRecord | None:
        """Return the root record, or None when the tree is empty."""
        return self._root.payload if self._root is not None else None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack: list[tuple[TreeNode, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def clear(self) -> None:
        self._root = None
        self._count = 0

    # --- Insert / search ---

    def insert(self, record: OccurrenceRecord) -> bool:
        if record is None:
            raise ValueError("Cannot insert None into the index")
        new_node = TreeNode(record)
        if self._root is None:
            self._root = new_node
            self._count = 1
            return True

        node = self._root
        while True:
            if record.word <= node.key:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
        self._count += 1
        return True

    def search(self, key: str) -> OccurrenceRecord | None:
        """Return the stored record for key, or None.

        The record is the live object held by the tree (mutating it updates
        the index) but carries no links to other nodes.
        """
        if key is None:
            raise ValueError("Cannot search for None")
        node = self._root
        while node is not None:
            if key == node.key:
                return node.payload
            node = node.right if key > node.key else node.left
        return None

    def contains(self, key: str) -> bool:
        return self.search(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    # --- Extremal removal ---

    def remove_min(self) -> OccurrenceRecord | None:
        if self._root is None:
            return None
        parent: TreeNode | None = None
        node = self._root
        while node.left is not None:
            parent = node
            node = node.left
        # node has no left child; its right subtree takes its place
        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right
        node.right = None
        self._count -= 1
        return node.payload

    def remove_max(self) -> OccurrenceRecord | None:
        if self._root is None:
            return None
        parent: TreeNode | None = None
        node = self._root
        while node.right is not None:
            parent = node
            node = node.right
        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left
        node.left = None
        self._count -= 1
        return node.payload

    # --- Traversals ---

    def inorder(self) -> TraversalCursor:
        """Left, node, right: records in ascending word order."""
        result: list[OccurrenceRecord] = []
        stack: list[TreeNode] = []
        node = self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.payload)
            node = node.right
        return TraversalCursor(result)

    def preorder(self) -> TraversalCursor:
        """Node, left, right."""
        result: list[OccurrenceRecord] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.payload)
            # right first so left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return TraversalCursor(result)

    def postorder(self) -> TraversalCursor:
        """Left, right, node."""
        visit = [self._root] if self._root is not None else []
        emitted: list[TreeNode] = []
        while visit:
            node = visit.pop()
            emitted.append(node)
            if node.left is not None:
                visit.append(node.left)
            if node.right is not None:
                visit.append(node.right)
        return TraversalCursor(node.payload for node in reversed(emitted))

    def __iter__(self) -> Iterator[OccurrenceRecord]:
        return self.inorder()

    # --- Snapshot support ---

    def root_node(self) -> TreeNode | None:
        """Return the root node for serializers that need the tree's shape.

        Callers must treat the node graph as read-only; mutating links
        directly bypasses the node count.
        """
        return self._root

    @classmethod
    def from_root(cls, root: TreeNode | None) -> "OrderedIndexTree":
        """Adopt an already-linked node graph, e.g. one rebuilt from a snapshot.

        The graph must satisfy the ordering invariant; the count is taken
        from the nodes actually reachable from root.
        """
        tree = cls()
        tree._root = root
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            tree._count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return tree
