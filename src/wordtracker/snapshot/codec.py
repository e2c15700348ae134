"""Serialize an OrderedIndexTree to bytes and back.

Layout: UTF-8 JSON of a `Snapshot`. Nodes are stored as a flat pre-order
list; each entry records whether the node has a left and a right child, which
is enough to rebuild the exact shape. Both directions use an explicit stack,
so a degenerate tree of any depth round-trips.
"""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ValidationError

from wordtracker.data_models.occurrence_record import OccurrenceRecord
from wordtracker.index.ordered_index_tree import OrderedIndexTree
from wordtracker.index.tree_node import TreeNode

SNAPSHOT_MAGIC = "wordtracker"
SNAPSHOT_FORMAT_VERSION = 1


class CorruptSnapshotError(ValueError):
    """Raised when snapshot bytes cannot be decoded into a tree."""


class SnapshotNode(BaseModel):
    record: OccurrenceRecord
    has_left: bool = False
    has_right: bool = False


class Snapshot(BaseModel):
    magic: Literal["wordtracker"] = SNAPSHOT_MAGIC
    format_version: Literal[1] = SNAPSHOT_FORMAT_VERSION
    count: int
    nodes: list[SnapshotNode] = []


@dataclass
class _Edge:
    """A child slot waiting to be filled, with the key range it admits."""

    parent: TreeNode
    side: str
    above: str | None  # keys must be > above
    at_most: str | None  # keys must be <= at_most


def serialize(tree: OrderedIndexTree) -> bytes:
    nodes: list[SnapshotNode] = []
    root = tree.root_node()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        nodes.append(
            SnapshotNode(
                record=node.payload,
                has_left=node.left is not None,
                has_right=node.right is not None,
            )
        )
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    snapshot = Snapshot(count=len(nodes), nodes=nodes)
    return snapshot.model_dump_json().encode()


def deserialize(data: bytes) -> OrderedIndexTree:
    if not data:
        raise CorruptSnapshotError("Snapshot is empty")
    try:
        snapshot = Snapshot.model_validate_json(data)
    except ValidationError as e:
        raise CorruptSnapshotError(f"Snapshot failed validation: {e}") from e

    if snapshot.count != len(snapshot.nodes):
        raise CorruptSnapshotError(
            f"Snapshot declares {snapshot.count} nodes but holds {len(snapshot.nodes)}"
        )
    if not snapshot.nodes:
        return OrderedIndexTree()

    first = snapshot.nodes[0]
    root = TreeNode(first.record)
    pending: list[_Edge] = []
    _push_children(pending, root, first, None, None)
    for i, entry in enumerate(snapshot.nodes[1:], start=1):
        if not pending:
            raise CorruptSnapshotError(f"Node {i} has no parent edge to attach to")
        edge = pending.pop()
        word = entry.record.word
        if (edge.above is not None and word <= edge.above) or (
            edge.at_most is not None and word > edge.at_most
        ):
            raise CorruptSnapshotError(
                f"Node {i} ({word!r}) is out of order under {edge.parent.key!r}"
            )
        node = TreeNode(entry.record)
        if edge.side == "left":
            edge.parent.left = node
        else:
            edge.parent.right = node
        _push_children(pending, node, entry, edge.above, edge.at_most)
    if pending:
        raise CorruptSnapshotError(
            f"Snapshot ended with {len(pending)} child edge(s) unfilled"
        )
    return OrderedIndexTree.from_root(root)


def _push_children(
    pending: list[_Edge],
    node: TreeNode,
    entry: SnapshotNode,
    above: str | None,
    at_most: str | None,
) -> None:
    # right goes on the stack first so the left subtree is filled first
    if entry.has_right:
        pending.append(_Edge(node, "right", node.key, at_most))
    if entry.has_left:
        pending.append(_Edge(node, "left", above, node.key))
