"""
PartitionTree: the binary tree of regions built by the partition strategy.

Nodes live in a flat list (an arena) and refer to their children by index.
The root is always handle 0. A node has either no children (a leaf) or
exactly two; `split_node` is the only way to add children, so a
single-child node can't be built.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .geometry import Rect

NodeHandle = int

ROOT: NodeHandle = 0


@dataclass
class PartitionNode:
    region: Rect
    left: Optional[NodeHandle] = None
    right: Optional[NodeHandle] = None
    parent: Optional[NodeHandle] = None
    # Only ever set on leaves that managed to place a room
    room: Optional[Rect] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class PartitionTree:
    def __init__(self, region: Rect) -> None:
        self.nodes: List[PartitionNode] = [PartitionNode(region)]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[PartitionNode]:
        return iter(self.nodes)

    def node(self, handle: NodeHandle) -> PartitionNode:
        return self.nodes[handle]

    @property
    def root(self) -> PartitionNode:
        return self.nodes[ROOT]

    def _add_node(self, region: Rect, parent: NodeHandle) -> NodeHandle:
        self.nodes.append(PartitionNode(region, parent=parent))
        return len(self.nodes) - 1

    def split_node(
        self, handle: NodeHandle, first: Rect, second: Rect
    ) -> Tuple[NodeHandle, NodeHandle]:
        """
        Gives a leaf its two children.

        Raises:
            ValueError: If the node was already split or holds a room
        """
        node = self.nodes[handle]
        if not node.is_leaf:
            raise ValueError(f"Node {handle} is already split")
        if node.room is not None:
            raise ValueError(f"Node {handle} holds a room and cannot be split")

        left = self._add_node(first, handle)
        right = self._add_node(second, handle)
        node.left = left
        node.right = right
        return left, right

    def is_leaf(self, handle: NodeHandle) -> bool:
        return self.nodes[handle].is_leaf

    def children(self, handle: NodeHandle) -> Optional[Tuple[NodeHandle, NodeHandle]]:
        node = self.nodes[handle]
        if node.left is None or node.right is None:
            return None
        return node.left, node.right

    def depth_of(self, handle: NodeHandle) -> int:
        depth = 0
        parent = self.nodes[handle].parent
        while parent is not None:
            depth += 1
            parent = self.nodes[parent].parent
        return depth

    def leaves(self) -> List[NodeHandle]:
        """Leaf handles in left-to-right (depth-first) order."""
        result: List[NodeHandle] = []
        stack = [ROOT]
        while stack:
            handle = stack.pop()
            node = self.nodes[handle]
            if node.is_leaf:
                result.append(handle)
            else:
                # Right pushed first so left is visited first
                stack.append(node.right)
                stack.append(node.left)
        return result

    def rooms(self) -> List[Rect]:
        return [self.nodes[h].room for h in self.leaves() if self.nodes[h].room is not None]
