"""
Cell hierarchy tree data structures.

The tree is stored as an arena: every node lives in one list in
pre-order, and parent/child links are positions in that list. The root
is always at position 0, the branch for the k-th cell at position k + 1.
Nodes compare equal when their arena positions are equal, so a node is
only meaningful together with the tree it was built in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, TypeGuard

from cellnav.core.document import Unit
from cellnav.traversal.engine import (
    TraversalFunctions,
    depth_first_down,
    get_traversal_functions,
)


class NodeKind(Enum):
    """The two node variants of a cell tree."""

    ROOT = "root"
    BRANCH = "branch"


@dataclass(frozen=True, eq=False)
class TreeNode:
    """Base for arena nodes. Equality is arena-position equality."""

    node_id: int

    kind: ClassVar[NodeKind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.node_id == other.node_id

    def __hash__(self) -> int:
        return hash(self.node_id)


@dataclass(frozen=True, eq=False)
class RootNode(TreeNode):
    """The synthetic top of the tree. Has no cell and no parent."""

    children_ids: tuple[int, ...] = ()

    kind: ClassVar[NodeKind] = NodeKind.ROOT

    def __repr__(self) -> str:
        return f"<RootNode children={len(self.children_ids)}>"


@dataclass(frozen=True, eq=False)
class BranchNode(TreeNode):
    """
    A cell in the tree.

    ``level`` is the cell's concluding heading level, or None when the
    cell is not a heading cell (such branches never have children).
    """

    unit: Unit
    parent_id: int
    level: int | None = None
    children_ids: tuple[int, ...] = ()

    kind: ClassVar[NodeKind] = NodeKind.BRANCH

    @property
    def is_heading(self) -> bool:
        return self.level is not None

    @property
    def is_leaf(self) -> bool:
        return not self.children_ids

    def __repr__(self) -> str:
        preview = self.unit.title[:40]
        return (
            f"<BranchNode {self.unit.index} '{preview}' level={self.level} "
            f"children={len(self.children_ids)}>"
        )


def is_branch(node: TreeNode | None) -> TypeGuard[BranchNode]:
    return isinstance(node, BranchNode)


def is_root(node: TreeNode | None) -> TypeGuard[RootNode]:
    return isinstance(node, RootNode)


@dataclass(frozen=True)
class CellTree:
    """
    A complete cell hierarchy for one document snapshot.

    Provides the ``parent_of`` / ``children_of`` accessors the traversal
    engine needs, plus lookups and summaries.
    """

    nodes: tuple[TreeNode, ...]
    units: tuple[Unit, ...] = ()

    @property
    def root(self) -> RootNode:
        root = self.nodes[0]
        assert isinstance(root, RootNode)
        return root

    @property
    def branches(self) -> list[BranchNode]:
        """All branches in pre-order (which is document order)."""
        return [node for node in self.nodes[1:] if isinstance(node, BranchNode)]

    @property
    def top_level(self) -> list[BranchNode]:
        return [self._branch(node_id) for node_id in self.root.children_ids]

    def parent_of(self, node: TreeNode) -> TreeNode | None:
        if isinstance(node, BranchNode):
            return self.nodes[node.parent_id]
        return None

    def children_of(self, node: TreeNode) -> list[TreeNode]:
        if isinstance(node, (RootNode, BranchNode)):
            return [self.nodes[node_id] for node_id in node.children_ids]
        return []

    @property
    def traversals(self) -> TraversalFunctions[TreeNode]:
        """Traversal generators bound to this tree's accessors."""
        return get_traversal_functions(self.parent_of, self.children_of)

    def find(self, unit_index: int) -> BranchNode | None:
        """Find the branch holding the cell with ``unit_index``."""
        for node in self.branches:
            if node.unit.index == unit_index:
                return node
        return None

    def units_under(self, node: TreeNode) -> list[Unit]:
        """Cells of ``node`` and all its descendants, in document order."""
        return [
            descendant.unit
            for descendant in depth_first_down(node, self.children_of)
            if isinstance(descendant, BranchNode)
        ]

    def depth(self, node: TreeNode) -> int:
        """Depth of ``node`` (root = 0, top-level cells = 1)."""
        depth = 0
        current = self.parent_of(node)
        while current is not None:
            depth += 1
            current = self.parent_of(current)
        return depth

    @property
    def max_depth(self) -> int:
        return max((self.depth(node) for node in self.branches), default=0)

    @property
    def heading_count(self) -> int:
        return sum(1 for node in self.branches if node.is_heading)

    def get_statistics(self) -> dict[str, Any]:
        branches = self.branches
        return {
            "unit_count": len(branches),
            "heading_count": self.heading_count,
            "top_level_count": len(self.root.children_ids),
            "max_depth": self.max_depth,
            "leaf_count": sum(1 for node in branches if node.is_leaf),
        }

    def to_dict(self, node: TreeNode | None = None) -> dict[str, Any]:
        """
        Convert a subtree (the whole tree by default) to a nested dict.

        Args:
            node: Subtree root. Defaults to the tree root.
        """
        node = node if node is not None else self.root
        children = [self.to_dict(child) for child in self.children_of(node)]
        if isinstance(node, BranchNode):
            return {
                "index": node.unit.index,
                "kind": node.unit.kind.value,
                "level": node.level,
                "title": node.unit.title,
                "children": children,
            }
        return {
            "root": True,
            "statistics": self.get_statistics(),
            "children": children,
        }

    def _branch(self, node_id: int) -> BranchNode:
        node = self.nodes[node_id]
        assert isinstance(node, BranchNode)
        return node
