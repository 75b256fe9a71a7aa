"""
Cell hierarchy builder.

Builds a CellTree from a flat sequence of cells by reading the heading
level each cell concludes with.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from cellnav.core.document import Unit
from cellnav.hierarchy.classifier import HeadingClassifier, HeadingInfo
from cellnav.hierarchy.tree import BranchNode, CellTree, RootNode, TreeNode

logger = logging.getLogger(__name__)


@dataclass
class _Draft:
    """A parsed subtree before it is laid out in the arena."""

    unit: Unit
    level: int | None
    children: list[_Draft] = field(default_factory=list)


class HierarchyBuilder:
    """
    Builds cell trees.

    Only heading cells may have children. The children of a heading cell
    are the cells that follow it, up to the end of the document or the
    next heading cell whose concluding level is less than or equal to its
    own. Equal levels never nest, and cells without headings are always
    taken as leaves of whatever heading precedes them.

    The build runs in two passes. A recursive descent over the cells
    returns ``(draft, next_index)`` pairs with no parent links; a second
    pass lays the drafts out in pre-order and stamps the links.
    """

    def __init__(self, classifier: HeadingClassifier | None = None) -> None:
        self.classifier = classifier or HeadingClassifier()

    def build(self, units: Sequence[Unit]) -> CellTree:
        """Build a tree from ``units``. Total over any finite sequence."""
        infos = [self.classifier.classify(unit) for unit in units]

        top_level: list[_Draft] = []
        index = 0
        while index < len(units):
            draft, index = self._parse_subtree(units, infos, index)
            top_level.append(draft)

        tree = self._connect(units, top_level)
        logger.debug(
            "Built cell tree: %d cells, %d headings, %d top-level",
            len(units),
            tree.heading_count,
            len(top_level),
        )
        return tree

    def _parse_subtree(
        self,
        units: Sequence[Unit],
        infos: Sequence[HeadingInfo],
        start: int,
    ) -> tuple[_Draft, int]:
        """Parse the subtree rooted at ``units[start]``.

        Returns:
            The draft and the index of the first cell not consumed.
        """
        info = infos[start]
        if not info.is_heading:
            return _Draft(units[start], None), start + 1

        # Only the ordering of later cells relative to this one matters,
        # so the level is read with a fallback of 0.
        level = info.level if info.level is not None else 0
        draft = _Draft(units[start], level)

        index = start + 1
        while index < len(units):
            candidate = infos[index]
            if candidate.is_heading and (candidate.level or 0) <= level:
                # A heading "above" this one; the next parse starts here.
                break
            child, index = self._parse_subtree(units, infos, index)
            draft.children.append(child)

        return draft, index

    @staticmethod
    def _connect(units: Sequence[Unit], top_level: list[_Draft]) -> CellTree:
        """Lay drafts out in pre-order and assign parent/child positions."""
        nodes: list[TreeNode | None] = [None]

        def lay_out(draft: _Draft, parent_id: int) -> int:
            node_id = len(nodes)
            nodes.append(None)
            children_ids = tuple(lay_out(child, node_id) for child in draft.children)
            nodes[node_id] = BranchNode(
                node_id=node_id,
                unit=draft.unit,
                parent_id=parent_id,
                level=draft.level,
                children_ids=children_ids,
            )
            return node_id

        root_children = tuple(lay_out(draft, 0) for draft in top_level)
        nodes[0] = RootNode(node_id=0, children_ids=root_children)

        return CellTree(nodes=tuple(nodes), units=tuple(units))  # type: ignore[arg-type]


def build_tree(units: Sequence[Unit], classifier: HeadingClassifier | None = None) -> CellTree:
    """Build a cell tree with a default (or given) classifier."""
    return HierarchyBuilder(classifier).build(units)
