"""
Navigation commands over a notebook's cells.

Each command rebuilds the cell tree from the current cells, finds the
node for the selected cell and walks one of the traversals from there.
Results are cell indices or half-open index ranges; applying them to an
editor (selecting, revealing) is up to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cellnav.config import NavigatorConfig
from cellnav.core.document import Unit, unit_at
from cellnav.core.errors import PreconditionError
from cellnav.hierarchy.builder import HierarchyBuilder
from cellnav.hierarchy.classifier import HeadingClassifier
from cellnav.hierarchy.tree import BranchNode, CellTree, TreeNode, is_branch
from cellnav.traversal.generators import filter_sequence, nth, require_non_null

logger = logging.getLogger(__name__)


class Motion(Enum):
    """Directions a cursor can move through the cell tree."""

    NEXT = "next"  # next cell in document order
    NEXT_SIBLING = "next_sibling"  # next heading at this level, or the next one out
    PREVIOUS = "previous"  # previous sibling, else the parent
    FORWARD_UP = "forward_up"  # next sibling, else the parent
    SLIDE_DOWN = "slide_down"  # first child, else onward
    PARENT = "parent"


_MOTION_TRAVERSALS: dict[Motion, str] = {
    Motion.NEXT: "depth_first",
    Motion.NEXT_SIBLING: "forward_and_over",
    Motion.PREVIOUS: "backward_and_up",
    Motion.FORWARD_UP: "forward_and_up",
    Motion.SLIDE_DOWN: "slide_down",
    Motion.PARENT: "ancestors",
}


@dataclass(frozen=True)
class UnitRange:
    """Half-open range of cell indices, ``start`` included, ``stop`` excluded."""

    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.stop

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "stop": self.stop}


def find_node(tree: CellTree, unit_index: int) -> BranchNode | None:
    """Find the branch for a cell, or None if the tree has no such cell."""
    return tree.find(unit_index)


def subtree_units(tree: CellTree, node: TreeNode) -> list[Unit]:
    """The node's cell followed by all of its descendants' cells."""
    return tree.units_under(node)


def _span(units: Sequence[Unit]) -> UnitRange | None:
    if not units:
        return None
    return UnitRange(units[0].index, units[-1].index + 1)


class Navigator:
    """
    Runs navigation commands.

    Holds only the builder (and through it the Markdown parser); trees are
    built per call and never kept.
    """

    def __init__(self, builder: HierarchyBuilder | None = None) -> None:
        self.builder = builder or HierarchyBuilder()

    def tree(self, units: Sequence[Unit]) -> CellTree:
        return self.builder.build(units)

    def _anchor(self, tree: CellTree, units: Sequence[Unit], index: int) -> BranchNode:
        unit_at(units, index)
        return require_non_null(find_node(tree, index), "tree node for the selected cell")

    def select_subtree(self, units: Sequence[Unit], index: int) -> UnitRange:
        """Range covering the cell and everything nested under it."""
        tree = self.tree(units)
        anchor = self._anchor(tree, units, index)
        return require_non_null(_span(subtree_units(tree, anchor)), "subtree range")

    def select_siblings(self, units: Sequence[Unit], index: int) -> UnitRange:
        """
        Range covering the cell, its siblings and everything under them.

        For a top-level cell the siblings are the whole top level, i.e.
        the whole document.
        """
        tree = self.tree(units)
        anchor = self._anchor(tree, units, index)
        parent = require_non_null(tree.parent_of(anchor), "parent node")
        cells = [
            unit
            for sibling in tree.children_of(parent)
            for unit in subtree_units(tree, sibling)
        ]
        return require_non_null(_span(cells), "siblings range")

    def goto_parent(self, units: Sequence[Unit], index: int) -> int | None:
        """Index of the parent cell; None for top-level cells."""
        return self.navigate(units, index, Motion.PARENT)

    def navigate(
        self,
        units: Sequence[Unit],
        index: int,
        motion: Motion | str,
        count: int = 1,
    ) -> int | None:
        """
        Index of the cell ``count`` steps away along ``motion``.

        Returns None when the traversal runs out before ``count`` steps.
        """
        motion = Motion(motion)
        if count < 1:
            raise PreconditionError(f"count must be at least 1, got {count}")

        tree = self.tree(units)
        anchor = self._anchor(tree, units, index)
        traversal = getattr(tree.traversals, _MOTION_TRAVERSALS[motion])
        target = nth(filter_sequence(traversal(anchor), is_branch), count)
        if target is None:
            logger.debug("No %s target %d steps from cell %d", motion.value, count, index)
            return None
        return target.unit.index

    def outline(self, units: Sequence[Unit]) -> list[dict[str, Any]]:
        """Heading cells in document order with their place in the tree."""
        tree = self.tree(units)
        return [
            {
                "index": node.unit.index,
                "level": node.level,
                "title": node.unit.title,
                "depth": tree.depth(node),
                "child_count": len(node.children_ids),
            }
            for node in tree.branches
            if node.is_heading
        ]


_default_navigator: Navigator | None = None


def _navigator() -> Navigator:
    """Navigator shared by the module-level commands, configured from ``CELLNAV_*``."""
    global _default_navigator
    if _default_navigator is None:
        config = NavigatorConfig.from_env()
        classifier = HeadingClassifier(config.markdown_preset)
        _default_navigator = Navigator(HierarchyBuilder(classifier))
    return _default_navigator


def select_subtree(units: Sequence[Unit], index: int) -> UnitRange:
    return _navigator().select_subtree(units, index)


def select_siblings(units: Sequence[Unit], index: int) -> UnitRange:
    return _navigator().select_siblings(units, index)


def goto_parent(units: Sequence[Unit], index: int) -> int | None:
    return _navigator().goto_parent(units, index)


def navigate(units: Sequence[Unit], index: int, motion: Motion | str, count: int = 1) -> int | None:
    return _navigator().navigate(units, index, motion, count)


def outline(units: Sequence[Unit]) -> list[dict[str, Any]]:
    return _navigator().outline(units)
