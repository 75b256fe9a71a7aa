"""Tests for the generic traversal generators."""

from __future__ import annotations

import pytest

from cellnav.hierarchy.builder import build_tree
from cellnav.hierarchy.tree import CellTree, TreeNode, is_branch
from cellnav.traversal.engine import (
    ancestors,
    backward_and_up,
    breadth_first,
    depth_first,
    depth_first_down,
    forward_and_over,
    forward_and_up,
    get_traversal_functions,
    siblings_of,
    slide_down,
)
from cellnav.traversal.generators import filter_sequence, nth, skip_until

ROOT = "root"


# ===================================================================
# Helpers
# ===================================================================


def _labels(tree: CellTree, nodes) -> list[int | str]:
    """Unit index for branches, 'root' for the root."""
    return [node.unit.index if is_branch(node) else ROOT for node in nodes]


def _node(tree: CellTree, unit_index: int) -> TreeNode:
    node = tree.find(unit_index)
    assert node is not None
    return node


def _sibling_run(nodes, parent, parent_of) -> list:
    """Leading run of ``nodes`` that are children of ``parent``."""
    run = []
    for node in nodes:
        if parent_of(node) != parent:
            break
        run.append(node)
    return run


# A plain dict tree, to show the traversals only need the two accessors.
#
#        a
#      / | \
#     b  e  f
#    / \     \
#   c   d     g
CHILDREN = {
    "a": ["b", "e", "f"],
    "b": ["c", "d"],
    "c": [],
    "d": [],
    "e": [],
    "f": ["g"],
    "g": [],
}
PARENTS = {child: parent for parent, kids in CHILDREN.items() for child in kids}


def parent_of(name: str) -> str | None:
    return PARENTS.get(name)


def children_of(name: str) -> list[str]:
    return CHILDREN[name]


# ===================================================================
# Traversals over a cell tree
# ===================================================================


class TestCellTreeTraversals:
    """Traversal orders over [H1, H2, content, H2, H1]."""

    def test_breadth_first_from_root(self, outline_tree):
        t = outline_tree
        order = _labels(t, breadth_first(t.root, t.children_of))
        assert order == [ROOT, 0, 4, 1, 3, 2]

    def test_nth_branch_in_breadth_first(self, outline_tree):
        t = outline_tree
        branches = filter_sequence(breadth_first(t.root, t.children_of), is_branch)
        found = nth(branches, 3)
        assert found is not None and found.unit.index == 3

    def test_depth_first_from_leaf(self, outline_tree):
        t = outline_tree
        order = _labels(t, depth_first(_node(t, 2), t.parent_of, t.children_of))
        assert order == [2, 3, 4]

    def test_skip_until_on_depth_first(self, outline_tree):
        t = outline_tree
        content = _node(t, 2)
        order = skip_until(depth_first(content, t.parent_of, t.children_of), content)
        assert _labels(t, order) == [2, 3, 4]

    def test_depth_first_from_root_is_document_order(self, outline_tree):
        t = outline_tree
        order = _labels(t, depth_first(t.root, t.parent_of, t.children_of))
        assert order == [ROOT, 0, 1, 2, 3, 4]

    def test_depth_first_down_stays_in_subtree(self, outline_tree):
        t = outline_tree
        assert _labels(t, depth_first_down(_node(t, 1), t.children_of)) == [1, 2]

    def test_forward_and_up(self, outline_tree):
        t = outline_tree
        order = _labels(t, forward_and_up(_node(t, 1), t.parent_of, t.children_of))
        assert order == [1, 3, 0, 4, ROOT]

    def test_backward_and_up(self, outline_tree):
        t = outline_tree
        order = _labels(t, backward_and_up(_node(t, 3), t.parent_of, t.children_of))
        assert order == [3, 1, 0, ROOT]

    def test_forward_and_over(self, outline_tree):
        t = outline_tree
        order = _labels(t, forward_and_over(_node(t, 2), t.parent_of, t.children_of))
        assert order == [2, 3, 4]

    def test_ancestors(self, outline_tree):
        t = outline_tree
        assert _labels(t, ancestors(_node(t, 2), t.parent_of)) == [2, 1, 0, ROOT]

    def test_slide_down(self, outline_tree):
        t = outline_tree
        assert _labels(t, slide_down(_node(t, 0), t.parent_of, t.children_of)) == [0, 1, 2, 3, 4]
        assert _labels(t, slide_down(_node(t, 3), t.parent_of, t.children_of)) == [3, 4]
        assert _labels(t, slide_down(t.root, t.parent_of, t.children_of)) == [ROOT, 0, 1, 2, 3, 4]

    def test_from_root(self, outline_tree):
        t = outline_tree
        assert _labels(t, forward_and_up(t.root, t.parent_of, t.children_of)) == [ROOT]
        assert _labels(t, backward_and_up(t.root, t.parent_of, t.children_of)) == [ROOT]
        assert _labels(t, forward_and_over(t.root, t.parent_of, t.children_of)) == [ROOT]


# ===================================================================
# Traversals over an arbitrary tree
# ===================================================================


class TestGenericTraversals:
    """The same generators on a dict-backed tree."""

    def test_siblings_of(self):
        assert list(siblings_of("e", parent_of, children_of)) == ["b", "e", "f"]
        assert list(siblings_of("a", parent_of, children_of)) == []

    def test_depth_first(self):
        assert list(depth_first("d", parent_of, children_of)) == ["d", "e", "f", "g"]

    def test_breadth_first(self):
        assert list(breadth_first("a", children_of)) == ["a", "b", "e", "f", "c", "d", "g"]

    def test_forward_and_up(self):
        assert list(forward_and_up("c", parent_of, children_of)) == ["c", "d", "b", "e", "f", "a"]

    def test_backward_and_up(self):
        assert list(backward_and_up("g", parent_of, children_of)) == ["g", "f", "e", "b", "a"]

    def test_forward_and_over(self):
        assert list(forward_and_over("c", parent_of, children_of)) == ["c", "d", "e", "f"]

    def test_slide_down(self):
        assert list(slide_down("b", parent_of, children_of)) == ["b", "c", "d", "e", "f"]

    def test_bound_functions(self):
        fns = get_traversal_functions(parent_of, children_of)
        assert list(fns.ancestors("g")) == ["g", "f", "a"]
        assert list(fns.depth_first_down("b")) == ["b", "c", "d"]
        assert list(fns.forward_and_over("e")) == ["e", "f"]
        assert list(fns.slide_down("f")) == ["f", "g"]

    def test_traversals_are_lazy(self):
        calls: list[str] = []

        def counting_children(name: str) -> list[str]:
            calls.append(name)
            return CHILDREN[name]

        iterator = depth_first("a", parent_of, counting_children)
        assert next(iterator) == "a"
        assert calls == []


# ===================================================================
# Properties
# ===================================================================


class TestTraversalProperties:
    """Totality and mirror properties."""

    @pytest.mark.parametrize("start", sorted(CHILDREN))
    def test_every_traversal_starts_at_anchor(self, start):
        fns = get_traversal_functions(parent_of, children_of)
        for traversal in (
            fns.forward_and_up,
            fns.backward_and_up,
            fns.forward_and_over,
            fns.ancestors,
            fns.depth_first_down,
            fns.depth_first,
            fns.breadth_first,
            fns.slide_down,
        ):
            assert next(traversal(start)) == start

    @pytest.mark.parametrize("start", sorted(CHILDREN))
    def test_no_node_yielded_twice(self, start):
        fns = get_traversal_functions(parent_of, children_of)
        for traversal in (fns.forward_and_up, fns.depth_first, fns.slide_down, fns.forward_and_over):
            seen = list(traversal(start))
            assert len(seen) == len(set(seen))

    def test_depth_first_from_root_covers_tree(self):
        assert sorted(depth_first("a", parent_of, children_of)) == sorted(CHILDREN)

    def test_backward_and_up_visits_preceding_siblings(self):
        """Every node backward_and_up reaches before the root precedes or contains the anchor."""
        document_order = list(depth_first_down("a", children_of))
        for start in CHILDREN:
            for node in backward_and_up(start, parent_of, children_of):
                assert document_order.index(node) <= document_order.index(start)

    def test_forward_and_backward_mirror_on_siblings(self):
        """forward_and_up from the first sibling reverses backward_and_up from the last."""
        siblings = children_of("a")
        assert len(siblings) >= 3
        forward = _sibling_run(forward_and_up(siblings[0], parent_of, children_of), "a", parent_of)
        backward = _sibling_run(backward_and_up(siblings[-1], parent_of, children_of), "a", parent_of)
        assert forward == ["b", "e", "f"]
        assert list(reversed(forward)) == backward

    def test_forward_and_backward_mirror_on_cell_tree(self, mixed_units):
        t = build_tree(mixed_units)
        parent = _node(t, 1)
        siblings = t.children_of(parent)
        assert len(siblings) >= 3
        forward = _sibling_run(forward_and_up(siblings[0], t.parent_of, t.children_of), parent, t.parent_of)
        backward = _sibling_run(backward_and_up(siblings[-1], t.parent_of, t.children_of), parent, t.parent_of)
        assert _labels(t, forward) == [2, 3, 6]
        assert list(reversed(forward)) == backward

    def test_mirror_holds_across_top_level(self, outline_tree):
        t = outline_tree
        top = t.children_of(t.root)
        forward = _sibling_run(forward_and_up(top[0], t.parent_of, t.children_of), t.root, t.parent_of)
        backward = _sibling_run(backward_and_up(top[-1], t.parent_of, t.children_of), t.root, t.parent_of)
        assert _labels(t, forward) == [0, 4]
        assert list(reversed(forward)) == backward
