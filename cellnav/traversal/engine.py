"""
Lazy tree traversals.

Every traversal is a generator defined only in terms of two accessors,
``parent_of(node) -> node | None`` and ``children_of(node) -> sequence``,
so the same functions work on any tree shape. Each one starts at an
anchor node, yields the anchor first, and is finite.

Callers usually want a single element (the next heading, the n-th
ancestor), so nothing here materializes more than it has to.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

ParentAccessor = Callable[[T], T | None]
ChildrenAccessor = Callable[[T], Sequence[T]]


def siblings_of(
    node: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Sequence[T]:
    """Children of the node's parent (including the node), or empty if it has none."""
    parent = parent_of(node)
    if parent is not None:
        return children_of(parent)
    return []


def forward_and_up(
    start: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Iterator[T]:
    """
    Yield the anchor, its later siblings, then its parent and the parent's
    later siblings, and so on up to a node without a parent.

    Never descends into children.
    """
    current: T | None = start
    while current is not None:
        yield current

        if parent_of(current) is None:
            return
        siblings = siblings_of(current, parent_of, children_of)
        position = siblings.index(current)
        if position < len(siblings) - 1:
            current = siblings[position + 1]
        else:
            current = parent_of(current)


def backward_and_up(
    start: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Iterator[T]:
    """Mirror of ``forward_and_up``: earlier siblings in reverse, then the parent."""
    current: T | None = start
    while current is not None:
        yield current

        siblings = siblings_of(current, parent_of, children_of)
        if not siblings:
            return
        position = siblings.index(current)
        if position > 0:
            current = siblings[position - 1]
        else:
            current = parent_of(current)


def forward_and_over(
    start: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Iterator[T]:
    """
    Yield the anchor, its later siblings, then the later siblings of each
    ancestor in turn. Ancestors themselves are never yielded.
    """
    yield start
    parent = parent_of(start)
    if parent is None:
        return
    siblings = children_of(parent)
    yield from siblings[siblings.index(start) + 1 :]

    rest = forward_and_over(parent, parent_of, children_of)
    next(rest)  # the parent itself
    yield from rest


def ancestors(start: T, parent_of: ParentAccessor[T]) -> Iterator[T]:
    """Yield the anchor, then its parent, grandparent, and so on."""
    current: T | None = start
    while current is not None:
        yield current
        current = parent_of(current)


def depth_first_down(start: T, children_of: ChildrenAccessor[T]) -> Iterator[T]:
    """Pre-order over the anchor's own subtree."""
    yield start
    for child in children_of(start):
        yield from depth_first_down(child, children_of)


def depth_first(
    start: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Iterator[T]:
    """
    Whole-tree pre-order, starting at the anchor's position.

    After the anchor's subtree, climbs through the ancestors and descends
    into each ancestor's later siblings.
    """
    yield from depth_first_down(start, children_of)

    current = start
    parent = parent_of(current)
    while parent is not None:
        siblings = children_of(parent)
        for sibling in siblings[siblings.index(current) + 1 :]:
            yield from depth_first_down(sibling, children_of)
        current = parent
        parent = parent_of(current)


def breadth_first(start: T, children_of: ChildrenAccessor[T]) -> Iterator[T]:
    """Level-order over the anchor's subtree."""
    queue: deque[T] = deque([start])
    while queue:
        current = queue.popleft()
        yield current
        queue.extend(children_of(current))


def slide_down(
    start: T,
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> Iterator[T]:
    """
    Step forward, preferring to descend.

    Follows first children down from the anchor. At the first node without
    children, continues as ``forward_and_over`` from there, so no node is
    yielded twice and ancestors on the way down are not revisited.
    """
    current = start
    children = children_of(current)
    while children:
        yield current
        current = children[0]
        children = children_of(current)
    yield from forward_and_over(current, parent_of, children_of)


@dataclass(frozen=True)
class TraversalFunctions(Generic[T]):
    """Traversals with the tree accessors already bound."""

    parent_of: ParentAccessor[T]
    children_of: ChildrenAccessor[T]

    def forward_and_up(self, start: T) -> Iterator[T]:
        return forward_and_up(start, self.parent_of, self.children_of)

    def backward_and_up(self, start: T) -> Iterator[T]:
        return backward_and_up(start, self.parent_of, self.children_of)

    def forward_and_over(self, start: T) -> Iterator[T]:
        return forward_and_over(start, self.parent_of, self.children_of)

    def ancestors(self, start: T) -> Iterator[T]:
        return ancestors(start, self.parent_of)

    def depth_first_down(self, start: T) -> Iterator[T]:
        return depth_first_down(start, self.children_of)

    def depth_first(self, start: T) -> Iterator[T]:
        return depth_first(start, self.parent_of, self.children_of)

    def breadth_first(self, start: T) -> Iterator[T]:
        return breadth_first(start, self.children_of)

    def slide_down(self, start: T) -> Iterator[T]:
        return slide_down(start, self.parent_of, self.children_of)


def get_traversal_functions(
    parent_of: ParentAccessor[T],
    children_of: ChildrenAccessor[T],
) -> TraversalFunctions[T]:
    return TraversalFunctions(parent_of, children_of)
