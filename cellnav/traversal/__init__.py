"""
Traversal module - lazy orderings over parent/children trees.

The engine is generic: it only needs ``parent_of`` and ``children_of``.
"""

from cellnav.traversal.engine import (
    TraversalFunctions,
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
from cellnav.traversal.generators import (
    filter_sequence,
    is_present,
    map_sequence,
    nth,
    require_non_null,
    skip_until,
)

__all__ = [
    "TraversalFunctions",
    "ancestors",
    "backward_and_up",
    "breadth_first",
    "depth_first",
    "depth_first_down",
    "filter_sequence",
    "forward_and_over",
    "forward_and_up",
    "get_traversal_functions",
    "is_present",
    "map_sequence",
    "nth",
    "require_non_null",
    "siblings_of",
    "skip_until",
    "slide_down",
]
