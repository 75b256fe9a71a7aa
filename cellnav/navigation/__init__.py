"""Navigation commands: selections and cursor motions over cell trees."""

from cellnav.navigation.commands import (
    Motion,
    Navigator,
    UnitRange,
    find_node,
    goto_parent,
    navigate,
    outline,
    select_siblings,
    select_subtree,
    subtree_units,
)

__all__ = [
    "Motion",
    "Navigator",
    "UnitRange",
    "find_node",
    "goto_parent",
    "navigate",
    "outline",
    "select_siblings",
    "select_subtree",
    "subtree_units",
]
