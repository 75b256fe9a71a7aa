"""
Hierarchy module - the cell tree implied by Markdown headings.

This module classifies heading cells and builds cell trees from them.
"""

from cellnav.hierarchy.builder import HierarchyBuilder, build_tree
from cellnav.hierarchy.classifier import HeadingClassifier, HeadingInfo
from cellnav.hierarchy.tree import (
    BranchNode,
    CellTree,
    NodeKind,
    RootNode,
    TreeNode,
    is_branch,
    is_root,
)

__all__ = [
    "BranchNode",
    "CellTree",
    "HeadingClassifier",
    "HeadingInfo",
    "HierarchyBuilder",
    "NodeKind",
    "RootNode",
    "TreeNode",
    "build_tree",
    "is_branch",
    "is_root",
]
