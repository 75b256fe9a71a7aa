"""cellnav: heading-based outlines and navigation for notebook cells."""

__version__ = "0.1.0"

from cellnav.config import NavigatorConfig
from cellnav.core import (
    CellnavError,
    LoaderError,
    NotebookDocument,
    PreconditionError,
    Unit,
    UnitKind,
    UnitNotFoundError,
    make_units,
)
from cellnav.hierarchy import (
    BranchNode,
    CellTree,
    HeadingClassifier,
    HierarchyBuilder,
    RootNode,
    TreeNode,
    build_tree,
    is_branch,
)
from cellnav.loaders import LoaderRegistry
from cellnav.navigation import Motion, Navigator, UnitRange

__all__ = [
    "BranchNode",
    "CellTree",
    "CellnavError",
    "HeadingClassifier",
    "HierarchyBuilder",
    "LoaderError",
    "LoaderRegistry",
    "Motion",
    "NavigatorConfig",
    "Navigator",
    "NotebookDocument",
    "PreconditionError",
    "RootNode",
    "TreeNode",
    "Unit",
    "UnitKind",
    "UnitNotFoundError",
    "UnitRange",
    "build_tree",
    "is_branch",
    "make_units",
]
