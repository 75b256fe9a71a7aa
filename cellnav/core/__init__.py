"""Core data models and errors for cellnav."""

from cellnav.core.document import NotebookDocument, Unit, UnitKind, make_units, unit_at
from cellnav.core.errors import (
    CellnavError,
    LoaderError,
    PreconditionError,
    UnitNotFoundError,
)

__all__ = [
    "CellnavError",
    "LoaderError",
    "NotebookDocument",
    "PreconditionError",
    "Unit",
    "UnitKind",
    "UnitNotFoundError",
    "make_units",
    "unit_at",
]
