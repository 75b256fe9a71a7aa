"""
Exception types for cellnav.

Absence ("no such node", "no parent", "sequence exhausted") is reported
with ``None`` return values, not exceptions. The classes here cover
caller misuse and unreadable input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class CellnavError(Exception):
    """Base exception for cellnav operations."""

    def __init__(self, message: str, details: str | None = None):
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "type": type(self).__name__,
            "details": self.details,
        }


class PreconditionError(CellnavError, ValueError):
    """A required value was absent or an argument was out of range."""


class UnitNotFoundError(CellnavError, LookupError):
    """A unit index does not exist in the document."""

    def __init__(self, index: int, unit_count: int):
        self.index = index
        self.unit_count = unit_count
        super().__init__(
            f"No unit at index {index}",
            details=f"Document has {unit_count} units",
        )


class LoaderError(CellnavError):
    """A notebook file could not be read."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        super().__init__(message, details=details)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["source_path"] = str(self.source_path) if self.source_path else None
        return result
