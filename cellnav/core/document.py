"""
Document model for cellnav.

A document is an ordered sequence of units (notebook cells). Units are
read-only to everything in this package: the hierarchy is derived from
their content on every query and never written back.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from cellnav.core.errors import UnitNotFoundError


class UnitKind(Enum):
    """Kinds of notebook cells."""

    MARKUP = "markup"
    CODE = "code"
    RAW = "raw"

    @property
    def is_prose(self) -> bool:
        return self is UnitKind.MARKUP


@dataclass(frozen=True)
class Unit:
    """
    One addressable cell of a document.

    ``index`` is the cell's position in its document and is the stable
    handle callers use to refer back to it.
    """

    index: int
    kind: UnitKind
    content: str
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "kind": self.kind.value,
            "content": self.content,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Unit:
        return cls(
            index=data["index"],
            kind=UnitKind(data.get("kind", UnitKind.MARKUP.value)),
            content=data.get("content", ""),
            metadata=data.get("metadata", {}),
        )

    @property
    def title(self) -> str:
        """First non-blank line of the content, without heading markers."""
        for line in self.content.splitlines():
            stripped = line.strip()
            if stripped:
                return stripped.lstrip("#").strip()
        return ""


def make_units(contents: Iterable[str | tuple[str, UnitKind]]) -> list[Unit]:
    """
    Build a unit sequence from plain strings.

    Each item is either the content of a markup cell or a
    ``(content, kind)`` pair. Indices are assigned in order.
    """
    units = []
    for index, item in enumerate(contents):
        if isinstance(item, tuple):
            content, kind = item
        else:
            content, kind = item, UnitKind.MARKUP
        units.append(Unit(index=index, kind=kind, content=content))
    return units


@dataclass
class NotebookDocument:
    """A loaded notebook: its units plus where they came from."""

    units: list[Unit]
    source_path: Path | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.units)

    def unit_at(self, index: int) -> Unit:
        """Get the unit at ``index``, raising if it does not exist."""
        return unit_at(self.units, index)

    @property
    def markup_count(self) -> int:
        return sum(1 for unit in self.units if unit.kind.is_prose)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": str(self.source_path) if self.source_path else None,
            "unit_count": len(self.units),
            "markup_count": self.markup_count,
            "units": [unit.to_dict() for unit in self.units],
            "metadata": self.metadata,
        }


def unit_at(units: Sequence[Unit], index: int) -> Unit:
    """Find the unit whose ``index`` is ``index``."""
    if 0 <= index < len(units) and units[index].index == index:
        return units[index]
    for unit in units:
        if unit.index == index:
            return unit
    raise UnitNotFoundError(index, len(units))
