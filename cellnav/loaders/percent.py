"""
Percent-format script loader.

Loads ``.py`` notebooks in the "percent" format, where every cell starts
with a ``# %%`` line. Cells marked ``# %% [markdown]`` (or ``[md]``) are
markup with their comment prefix removed; ``# %% [raw]`` cells are raw;
everything else is code.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, ClassVar

from cellnav.core.document import Unit, UnitKind
from cellnav.core.errors import LoaderError
from cellnav.loaders.base import BaseLoader, LoaderRegistry

CELL_MARKER_RE = re.compile(r"^#\s*%%(?P<title>[^\[]*)(?:\[(?P<tag>\w+)\])?.*$")

_TAG_KINDS: dict[str, UnitKind] = {
    "markdown": UnitKind.MARKUP,
    "md": UnitKind.MARKUP,
    "raw": UnitKind.RAW,
}


@LoaderRegistry.register
class PercentScriptLoader(BaseLoader):
    """Load percent-format Python notebooks."""

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = [".py"]
    LOADER_NAME: ClassVar[str] = "percent"

    def load(self, path: Path) -> tuple[list[Unit], dict[str, Any]]:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoaderError(
                f"Failed to read script: {e}",
                source_path=path,
                details=str(e),
            ) from e

        units = self.parse(text)
        if not any(CELL_MARKER_RE.match(line) for line in text.splitlines()):
            loaded_as = "one code cell" if units else "no cells"
            self._add_warning(f"No '# %%' cell markers in {path.name}; loaded as {loaded_as}")
        return units, {"format": "percent"}

    def parse(self, text: str) -> list[Unit]:
        """Split percent-format text into units."""
        header: list[str] = []
        cells: list[tuple[UnitKind, list[str]]] = []

        for line in text.splitlines():
            match = CELL_MARKER_RE.match(line)
            if match:
                tag = (match.group("tag") or "").lower()
                cells.append((_TAG_KINDS.get(tag, UnitKind.CODE), []))
            elif cells:
                cells[-1][1].append(line)
            else:
                header.append(line)

        # Text before the first marker is kept as a code cell unless blank
        if any(line.strip() for line in header):
            cells.insert(0, (UnitKind.CODE, header))

        units = []
        for kind, lines in cells:
            if kind is UnitKind.MARKUP:
                lines = [_uncomment(line) for line in lines]
            content = "\n".join(lines).strip("\n")
            units.append(Unit(index=len(units), kind=kind, content=content))
        return units


def _uncomment(line: str) -> str:
    if line.startswith("# "):
        return line[2:]
    if line.startswith("#"):
        return line[1:]
    return line
