"""
Jupyter notebook (.ipynb) loader.

Reads nbformat 4 JSON. Markdown cells become MARKUP units, code cells
CODE units, and raw cells RAW units.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, ClassVar

from cellnav.core.document import Unit, UnitKind
from cellnav.core.errors import LoaderError
from cellnav.loaders.base import BaseLoader, LoaderRegistry

_CELL_KINDS: dict[str, UnitKind] = {
    "markdown": UnitKind.MARKUP,
    "code": UnitKind.CODE,
    "raw": UnitKind.RAW,
}


@LoaderRegistry.register
class NotebookLoader(BaseLoader):
    """Load Jupyter notebooks."""

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = [".ipynb"]
    LOADER_NAME: ClassVar[str] = "ipynb"

    def load(self, path: Path) -> tuple[list[Unit], dict[str, Any]]:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LoaderError(
                f"Failed to read notebook: {e}",
                source_path=path,
                details=str(e),
            ) from e

        return self.parse(data, path)

    def parse(self, data: Any, path: Path | None = None) -> tuple[list[Unit], dict[str, Any]]:
        """Turn decoded notebook JSON into units and metadata."""
        if not isinstance(data, dict) or not isinstance(data.get("cells"), list):
            raise LoaderError(
                "Notebook JSON has no 'cells' list",
                source_path=path,
            )

        units = []
        for index, cell in enumerate(data["cells"]):
            if not isinstance(cell, dict):
                raise LoaderError(
                    f"Cell {index} is not a JSON object",
                    source_path=path,
                    details=f"Got {type(cell).__name__}",
                )
            source = cell.get("source", "")
            if not _is_source(source):
                raise LoaderError(
                    f"Cell {index} has an invalid 'source'",
                    source_path=path,
                    details="Expected a string or a list of strings",
                )

            cell_type = cell.get("cell_type", "raw")
            kind = _CELL_KINDS.get(cell_type) if isinstance(cell_type, str) else None
            if kind is None:
                self._add_warning(f"Cell {index} has unknown type '{cell_type}', treating as raw")
                kind = UnitKind.RAW

            units.append(
                Unit(
                    index=index,
                    kind=kind,
                    content=_join_source(source),
                    metadata={"cell_id": cell["id"]} if "id" in cell else {},
                )
            )

        metadata: dict[str, Any] = {
            "nbformat": data.get("nbformat"),
            "nbformat_minor": data.get("nbformat_minor"),
        }
        notebook_metadata = data.get("metadata")
        if not isinstance(notebook_metadata, dict):
            notebook_metadata = {}
        language_info = notebook_metadata.get("language_info")
        language = language_info.get("name") if isinstance(language_info, dict) else None
        if language:
            metadata["language"] = language

        return units, metadata


def _join_source(source: str | list[str]) -> str:
    # nbformat allows a multiline string or a list of lines
    if isinstance(source, list):
        return "".join(source)
    return source


def _is_source(source: Any) -> bool:
    if isinstance(source, str):
        return True
    return isinstance(source, list) and all(isinstance(line, str) for line in source)
