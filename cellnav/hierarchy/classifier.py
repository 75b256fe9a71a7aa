"""
Heading classification for cells.

Decides whether a cell is a heading cell and at what level it leaves the
outline, using markdown-it-py for the Markdown parsing.
"""

from __future__ import annotations

from typing import NamedTuple

from markdown_it import MarkdownIt
from markdown_it.token import Token

from cellnav.config import DEFAULT_MARKDOWN_PRESET
from cellnav.core.document import Unit


class HeadingInfo(NamedTuple):
    """Result of classifying one cell."""

    is_heading: bool
    level: int | None


class HeadingClassifier:
    """
    Find heading tokens in markup cells.

    A cell is a heading cell if its Markdown contains at least one
    heading, anywhere (ATX or setext, nested in quotes or lists
    included). Its concluding level is the level of the last heading.
    Text after that heading does not change the level.
    """

    def __init__(self, preset: str = DEFAULT_MARKDOWN_PRESET) -> None:
        self.preset = preset
        self._md = MarkdownIt(preset)

    def heading_levels(self, text: str) -> list[int]:
        """Levels of every heading in ``text``, in document order."""
        tokens: list[Token] = self._md.parse(text)
        # h1 -> 1, h2 -> 2, etc.
        return [int(token.tag[1]) for token in tokens if token.type == "heading_open"]

    def is_heading(self, unit: Unit) -> bool:
        if not unit.kind.is_prose:
            return False
        return bool(self.heading_levels(unit.content))

    def concluding_level(self, unit: Unit, fallback_level: int | None = None) -> int | None:
        """
        Level of the last heading in the cell.

        Args:
            unit: Cell to inspect.
            fallback_level: Returned unchanged when the cell has no heading.
        """
        if not unit.kind.is_prose:
            return fallback_level
        levels = self.heading_levels(unit.content)
        if not levels:
            return fallback_level
        return levels[-1]

    def classify(self, unit: Unit) -> HeadingInfo:
        """Classify with a single parse of the cell content."""
        if not unit.kind.is_prose:
            return HeadingInfo(False, None)
        levels = self.heading_levels(unit.content)
        if not levels:
            return HeadingInfo(False, None)
        return HeadingInfo(True, levels[-1])
