"""
Base loader class and registry for notebook loaders.

All notebook loaders inherit from BaseLoader and register themselves
with the LoaderRegistry so files can be opened by extension.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar

from cellnav.core.document import NotebookDocument, Unit
from cellnav.core.errors import LoaderError

logger = logging.getLogger(__name__)


class BaseLoader(ABC):
    """
    Abstract base class for notebook loaders.

    Each loader is responsible for:
    1. Detecting if it can handle a file type
    2. Reading the file into an ordered list of Units
    """

    SUPPORTED_EXTENSIONS: ClassVar[list[str]] = []
    LOADER_NAME: ClassVar[str] = "base"

    def __init__(self) -> None:
        self._warnings: list[str] = []

    @classmethod
    def can_load(cls, path: Path) -> bool:
        return path.suffix.lower() in cls.SUPPORTED_EXTENSIONS

    @abstractmethod
    def load(self, path: Path) -> tuple[list[Unit], dict[str, Any]]:
        """
        Read a notebook file.

        Returns:
            Tuple of (units, metadata)

        Raises:
            LoaderError: If the file cannot be parsed
        """

    def load_document(self, path: Path) -> NotebookDocument:
        """Load a file into a NotebookDocument, checking it exists and is supported."""
        if not path.exists():
            raise LoaderError(f"File not found: {path}", source_path=path)

        if not self.can_load(path):
            raise LoaderError(
                f"Unsupported file type: {path.suffix}",
                source_path=path,
                details=f"Supported types: {', '.join(self.SUPPORTED_EXTENSIONS)}",
            )

        self._warnings = []
        units, metadata = self.load(path)
        metadata["loader"] = self.LOADER_NAME
        if self._warnings:
            metadata["warnings"] = list(self._warnings)

        logger.info("Loaded %d cells from %s with %s loader", len(units), path, self.LOADER_NAME)
        return NotebookDocument(units=units, source_path=path, metadata=metadata)

    @property
    def warnings(self) -> list[str]:
        return self._warnings

    def _add_warning(self, warning: str) -> None:
        logger.warning(warning)
        self._warnings.append(warning)


class LoaderRegistry:
    """
    Registry of available notebook loaders.

    Use this to automatically select the appropriate loader for a file.
    """

    _loaders: ClassVar[list[type[BaseLoader]]] = []

    @classmethod
    def register(cls, loader_class: type[BaseLoader]) -> type[BaseLoader]:
        """
        Register a loader class. Can be used as a decorator.

        @LoaderRegistry.register
        class MyLoader(BaseLoader):
            ...
        """
        if loader_class not in cls._loaders:
            cls._loaders.append(loader_class)
        return loader_class

    @classmethod
    def get_loader(cls, path: Path) -> BaseLoader | None:
        for loader_class in cls._loaders:
            if loader_class.can_load(path):
                return loader_class()
        return None

    @classmethod
    def supported_extensions(cls) -> list[str]:
        extensions = []
        for loader_class in cls._loaders:
            extensions.extend(loader_class.SUPPORTED_EXTENSIONS)
        return sorted(set(extensions))

    @classmethod
    def load_document(cls, path: Path) -> NotebookDocument:
        """
        Load a notebook using the appropriate loader.

        Raises:
            LoaderError: If no loader is available or loading fails
        """
        loader = cls.get_loader(path)
        if loader is None:
            supported = ", ".join(cls.supported_extensions())
            raise LoaderError(
                f"No loader available for file type: {path.suffix}",
                source_path=path,
                details=f"Supported types: {supported}",
            )
        return loader.load_document(path)
