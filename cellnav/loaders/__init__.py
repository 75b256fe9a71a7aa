"""Notebook loaders. Importing this package registers the built-in loaders."""

from cellnav.loaders.base import BaseLoader, LoaderRegistry
from cellnav.loaders.notebook import NotebookLoader
from cellnav.loaders.percent import PercentScriptLoader

__all__ = [
    "BaseLoader",
    "LoaderRegistry",
    "NotebookLoader",
    "PercentScriptLoader",
]
