"""
Pytest configuration and fixtures for cellnav tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cellnav.core.document import Unit, UnitKind, make_units
from cellnav.hierarchy.builder import HierarchyBuilder
from cellnav.hierarchy.tree import CellTree


@pytest.fixture
def outline_units() -> list[Unit]:
    """Cells with levels [H1, H2, content, H2, H1] at indices 0..4."""
    return make_units(
        [
            "# Introduction",
            "## Background",
            "Some prose under the background heading.",
            "## Motivation",
            "# Results",
        ]
    )


@pytest.fixture
def outline_tree(outline_units: list[Unit]) -> CellTree:
    return HierarchyBuilder().build(outline_units)


@pytest.fixture
def mixed_units() -> list[Unit]:
    """A notebook-like mix of markup and code cells."""
    return make_units(
        [
            ("import numpy as np", UnitKind.CODE),
            "# Analysis",
            ("# this is a comment, not a heading\nx = 1", UnitKind.CODE),
            "## Loading data",
            ("df = load()", UnitKind.CODE),
            "Notes about the data.",
            "## Cleaning",
            ("df = df.dropna()", UnitKind.CODE),
            "# Conclusion",
            ("print('done')", UnitKind.CODE),
        ]
    )


@pytest.fixture
def sample_notebook_json() -> dict:
    """Minimal nbformat 4 notebook."""
    return {
        "nbformat": 4,
        "nbformat_minor": 5,
        "metadata": {"language_info": {"name": "python"}},
        "cells": [
            {"cell_type": "markdown", "id": "a1", "metadata": {}, "source": ["# Title\n", "\n", "Intro text."]},
            {"cell_type": "code", "id": "a2", "metadata": {}, "source": "x = 1", "outputs": [], "execution_count": None},
            {"cell_type": "markdown", "id": "a3", "metadata": {}, "source": "## Details"},
            {"cell_type": "code", "id": "a4", "metadata": {}, "source": ["y = x + 1\n", "print(y)"], "outputs": [], "execution_count": None},
            {"cell_type": "raw", "id": "a5", "metadata": {}, "source": "# raw, never a heading"},
            {"cell_type": "markdown", "id": "a6", "metadata": {}, "source": "# Appendix"},
        ],
    }


@pytest.fixture
def notebook_path(tmp_path: Path, sample_notebook_json: dict) -> Path:
    path = tmp_path / "sample.ipynb"
    path.write_text(json.dumps(sample_notebook_json), encoding="utf-8")
    return path


@pytest.fixture
def percent_script_content() -> str:
    """Sample percent-format notebook."""
    return """import os

# %% [markdown]
# # Setup
#
# Prepare the environment.

# %%
x = 1

# %% [markdown]
# ## Step one

# %% Compute
y = x * 2

# %% [raw]
# # raw cell

# %% [md]
# # Wrap up
"""


@pytest.fixture
def percent_path(tmp_path: Path, percent_script_content: str) -> Path:
    path = tmp_path / "analysis.py"
    path.write_text(percent_script_content, encoding="utf-8")
    return path
