"""
Command line interface for cellnav.

Usage::

    python -m cellnav tree notebook.ipynb
    python -m cellnav outline notebook.ipynb
    python -m cellnav select notebook.ipynb --cell 3 --scope siblings
    python -m cellnav navigate notebook.ipynb --cell 3 --motion parent
    python -m cellnav serve --port 8430

Results are printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from cellnav.config import LOG_FORMAT, NavigatorConfig
from cellnav.core.errors import CellnavError
from cellnav.hierarchy.builder import HierarchyBuilder
from cellnav.hierarchy.classifier import HeadingClassifier
from cellnav.loaders import LoaderRegistry
from cellnav.navigation.commands import Motion, Navigator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cellnav",
        description="Outline and navigate notebook cells by their Markdown headings.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from CELLNAV_LOG_LEVEL).")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree = subparsers.add_parser("tree", help="Print the cell tree.")
    tree.add_argument("path", type=Path, help="Notebook file (.ipynb or percent-format .py).")

    outline = subparsers.add_parser("outline", help="Print heading cells with their depth.")
    outline.add_argument("path", type=Path)

    select = subparsers.add_parser("select", help="Print the index range around a cell.")
    select.add_argument("path", type=Path)
    select.add_argument("--cell", type=int, required=True, help="Index of the selected cell.")
    select.add_argument("--scope", choices=["subtree", "siblings"], default="subtree")

    navigate = subparsers.add_parser("navigate", help="Print where a motion lands.")
    navigate.add_argument("path", type=Path)
    navigate.add_argument("--cell", type=int, required=True, help="Index of the selected cell.")
    navigate.add_argument(
        "--motion",
        choices=[motion.value for motion in Motion],
        default=Motion.NEXT.value,
    )
    navigate.add_argument("--count", type=int, default=1, help="Number of steps.")

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def run(args: argparse.Namespace, config: NavigatorConfig) -> Any:
    """Execute a parsed command and return its JSON-ready result."""
    navigator = Navigator(HierarchyBuilder(HeadingClassifier(config.markdown_preset)))
    document = LoaderRegistry.load_document(args.path)
    units = document.units

    if args.command == "tree":
        return navigator.tree(units).to_dict()
    if args.command == "outline":
        return {"source": str(args.path), "headings": navigator.outline(units)}
    if args.command == "select":
        if args.scope == "siblings":
            selection = navigator.select_siblings(units, args.cell)
        else:
            selection = navigator.select_subtree(units, args.cell)
        return {"scope": args.scope, "range": selection.to_dict()}
    if args.command == "navigate":
        target = navigator.navigate(units, args.cell, args.motion, args.count)
        return {"motion": args.motion, "from": args.cell, "target": target}
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = NavigatorConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    if args.command == "serve":
        from cellnav.server import configure, run_server

        configure(config)
        run_server(host=args.host, port=args.port)
        return 0

    try:
        result = run(args, config)
    except CellnavError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        if e.details:
            print(f"  {e.details}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=None if args.compact else 2))
    return 0
