"""FastAPI server for cellnav.

Exposes the cell tree and the navigation commands over HTTP so an
editor front end can ask "where does this command go?" and apply the
answer itself. Endpoints are registered on an ``APIRouter`` so another
app can mount them; the standalone ``app`` includes the router directly::

    uvicorn cellnav.server:app --reload --port 8430

Every request carries the current cells and rebuilds the tree; nothing
about a notebook is kept between requests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal, NoReturn

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from cellnav import __version__
from cellnav.config import NavigatorConfig
from cellnav.core.document import Unit, UnitKind
from cellnav.core.errors import CellnavError, LoaderError, PreconditionError, UnitNotFoundError
from cellnav.hierarchy.builder import HierarchyBuilder
from cellnav.hierarchy.classifier import HeadingClassifier
from cellnav.loaders import LoaderRegistry
from cellnav.navigation.commands import Motion, Navigator

logger = logging.getLogger(__name__)

router = APIRouter()

app = FastAPI(
    title="cellnav API",
    description="Heading-based outline and navigation for notebook cells",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_state: dict[str, Any] = {
    "config": NavigatorConfig.from_env(),
    "navigator": None,
}


def configure(config: NavigatorConfig) -> None:
    """Replace the server configuration (and the navigator built from it)."""
    _state["config"] = config
    _state["navigator"] = None


def _get_navigator() -> Navigator:
    if _state["navigator"] is None:
        config: NavigatorConfig = _state["config"]
        classifier = HeadingClassifier(config.markdown_preset)
        _state["navigator"] = Navigator(HierarchyBuilder(classifier))
    return _state["navigator"]


# ============================================================================
# Pydantic Models for API
# ============================================================================


class CellPayload(BaseModel):
    """One cell as sent by the client."""

    content: str = ""
    kind: UnitKind = UnitKind.MARKUP


class CellsRequest(BaseModel):
    """Request carrying the notebook's current cells."""

    cells: list[CellPayload] = []

    def to_units(self) -> list[Unit]:
        return [
            Unit(index=index, kind=cell.kind, content=cell.content)
            for index, cell in enumerate(self.cells)
        ]


class SelectRequest(CellsRequest):
    """Request for a selection range around a cell."""

    index: int
    scope: Literal["subtree", "siblings"] = "subtree"


class NavigateRequest(CellsRequest):
    """Request for the target of a cursor motion."""

    index: int
    motion: Motion
    count: int = Field(default=1, ge=1)


class OpenNotebookRequest(BaseModel):
    """Request for loading a notebook file from disk."""

    path: str


def _raise_http(error: CellnavError) -> NoReturn:
    if isinstance(error, UnitNotFoundError):
        raise HTTPException(status_code=404, detail=str(error)) from error
    if isinstance(error, (PreconditionError, LoaderError)):
        logger.warning("Rejected request: %s", error)
        raise HTTPException(status_code=400, detail=str(error)) from error
    raise HTTPException(status_code=500, detail=str(error)) from error


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/api/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@router.post("/api/tree")
async def get_tree(request: CellsRequest) -> dict[str, Any]:
    """Build the cell tree and return it as nested dicts."""
    return _get_navigator().tree(request.to_units()).to_dict()


@router.post("/api/outline")
async def get_outline(request: CellsRequest) -> dict[str, Any]:
    """Heading cells with their depth in the tree."""
    return {"headings": _get_navigator().outline(request.to_units())}


@router.post("/api/select")
async def select(request: SelectRequest) -> dict[str, Any]:
    """Index range of a cell's subtree or of it and its siblings."""
    navigator = _get_navigator()
    units = request.to_units()
    try:
        if request.scope == "siblings":
            selection = navigator.select_siblings(units, request.index)
        else:
            selection = navigator.select_subtree(units, request.index)
    except CellnavError as e:
        _raise_http(e)
    return {"scope": request.scope, "range": selection.to_dict()}


@router.post("/api/navigate")
async def navigate(request: NavigateRequest) -> dict[str, Any]:
    """Index of the cell a motion lands on, or null if there is none."""
    try:
        target = _get_navigator().navigate(
            request.to_units(), request.index, request.motion, request.count
        )
    except CellnavError as e:
        _raise_http(e)
    return {"motion": request.motion.value, "from": request.index, "target": target}


@router.post("/api/notebook/open")
async def open_notebook(request: OpenNotebookRequest) -> dict[str, Any]:
    """Load a notebook file and return its cells and tree."""
    try:
        document = LoaderRegistry.load_document(Path(request.path))
    except LoaderError as e:
        _raise_http(e)
    tree = _get_navigator().tree(document.units)
    return {"document": document.to_dict(), "tree": tree.to_dict()}


@router.get("/api/loaders")
async def get_loaders() -> dict[str, Any]:
    return {"extensions": LoaderRegistry.supported_extensions()}


app.include_router(router)


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Start the cellnav server via uvicorn.

    Args:
        host: Bind address. Defaults to the configured host.
        port: Port number. Defaults to the configured port.
    """
    import uvicorn

    config: NavigatorConfig = _state["config"]
    uvicorn.run(app, host=host or config.server_host, port=port or config.server_port)
