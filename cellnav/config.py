"""
Runtime configuration for cellnav.

Values come from dataclass defaults, a plain dict (``from_dict``), or the
environment (``from_env``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

DEFAULT_MARKDOWN_PRESET = "commonmark"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8430

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


@dataclass
class NavigatorConfig:
    """Configuration shared by the classifier, the service and the CLI."""

    markdown_preset: str = DEFAULT_MARKDOWN_PRESET  # markdown-it-py preset name
    log_level: str = DEFAULT_LOG_LEVEL
    server_host: str = DEFAULT_HOST
    server_port: int = DEFAULT_PORT

    def to_dict(self) -> dict[str, Any]:
        return {
            "markdown_preset": self.markdown_preset,
            "log_level": self.log_level,
            "server_host": self.server_host,
            "server_port": self.server_port,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NavigatorConfig:
        return cls(
            markdown_preset=data.get("markdown_preset", DEFAULT_MARKDOWN_PRESET),
            log_level=data.get("log_level", DEFAULT_LOG_LEVEL),
            server_host=data.get("server_host", DEFAULT_HOST),
            server_port=int(data.get("server_port", DEFAULT_PORT)),
        )

    @classmethod
    def from_env(cls) -> NavigatorConfig:
        """Read ``CELLNAV_*`` environment variables, falling back to defaults."""
        return cls(
            markdown_preset=os.environ.get("CELLNAV_MARKDOWN_PRESET", DEFAULT_MARKDOWN_PRESET),
            log_level=os.environ.get("CELLNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            server_host=os.environ.get("CELLNAV_HOST", DEFAULT_HOST),
            server_port=int(os.environ.get("CELLNAV_PORT", str(DEFAULT_PORT))),
        )
