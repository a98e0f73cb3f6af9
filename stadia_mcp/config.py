"""
Environment-driven configuration for the Stadia Maps MCP server.

Values are read once from the process environment; the resulting
``StadiaConfig`` is passed explicitly to the API client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_API_BASE_URL = "https://api.stadiamaps.com"
DEFAULT_TILES_BASE_URL = "https://tiles.stadiamaps.com"
DEFAULT_TIMEOUT_S = 30.0

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class StadiaConfig:
    api_key: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL
    tiles_base_url: str = DEFAULT_TILES_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls) -> "StadiaConfig":
        # An empty key is allowed here; calls fail later with a readable error.
        return cls(
            api_key=os.environ.get("API_KEY", ""),
            api_base_url=os.environ.get("STADIA_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            tiles_base_url=os.environ.get("STADIA_TILES_BASE_URL", DEFAULT_TILES_BASE_URL).rstrip("/"),
            timeout_s=float(os.environ.get("STADIA_TIMEOUT_S", str(DEFAULT_TIMEOUT_S))),
        )
