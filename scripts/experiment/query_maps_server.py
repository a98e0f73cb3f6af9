"""
Small experiment script to exercise the Stadia Maps MCP server over stdio.

Usage:
    API_KEY=... python scripts/experiment/query_maps_server.py
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so we can import stadia_mcp
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from stadia_mcp.mcp_client import MCPClientManager


async def main() -> None:
    client = MCPClientManager()
    await client.connect()

    try:
        print("=== Available MCP tools ===")
        print(client.list_tools())

        print("\n=== time-and-zone-info (Tallinn) ===")
        print(await client.call_tool("time-and-zone-info", {"lat": 59.437, "lon": 24.7536}))

        print("\n=== address-geocode ===")
        print(
            await client.call_tool(
                "address-geocode",
                {"query": "Telliskivi 60a/3, Tallinn", "country_filter": ["EST"], "lang": "en"},
            )
        )

        print("\n=== route-overview ===")
        print(
            await client.call_tool(
                "route-overview",
                {
                    "locations": [
                        {"lat": 59.4399, "lon": 24.7296},
                        {"lat": 59.4370, "lon": 24.7536},
                    ],
                    "costing": "pedestrian",
                    "units": "km",
                },
            )
        )
    finally:
        await client.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    asyncio.run(main())
