"""
Forward geocoding tools: generic search plus address, coarse and POI variants.

All variants hit the same v2 search endpoint and differ only in the layer
filter they apply.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import compact_json, text_result
from stadia_mcp.schemas import Coordinates


NO_RESULTS = "No results found."
NO_BBOX = "N/A (point geometry)"


def _format_bbox(bbox: Optional[List[float]]) -> str:
    # GeoJSON bbox order is [west, south, east, north].
    if not bbox:
        return NO_BBOX
    return "[" + ", ".join(str(v) for v in bbox[:4]) + "]"


def _format_feature(feature: Dict[str, Any]) -> str:
    properties = feature.get("properties") or {}
    location = properties.get("formatted_address_line") or properties.get("coarse_location")

    return "\n".join(
        [
            f"Name: {properties.get('name')}",
            f"Layer: {properties.get('layer')}",
            f"GeoJSON Geometry: {compact_json(feature.get('geometry'))}",
            f"Location: {location or 'unknown'}",
            f"Bounding Box (W, S, E, N): {_format_bbox(feature.get('bbox'))}",
            f"Additional information: {compact_json(properties.get('addendum'))}",
        ]
    )


def format_geocoding_result(envelope: Dict[str, Any]) -> ToolResult:
    features = envelope.get("features") or []
    if not features:
        return text_result(NO_RESULTS)

    body = "\n---\n".join(_format_feature(f) for f in features)
    return text_result(f"Results:\n---\n{body}")


async def geocode(
    client: StadiaClient,
    query: str,
    country_filter: Optional[List[str]] = None,
    lang: Optional[str] = None,
    focus_point: Optional[Coordinates] = None,
    layer: Optional[str] = None,
) -> ToolResult:
    async def _run() -> ToolResult:
        envelope = await client.search(
            text=query,
            boundary_country=country_filter,
            lang=lang,
            layers=[layer] if layer else None,
            focus_point_lat=focus_point.lat if focus_point else None,
            focus_point_lon=focus_point.lon if focus_point else None,
        )
        return format_geocoding_result(envelope)

    return await handle_tool_error(_run, "Geocoding failed", log_errors=True)


async def address_geocode(
    client: StadiaClient,
    query: str,
    country_filter: Optional[List[str]] = None,
    lang: Optional[str] = None,
    focus_point: Optional[Coordinates] = None,
) -> ToolResult:
    return await geocode(client, query, country_filter, lang, focus_point, layer="address")


async def coarse_lookup(
    client: StadiaClient,
    query: str,
    country_filter: Optional[List[str]] = None,
    lang: Optional[str] = None,
) -> ToolResult:
    return await geocode(client, query, country_filter, lang, layer="coarse")


async def place_search(
    client: StadiaClient,
    query: str,
    country_filter: Optional[List[str]] = None,
    lang: Optional[str] = None,
    focus_point: Optional[Coordinates] = None,
) -> ToolResult:
    return await geocode(client, query, country_filter, lang, focus_point, layer="poi")
