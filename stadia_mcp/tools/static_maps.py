"""
Static map rendering tools.

Each variant builds a JSON body for the cacheable static maps endpoint and
returns the rendered PNG as base64 image content.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import image_result
from stadia_mcp.schemas import DEFAULT_SIZE, DEFAULT_STYLE, Marker


def build_line(
    encoded_polyline: str,
    stroke_color: Optional[str] = None,
    stroke_width: Optional[float] = None,
) -> Dict[str, Any]:
    line: Dict[str, Any] = {"shape": encoded_polyline}
    if stroke_color:
        line["stroke_color"] = stroke_color
    if stroke_width:
        line["stroke_width"] = stroke_width
    return line


def build_marker(marker: Marker) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"lat": marker.lat, "lon": marker.lon}
    if marker.label:
        payload["label"] = marker.label
    if marker.color:
        payload["color"] = marker.color
    if marker.marker_url:
        payload["style"] = f"custom:{marker.marker_url}"
    return payload


def build_payload(
    size: str = DEFAULT_SIZE,
    center: Optional[Sequence[float]] = None,
    zoom: Optional[float] = None,
    encoded_polyline: Optional[str] = None,
    stroke_color: Optional[str] = None,
    stroke_width: Optional[float] = None,
    markers: Optional[Sequence[Marker]] = None,
) -> Dict[str, Any]:
    """
    Assemble the static map request body.

    ``center`` is a ``(lat, lon)`` pair; when omitted the renderer fits the
    view to the line and markers.
    """
    payload: Dict[str, Any] = {"size": size, "lines": []}
    if center is not None:
        payload["center"] = f"{center[0]},{center[1]}"
    if zoom is not None:
        payload["zoom"] = int(zoom) if float(zoom).is_integer() else zoom
    if encoded_polyline:
        payload["lines"].append(build_line(encoded_polyline, stroke_color, stroke_width))
    if markers:
        payload["markers"] = [build_marker(m) for m in markers]
    return payload


async def render_static_map(
    client: StadiaClient,
    payload: Dict[str, Any],
    style: str = DEFAULT_STYLE,
) -> ToolResult:
    async def _run() -> ToolResult:
        return image_result(await client.static_map(style, payload))

    return await handle_tool_error(_run, "Failed to generate static map", log_errors=True)


async def static_map(
    client: StadiaClient,
    style: str = DEFAULT_STYLE,
    size: str = DEFAULT_SIZE,
    encoded_polyline: Optional[str] = None,
    stroke_color: Optional[str] = None,
    stroke_width: Optional[float] = None,
    markers: Optional[Sequence[Marker]] = None,
) -> ToolResult:
    payload = build_payload(
        size=size,
        encoded_polyline=encoded_polyline,
        stroke_color=stroke_color,
        stroke_width=stroke_width,
        markers=markers,
    )
    return await render_static_map(client, payload, style)


async def static_map_centered(
    client: StadiaClient,
    lat: float,
    lon: float,
    zoom: float,
    style: str = DEFAULT_STYLE,
    size: str = DEFAULT_SIZE,
) -> ToolResult:
    payload = build_payload(size=size, center=(lat, lon), zoom=zoom)
    return await render_static_map(client, payload, style)


async def static_map_with_marker(
    client: StadiaClient,
    lat: float,
    lon: float,
    zoom: float,
    style: str = DEFAULT_STYLE,
    size: str = DEFAULT_SIZE,
    label: Optional[str] = None,
    color: Optional[str] = None,
    marker_url: Optional[str] = None,
) -> ToolResult:
    marker = Marker(lat=lat, lon=lon, label=label, color=color, marker_url=marker_url)
    payload = build_payload(size=size, center=(lat, lon), zoom=zoom, markers=[marker])
    return await render_static_map(client, payload, style)


async def static_route_map(
    client: StadiaClient,
    encoded_polyline: str,
    style: str = DEFAULT_STYLE,
    size: str = DEFAULT_SIZE,
    stroke_color: Optional[str] = None,
    stroke_width: Optional[float] = None,
    markers: Optional[Sequence[Marker]] = None,
) -> ToolResult:
    return await static_map(
        client,
        style=style,
        size=size,
        encoded_polyline=encoded_polyline,
        stroke_color=stroke_color,
        stroke_width=stroke_width,
        markers=markers,
    )
