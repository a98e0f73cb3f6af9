from __future__ import annotations

from typing import Any, Dict, Sequence

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import compact_json, format_number, text_result
from stadia_mcp.schemas import Contour, Coordinates, IsochroneCostingModel


NO_ISOCHRONES = "No isochrone results found."
UNEXPECTED_RESPONSE = "Unexpected response format from isochrone API."

METRIC_UNITS = {"time": ("Time", "minutes"), "distance": ("Distance", "km")}


def _format_feature(feature: Dict[str, Any], index: int) -> str:
    properties = feature.get("properties") or {}
    contour = properties.get("contour")

    lines = [f"Contour {format_number(contour)}" if contour is not None else f"Feature {index + 1}"]
    metric = METRIC_UNITS.get(properties.get("metric"))
    if metric and contour is not None:
        label, unit = metric
        lines.append(f"{label}: {format_number(contour)} {unit}")
    lines.append(f"GeoJSON Geometry: {compact_json(feature.get('geometry'))}")
    return "\n".join(lines)


def format_isochrone_result(response: Any) -> ToolResult:
    if not isinstance(response, dict) or not isinstance(response.get("features"), list):
        return text_result(UNEXPECTED_RESPONSE)

    features = response["features"]
    if not features:
        return text_result(NO_ISOCHRONES)

    body = "\n---\n".join(_format_feature(f, i) for i, f in enumerate(features))
    return text_result(f"Isochrone Results:\n---\n{body}")


async def isochrone(
    client: StadiaClient,
    location: Coordinates,
    costing: IsochroneCostingModel,
    contours: Sequence[Contour],
) -> ToolResult:
    request = {
        "locations": [{"lat": location.lat, "lon": location.lon}],
        "costing": IsochroneCostingModel(costing).value,
        "contours": [c.model_dump(exclude_none=True) for c in contours],
    }

    async def _run() -> ToolResult:
        return format_isochrone_result(await client.isochrone(request))

    return await handle_tool_error(_run, "Isochrone calculation failed", log_errors=True)
