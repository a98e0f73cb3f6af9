from __future__ import annotations

from typing import Any, Dict, Sequence

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import json_result, text_result
from stadia_mcp.schemas import Coordinates, CostingModel, DistanceUnit


NO_ROUTES = "No routes found."
UNEXPECTED_RESPONSE = "Unexpected response format."


def format_travel_time(seconds: float) -> str:
    if seconds < 60:
        return "less than a minute"
    # Round half up.
    minutes = int(seconds / 60 + 0.5)
    return f"{minutes} minutes"


def _is_route_response(res: Any) -> bool:
    if not isinstance(res, dict) or not isinstance(res.get("trip"), dict):
        return False
    trip = res["trip"]
    return "status" in trip and isinstance(trip.get("summary"), dict) and isinstance(trip.get("legs"), list)


def format_route_result(res: Dict[str, Any], units: str) -> ToolResult:
    if not _is_route_response(res):
        return text_result(UNEXPECTED_RESPONSE)

    trip = res["trip"]
    if trip["status"] != 0:
        return text_result(NO_ROUTES)
    if not trip["legs"]:
        return text_result(UNEXPECTED_RESPONSE)

    summary = trip["summary"]
    overview = {
        "distance": summary.get("length"),
        "units": units,
        "time": format_travel_time(summary.get("time", 0)),
        "bbox_w_s_n_e": [
            summary.get("min_lon"),
            summary.get("min_lat"),
            summary.get("max_lon"),
            summary.get("max_lat"),
        ],
        "polyline6": trip["legs"][0].get("shape"),
    }
    return json_result(overview)


async def route_overview(
    client: StadiaClient,
    locations: Sequence[Coordinates],
    costing: CostingModel,
    units: DistanceUnit,
) -> ToolResult:
    units_value = DistanceUnit(units).value
    request: Dict[str, Any] = {
        "locations": [{"lat": loc.lat, "lon": loc.lon} for loc in locations],
        "costing": CostingModel(costing).value,
        "units": units_value,
    }

    async def _run() -> ToolResult:
        res = await client.route(request)
        return format_route_result(res, units_value)

    return await handle_tool_error(_run, "Route calculation failed", log_errors=True)

