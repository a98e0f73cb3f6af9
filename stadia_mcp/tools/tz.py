from __future__ import annotations

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import text_result


async def time_and_zone_info(client: StadiaClient, lat: float, lon: float) -> ToolResult:
    """Current time and zone offsets at a point, as reported upstream."""

    async def _run() -> ToolResult:
        res = await client.tz_lookup(lat, lon)
        return text_result(
            "\n".join(
                [
                    f"TZID: {res['tz_id']}",
                    f"Standard UTC offset: {res['base_utc_offset']}",
                    f"Special offset (e.g. DST): {res['dst_offset']}",
                    f"Current time (RFC 2822): {res['local_rfc_2822_timestamp']}",
                ]
            )
        )

    return await handle_tool_error(_run, "Timezone lookup failed", log_errors=True)
