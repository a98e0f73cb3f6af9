"""
MCP server exposing Stadia Maps geocoding, routing, isochrone, timezone and
static map tools.

Tool names and argument schemas are the public surface agents see; the
handlers delegate to ``stadia_mcp.tools`` and always answer with a tool
result, even when the upstream API fails.
"""

import logging
from typing import Optional

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.schemas import (
    DEFAULT_SIZE,
    DEFAULT_STYLE,
    BulkStructuredItems,
    BulkUnstructuredItems,
    Contours,
    Coordinates,
    Costing,
    CountryFilter,
    EncodedPolyline,
    FocusPoint,
    GeocodingQuery,
    IsochroneCosting,
    Language,
    LayerFilter,
    Latitude,
    Longitude,
    MapSize,
    MapStyle,
    MarkerColor,
    MarkerLabel,
    Markers,
    RouteLocations,
    StrokeColor,
    StrokeWidth,
    Units,
    Zoom,
)
from stadia_mcp.tools import bulk, geocoding, isochrone, routing, static_maps, tz


logger = logging.getLogger(__name__)

SERVER_NAME = "stadia-maps"


def create_server(client: Optional[StadiaClient] = None) -> FastMCP:
    """Build the FastMCP server with every tool bound to ``client``."""
    client = client or StadiaClient()
    server = FastMCP(SERVER_NAME)

    @server.tool(
        name="time-and-zone-info",
        description=(
            "Get the current time and zone info at any point (geographic coordinates). Output includes "
            "the standard UTC offset, special offset currently in effect (typically but not always "
            "Daylight Saving Time), IANA TZID, and the current timestamp in RFC 2822 format."
        ),
    )
    async def time_and_zone_info(lat: Latitude, lon: Longitude) -> ToolResult:
        return await tz.time_and_zone_info(client, lat, lon)

    @server.tool(
        name="geocode",
        description=(
            "Look up a street address, POI, or area. Returns the geographic coordinates, geographic "
            "context (city, state, country, etc.), and extra metadata. Use the layer filter to restrict "
            "the kind of place returned."
        ),
    )
    async def geocode(
        query: GeocodingQuery,
        country_filter: CountryFilter = None,
        lang: Language = "en",
        focus_point: FocusPoint = None,
        layer: LayerFilter = None,
    ) -> ToolResult:
        return await geocoding.geocode(client, query, country_filter, lang, focus_point, layer)

    @server.tool(
        name="address-geocode",
        description=(
            "Get the coordinates and geographic context (city, state, country, etc.) for a street "
            "address (do NOT use to look up a place by name; only by address)."
        ),
    )
    async def address_geocode(
        query: GeocodingQuery,
        country_filter: CountryFilter = None,
        lang: Language = "en",
        focus_point: FocusPoint = None,
    ) -> ToolResult:
        return await geocoding.address_geocode(client, query, country_filter, lang, focus_point)

    @server.tool(
        name="coarse-lookup",
        description=(
            "Get information about an area such as a neighborhood, city, state, or country. Returns "
            "location, geographic context (e.g. which state and country a city is located in), and "
            "metadata like wikipedia ID and population."
        ),
    )
    async def coarse_lookup(
        query: GeocodingQuery,
        country_filter: CountryFilter = None,
        lang: Language = "en",
    ) -> ToolResult:
        return await geocoding.coarse_lookup(client, query, country_filter, lang)

    @server.tool(
        name="place-search",
        description=(
            "Search for points of interest (POIs) by name. This works best when searching for just the "
            "place name (e.g. Starbucks). Use a focus point to focus the search to a local area. POI data "
            "always includes geographic coordinates and may include opening hours, website, social media, "
            "and other information."
        ),
    )
    async def place_search(
        query: GeocodingQuery,
        country_filter: CountryFilter = None,
        lang: Language = "en",
        focus_point: FocusPoint = None,
    ) -> ToolResult:
        return await geocoding.place_search(client, query, country_filter, lang, focus_point)

    bulk_description = (
        "Geocode several addresses or places in one request. Returns a JSON document with the top "
        "result for each successful item and request metadata."
    )

    @server.tool(name="bulk-geocode", description=bulk_description)
    async def bulk_geocode(items: BulkUnstructuredItems) -> ToolResult:
        return await bulk.bulk_unstructured_geocode(client, items)

    @server.tool(name="bulk-unstructured-geocode", description=bulk_description)
    async def bulk_unstructured_geocode(items: BulkUnstructuredItems) -> ToolResult:
        return await bulk.bulk_unstructured_geocode(client, items)

    @server.tool(
        name="bulk-structured-geocode",
        description=(
            "Geocode several addresses given as separate components (address, locality, region, "
            "postalcode, country). Each item needs at least one component; items without any are "
            "reported as invalid and skipped."
        ),
    )
    async def bulk_structured_geocode(items: BulkStructuredItems) -> ToolResult:
        return await bulk.bulk_structured_geocode(client, items)

    @server.tool(
        name="route-overview",
        description=(
            "Get high-level routing information between two or more locations. Includes travel time, "
            "distance, a bounding box, and an encoded polyline of the route."
        ),
    )
    async def route_overview(locations: RouteLocations, costing: Costing, units: Units) -> ToolResult:
        return await routing.route_overview(client, locations, costing, units)

    @server.tool(
        name="isochrone",
        description=(
            "Compute the areas reachable from a location within the given travel times or distances. "
            "Returns one GeoJSON geometry per contour."
        ),
    )
    async def isochrone_tool(
        location: Coordinates,
        costing: IsochroneCosting,
        contours: Contours,
    ) -> ToolResult:
        return await isochrone.isochrone(client, location, costing, contours)

    @server.tool(
        name="static-map",
        description=(
            "Render a PNG map image with an optional route line (encoded polyline, 6 digits of precision) "
            "and optional markers. The view is fitted to the line and markers."
        ),
    )
    async def static_map(
        style: MapStyle = DEFAULT_STYLE,
        size: MapSize = DEFAULT_SIZE,
        encoded_polyline: Optional[str] = None,
        stroke_color: StrokeColor = None,
        stroke_width: StrokeWidth = None,
        markers: Markers = None,
    ) -> ToolResult:
        return await static_maps.static_map(
            client, style, size, encoded_polyline, stroke_color, stroke_width, markers
        )

    @server.tool(
        name="static-map-centered",
        description="Render a PNG map image centered on a point at the given zoom level.",
    )
    async def static_map_centered(
        lat: Latitude,
        lon: Longitude,
        zoom: Zoom,
        style: MapStyle = DEFAULT_STYLE,
        size: MapSize = DEFAULT_SIZE,
    ) -> ToolResult:
        return await static_maps.static_map_centered(client, lat, lon, zoom, style, size)

    @server.tool(
        name="static-map-with-marker",
        description="Render a PNG map image centered on a point with a marker placed on it.",
    )
    async def static_map_with_marker(
        lat: Latitude,
        lon: Longitude,
        zoom: Zoom,
        style: MapStyle = DEFAULT_STYLE,
        size: MapSize = DEFAULT_SIZE,
        label: MarkerLabel = None,
        color: MarkerColor = None,
        marker_url: Optional[str] = None,
    ) -> ToolResult:
        return await static_maps.static_map_with_marker(
            client, lat, lon, zoom, style, size, label, color, marker_url
        )

    @server.tool(
        name="static-route-map",
        description="Render a PNG map image of a route given as an encoded polyline (6 digits of precision).",
    )
    async def static_route_map(
        encoded_polyline: EncodedPolyline,
        style: MapStyle = DEFAULT_STYLE,
        size: MapSize = DEFAULT_SIZE,
        stroke_color: StrokeColor = None,
        stroke_width: StrokeWidth = None,
        markers: Markers = None,
    ) -> ToolResult:
        return await static_maps.static_route_map(
            client, encoded_polyline, style, size, stroke_color, stroke_width, markers
        )

    logger.debug("Registered Stadia Maps tools on '%s'", SERVER_NAME)
    return server
