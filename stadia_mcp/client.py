"""
Thin async binding to the Stadia Maps HTTP APIs.

Covers the endpoints the MCP tools need: geocoding search (single and bulk),
routing, isochrones, timezone lookup and static map rendering. Responses are
returned as decoded JSON (or raw bytes for images); failures are raised as
typed exceptions from ``stadia_mcp.errors``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from opentelemetry.trace import SpanKind

from stadia_mcp.config import StadiaConfig
from stadia_mcp.errors import ConfigurationError, UpstreamHTTPError, UpstreamResponseError
from stadia_mcp.tracing import get_tracer


logger = logging.getLogger(__name__)

USER_AGENT = "stadia-maps-mcp-python/0.1.0"


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class StadiaClient:
    """Issue authenticated requests against the Stadia Maps API family."""

    def __init__(
        self,
        config: Optional[StadiaConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            config: API key and base URLs; read from the environment if omitted.
            transport: optional httpx transport, e.g. ``httpx.MockTransport``
                in tests.
        """
        self.config = config or StadiaConfig.from_env()
        self._transport = transport
        self._tracer = get_tracer("stadia-maps-mcp")

    def _auth_params(self) -> Dict[str, str]:
        if not self.config.api_key:
            raise ConfigurationError(
                "API_KEY environment variable is not set. "
                "Create a key at https://client.stadiamaps.com/"
            )
        return {"api_key": self.config.api_key}

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout_s,
            transport=self._transport,
            headers={"User-Agent": USER_AGENT},
        )

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> httpx.Response:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        query.update(self._auth_params())

        with self._tracer.start_as_current_span(
            f"stadia.{operation}",
            kind=SpanKind.CLIENT,
        ) as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", url)
            logger.debug("%s %s params=%s body=%s", method, url, list(query), json_body)

            async with self._new_client() as client:
                response = await client.request(method, url, params=query, json=json_body)

            span.set_attribute("http.status_code", response.status_code)
            return response

    async def _request_json(self, operation: str, method: str, url: str, **kwargs: Any) -> Any:
        response = await self._request(operation, method, url, **kwargs)
        if not response.is_success:
            raise UpstreamHTTPError(
                response.status_code,
                response.reason_phrase,
                body=_decode_body(response),
            )
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamResponseError(f"Invalid JSON from {operation}: {exc}") from exc

    async def search(
        self,
        text: str,
        boundary_country: Optional[List[str]] = None,
        lang: Optional[str] = None,
        layers: Optional[List[str]] = None,
        focus_point_lat: Optional[float] = None,
        focus_point_lon: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Forward geocoding search (v2)."""
        params = {
            "text": text,
            "boundary.country": ",".join(boundary_country) if boundary_country else None,
            "lang": lang,
            "layers": ",".join(layers) if layers else None,
            "focus.point.lat": focus_point_lat,
            "focus.point.lon": focus_point_lon,
        }
        return await self._request_json(
            "search",
            "GET",
            f"{self.config.api_base_url}/geocoding/v2/search",
            params=params,
        )

    async def search_bulk(self, requests: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Run several search requests in one batched call."""
        data = await self._request_json(
            "search_bulk",
            "POST",
            f"{self.config.api_base_url}/geocoding/v1/search/bulk",
            json_body=requests,
        )
        if not isinstance(data, list):
            raise UpstreamResponseError("Bulk search response is not a list")
        return data

    async def route(self, request: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request_json(
            "route",
            "POST",
            f"{self.config.api_base_url}/route/v1",
            json_body=request,
        )

    async def isochrone(self, request: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request_json(
            "isochrone",
            "POST",
            f"{self.config.api_base_url}/isochrone/v1",
            json_body=request,
        )

    async def tz_lookup(self, lat: float, lon: float) -> Dict[str, Any]:
        return await self._request_json(
            "tz_lookup",
            "GET",
            f"{self.config.api_base_url}/tz/lookup/v1",
            params={"lat": lat, "lng": lon},
        )

    async def static_map(self, style: str, payload: Dict[str, Any]) -> bytes:
        """Render a static map and return the raw PNG bytes."""
        response = await self._request(
            "static_map",
            "POST",
            f"{self.config.tiles_base_url}/static_cacheable/{style}",
            json_body=payload,
        )
        if not response.is_success:
            raise UpstreamHTTPError(
                response.status_code,
                response.reason_phrase,
                body=_decode_body(response),
                message=f"HTTP code: {response.status_code}.\nPayload: {json.dumps(payload)}",
            )
        return response.content
