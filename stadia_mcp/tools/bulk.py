"""
Bulk geocoding: validate items, send one batched request, merge the outcome.

Items that fail validation never reach the network; they are reported next to
the upstream results in the ``metadata.invalidItems`` list.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from fastmcp.tools.tool import ToolResult

from stadia_mcp.client import StadiaClient
from stadia_mcp.errors import handle_tool_error
from stadia_mcp.results import text_result
from stadia_mcp.schemas import STRUCTURED_FIELDS, BulkStructuredItem, BulkUnstructuredItem


SEARCH_ENDPOINT = "/v1/search"
STRUCTURED_SEARCH_ENDPOINT = "/v1/search/structured"

# More than one result per item is requested so duplicates can be dropped
# later; only the top result is reported.
RESULTS_PER_ITEM = 5

NO_ITEMS = "No geocoding items provided."
MISSING_STRUCTURED_FIELD = "At least one structured field is required for structured geocoding"

BulkItem = Union[BulkUnstructuredItem, BulkStructuredItem]
InvalidItem = Tuple[BulkItem, str]


def _item_payload(item: BulkItem) -> Dict[str, Any]:
    return item.model_dump(mode="json", exclude_none=True)


def _common_query(item: BulkItem) -> Dict[str, Any]:
    query: Dict[str, Any] = {"size": RESULTS_PER_ITEM}
    if item.focus_point is not None:
        query["focus.point.lat"] = item.focus_point.lat
        query["focus.point.lon"] = item.focus_point.lon
    if item.country_filter:
        query["boundary.country"] = list(item.country_filter)
    if item.lang:
        query["lang"] = item.lang
    return query


def unstructured_request(item: BulkUnstructuredItem) -> Dict[str, Any]:
    query = {"text": item.query, **_common_query(item)}
    return {"endpoint": SEARCH_ENDPOINT, "query": query}


def structured_request(item: BulkStructuredItem) -> Dict[str, Any]:
    query = {name: getattr(item, name) for name in STRUCTURED_FIELDS if getattr(item, name)}
    query.update(_common_query(item))
    return {"endpoint": STRUCTURED_SEARCH_ENDPOINT, "query": query}


def partition_structured(
    items: Sequence[BulkStructuredItem],
) -> Tuple[List[BulkStructuredItem], List[InvalidItem]]:
    valid: List[BulkStructuredItem] = []
    invalid: List[InvalidItem] = []
    for item in items:
        if item.has_structured_fields():
            valid.append(item)
        else:
            invalid.append((item, MISSING_STRUCTURED_FIELD))
    return valid, invalid


def _is_successful(response: Dict[str, Any]) -> bool:
    features = (response.get("response") or {}).get("features") or []
    return response.get("status") == 200 and len(features) > 0


def _top_feature(response: Dict[str, Any]) -> Dict[str, Any]:
    feature = response["response"]["features"][0]
    properties = feature.get("properties") or {}
    trimmed = {
        "label": properties.get("label"),
        "geometry": feature.get("geometry"),
        "matchType": properties.get("match_type"),
        "addendum": properties.get("addendum"),
    }
    if feature.get("bbox") is not None:
        trimmed["bbox"] = feature["bbox"]
    return trimmed


def aggregate_bulk_responses(
    responses: Sequence[Dict[str, Any]],
    invalid_items: Sequence[InvalidItem] = (),
    dispatched: Optional[int] = None,
) -> Dict[str, Any]:
    """Merge per-item upstream responses and pre-rejected items into one report.

    ``dispatched`` is the number of entries sent upstream; it defaults to the
    number of responses.
    """
    results = [_top_feature(r) for r in responses if _is_successful(r)]
    failed = sum(1 for r in responses if not _is_successful(r))
    if dispatched is None:
        dispatched = len(responses)

    metadata: Dict[str, Any] = {
        "totalRequests": dispatched + len(invalid_items),
        "successfulRequests": len(results),
        "failedRequests": failed,
    }
    if invalid_items:
        metadata["invalidItems"] = [
            {"item": _item_payload(item), "error": error} for item, error in invalid_items
        ]

    return {"results": results, "metadata": metadata}


def _all_invalid(invalid_items: Sequence[InvalidItem]) -> ToolResult:
    details = ", ".join(f"{json.dumps(_item_payload(item))}: {error}" for item, error in invalid_items)
    return text_result(f"All geocoding items are invalid: {details}")


async def _dispatch(
    client: StadiaClient,
    requests: List[Dict[str, Any]],
    invalid_items: Sequence[InvalidItem],
    context: str,
) -> ToolResult:
    async def _run() -> ToolResult:
        responses = await client.search_bulk(requests)
        return text_result(json.dumps(aggregate_bulk_responses(responses, invalid_items, len(requests))))

    return await handle_tool_error(_run, context, log_errors=True)


async def bulk_unstructured_geocode(
    client: StadiaClient,
    items: Sequence[BulkUnstructuredItem],
) -> ToolResult:
    if not items:
        return text_result(NO_ITEMS)

    # A query string is all an unstructured item needs, so nothing is rejected.
    requests = [unstructured_request(item) for item in items]
    return await _dispatch(client, requests, (), "Error performing bulk unstructured geocoding")


async def bulk_structured_geocode(
    client: StadiaClient,
    items: Sequence[BulkStructuredItem],
) -> ToolResult:
    if not items:
        return text_result(NO_ITEMS)

    valid, invalid = partition_structured(items)
    if not valid:
        return _all_invalid(invalid)

    requests = [structured_request(item) for item in valid]
    return await _dispatch(client, requests, invalid, "Error performing bulk structured geocoding")
