"""
Error types and the failure-containment boundary for tool handlers.

Every tool handler runs its upstream work through ``handle_tool_error`` so a
failure of any shape comes back to the agent as a text result instead of
escaping to the MCP transport.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

from fastmcp.tools.tool import ToolResult

from stadia_mcp.results import text_result


logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class StadiaMapsError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(StadiaMapsError):
    """Required configuration (typically the API key) is missing."""


class UpstreamHTTPError(StadiaMapsError):
    """The Stadia Maps API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        body: Any = None,
        message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message or f"HTTP {status_code}: {reason}")


class UpstreamResponseError(StadiaMapsError):
    """The Stadia Maps API answered with a payload we cannot decode."""


def _field(error: Any, name: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(name)
    return getattr(error, name, None)


def _has_field(error: Any, name: str) -> bool:
    if isinstance(error, Mapping):
        return name in error
    return hasattr(error, name)


def describe_error(error: Any) -> str:
    """Extract a human-readable message from a failure of unknown shape."""
    if isinstance(error, BaseException):
        # Exceptions raised with a structured payload are described by it.
        if len(error.args) == 1 and not isinstance(error.args[0], str):
            return describe_error(error.args[0])
        return str(error) or type(error).__name__

    if isinstance(error, str):
        return error

    if error is not None:
        if _has_field(error, "status") and _has_field(error, "statusText"):
            return f"HTTP {_field(error, 'status')}: {_field(error, 'statusText')}"
        if _has_field(error, "status_code") and _has_field(error, "reason_phrase"):
            return f"HTTP {_field(error, 'status_code')}: {_field(error, 'reason_phrase')}"

        message = _field(error, "message")
        if isinstance(message, str):
            return message

        nested = _field(error, "error")
        if isinstance(nested, str):
            return nested

    try:
        return json.dumps(error)
    except (TypeError, ValueError):
        return UNKNOWN_ERROR


async def handle_tool_error(
    operation: Callable[[], Awaitable[ToolResult]],
    context: str,
    *,
    log_errors: bool = False,
    format_error: Callable[[Any], str] = describe_error,
) -> ToolResult:
    """
    Await ``operation`` and return its result, or a text result on failure.

    Args:
        operation: zero-argument coroutine factory doing the actual work.
        context: prefix for the error text (e.g. "Geocoding failed").
        log_errors: log the raw exception with its traceback.
        format_error: message extractor, ``describe_error`` by default.
    """
    try:
        return await operation()
    except Exception as exc:
        if log_errors:
            logger.exception("%s", context)
        return text_result(f"{context}: {format_error(exc)}")
