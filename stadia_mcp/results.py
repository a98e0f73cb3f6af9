"""Helpers for building the text/image results returned by every tool."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

from fastmcp.tools.tool import ToolResult
from mcp.types import ImageContent, TextContent


PNG_MIME_TYPE = "image/png"


def text_result(text: str, structured: Optional[Dict[str, Any]] = None) -> ToolResult:
    return ToolResult(
        content=[TextContent(type="text", text=text)],
        structured_content=structured,
    )


def json_result(payload: Dict[str, Any]) -> ToolResult:
    """Return ``payload`` both as structured content and as its JSON text."""
    return text_result(json.dumps(payload), structured=payload)


def image_result(data: bytes, mime_type: str = PNG_MIME_TYPE) -> ToolResult:
    encoded = base64.b64encode(data).decode("ascii")
    return ToolResult(content=[ImageContent(type="image", data=encoded, mimeType=mime_type)])


def format_number(value: Any) -> str:
    """Render integral floats without a trailing ``.0`` (15.0 -> "15")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
