import json
from typing import Any, Callable, List

import httpx

from stadia_mcp.config import StadiaConfig


TEST_CONFIG = StadiaConfig(
    api_key="test-key",
    api_base_url="https://api.stadiamaps.com",
    tiles_base_url="https://tiles.stadiamaps.com",
    timeout_s=5.0,
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def json_bodies(self) -> List[Any]:
        return [json.loads(r.content) for r in self.requests]


def json_handler(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def result_text(result) -> str:
    return result.content[0].text
