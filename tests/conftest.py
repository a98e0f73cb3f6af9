import sys
from pathlib import Path

import pytest

# Keep imports predictable in local runs
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from helpers import TEST_CONFIG, RecordingTransport
from stadia_mcp.client import StadiaClient


@pytest.fixture
def make_client():
    """Build a StadiaClient whose HTTP traffic is answered by ``handler``."""

    def _make(handler, config=TEST_CONFIG):
        transport = RecordingTransport(handler)
        return StadiaClient(config, transport=transport), transport

    return _make
