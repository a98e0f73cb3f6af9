import asyncio

from fixtures import TIMEZONE
from helpers import json_handler, result_text
from stadia_mcp.tools import tz


def test_time_and_zone_info_mirrors_upstream_values(make_client):
    client, transport = make_client(json_handler(TIMEZONE))

    text = result_text(asyncio.run(tz.time_and_zone_info(client, 37.7749, -122.4194)))

    assert text.splitlines() == [
        "TZID: America/Los_Angeles",
        "Standard UTC offset: -28800",
        "Special offset (e.g. DST): 3600",
        "Current time (RFC 2822): Mon, 10 Jun 2024 09:30:00 -0700",
    ]
    params = transport.requests[0].url.params
    assert transport.requests[0].url.path == "/tz/lookup/v1"
    assert params["lat"] == "37.7749"
    assert params["lng"] == "-122.4194"


def test_incomplete_payload_is_normalized(make_client):
    client, _ = make_client(json_handler({"tz_id": "Europe/Tallinn"}))

    text = result_text(asyncio.run(tz.time_and_zone_info(client, 59.437, 24.7536)))

    assert text.startswith("Timezone lookup failed: ")


def test_upstream_errors_are_normalized(make_client):
    client, _ = make_client(json_handler({"message": "bad"}, status_code=500))

    text = result_text(asyncio.run(tz.time_and_zone_info(client, 0, 0)))

    assert text == "Timezone lookup failed: HTTP 500: Internal Server Error"
