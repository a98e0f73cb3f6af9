import pytest
from pydantic import TypeAdapter, ValidationError

from stadia_mcp.schemas import (
    BulkStructuredItem,
    BulkUnstructuredItems,
    Coordinates,
    MapSize,
    RouteLocations,
)


@pytest.mark.parametrize("lat, lon", [(-90, -180), (90, 180), (0, 0), (59.437, 24.7536)])
def test_coordinates_accept_valid_ranges(lat, lon):
    point = Coordinates(lat=lat, lon=lon)
    assert (point.lat, point.lon) == (lat, lon)


@pytest.mark.parametrize("lat, lon", [(-90.1, 0), (90.1, 0), (0, -180.1), (0, 180.1)])
def test_coordinates_reject_out_of_range(lat, lon):
    with pytest.raises(ValidationError):
        Coordinates(lat=lat, lon=lon)


def test_coordinates_are_immutable():
    point = Coordinates(lat=1, lon=2)
    with pytest.raises(ValidationError):
        point.lat = 3


def test_routes_need_two_locations():
    adapter = TypeAdapter(RouteLocations)
    with pytest.raises(ValidationError):
        adapter.validate_python([{"lat": 1, "lon": 2}])
    assert len(adapter.validate_python([{"lat": 1, "lon": 2}, {"lat": 3, "lon": 4}])) == 2


def test_country_filter_requires_alpha3_codes():
    with pytest.raises(ValidationError):
        BulkStructuredItem(locality="Tallinn", country_filter=["EE"])
    assert BulkStructuredItem(locality="Tallinn", country_filter=["EST"]).country_filter == ["EST"]


def test_bulk_lists_need_at_least_one_item():
    with pytest.raises(ValidationError):
        TypeAdapter(BulkUnstructuredItems).validate_python([])


def test_structured_item_field_detection():
    assert BulkStructuredItem(postalcode="10412").has_structured_fields()
    assert not BulkStructuredItem().has_structured_fields()
    assert not BulkStructuredItem(address="").has_structured_fields()


@pytest.mark.parametrize("size", ["600x400", "600x400@2x", "1x1"])
def test_map_size_accepts_dimensions(size):
    assert TypeAdapter(MapSize).validate_python(size) == size


@pytest.mark.parametrize("size", ["600", "600x400@3x", "big"])
def test_map_size_rejects_garbage(size):
    with pytest.raises(ValidationError):
        TypeAdapter(MapSize).validate_python(size)
