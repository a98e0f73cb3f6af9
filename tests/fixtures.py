"""Canned Stadia Maps API responses used by the tests."""

import base64


GEOCODING_SEARCH = {
    "geocoding": {
        "attribution": "https://stadiamaps.com/attribution/",
        "query": {"size": 1, "text": "Telliskivi 60a/3"},
    },
    "type": "FeatureCollection",
    "bbox": [24.729598, 59.439934, 24.729598, 59.439934],
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [24.729598, 59.439934]},
            "properties": {
                "gid": "openstreetmap:address:way/884123372",
                "layer": "address",
                "precision": "centroid",
                "confidence": 1,
                "name": "Telliskivi 60a/3",
                "formatted_address_line": "Telliskivi 60a/3, 10412 Tallinn, Estonia",
                "coarse_location": "Tallinn, Harju, Estonia",
                "match_type": "match",
                "addendum": {"osm": {"website": "https://telliskivi.eu"}},
            },
        }
    ],
}

GEOCODING_AREA = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "bbox": [24.55017, 59.351967, 24.926222, 59.59128],
            "geometry": {"type": "Point", "coordinates": [24.7536, 59.437]},
            "properties": {
                "name": "Tallinn",
                "layer": "locality",
                "coarse_location": "Harju, Estonia",
            },
        }
    ],
}

GEOCODING_EMPTY = {"type": "FeatureCollection", "features": []}


def _bulk_feature(label, coordinates, bbox=None):
    feature = {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": coordinates},
        "properties": {"label": label, "layer": "address", "match_type": "exact"},
    }
    if bbox is not None:
        feature["bbox"] = bbox
    return feature


GEOCODING_BULK = [
    {
        "status": 200,
        "response": {
            "type": "FeatureCollection",
            "features": [
                _bulk_feature("Telliskivi 60a/3, Tallinn, Harju, Estonia", [24.729598, 59.439934]),
                _bulk_feature("Telliskivi 60a, Tallinn, Harju, Estonia", [24.7295, 59.4398]),
            ],
        },
    },
    {
        "status": 200,
        "response": {
            "type": "FeatureCollection",
            "features": [
                _bulk_feature(
                    "101 North Main Street, Greenville, SC, USA",
                    [-82.399866, 34.852043],
                    bbox=[-82.4, 34.85, -82.39, 34.86],
                ),
            ],
        },
    },
]

BULK_NO_MATCH = {"status": 200, "response": {"type": "FeatureCollection", "features": []}}
BULK_SERVER_ERROR = {"status": 500, "msg": "Internal error"}

ROUTE = {
    "trip": {
        "locations": [
            {"type": "break", "lat": 60.534715, "lon": -149.543469, "original_index": 0},
            {"type": "break", "lat": 60.53499, "lon": -149.54858, "original_index": 1},
        ],
        "legs": [
            {
                "summary": {"time": 11.487, "length": 0.176},
                "shape": "wzvmrBxalf|GcCrX}A|Nu@jI}@pMkBtZ{@x^_Afj@Inn@`@veB",
            }
        ],
        "summary": {
            "has_time_restrictions": False,
            "has_toll": False,
            "has_highway": False,
            "has_ferry": False,
            "min_lat": 60.534715,
            "min_lon": -149.54858,
            "max_lat": 60.535008,
            "max_lon": -149.543469,
            "time": 11.487,
            "length": 0.176,
            "cost": 56.002,
        },
        "status_message": "Found route between points",
        "status": 0,
        "units": "miles",
        "language": "en-US",
    }
}

ROUTE_ERROR = {"error_code": 171, "error": "No suitable edges near location", "status_code": 400, "status": "Bad Request"}

ISOCHRONE_TIME = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[-122.42, 37.77], [-122.41, 37.78], [-122.42, 37.77]]]},
            "properties": {"contour": 15, "metric": "time", "color": "#ff0000"},
        },
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[-122.43, 37.76], [-122.40, 37.79], [-122.43, 37.76]]]},
            "properties": {"contour": 30.0, "metric": "time", "color": "#00ff00"},
        },
    ],
}

ISOCHRONE_DISTANCE = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[-122.42, 37.77], [-122.41, 37.78], [-122.42, 37.77]]]},
            "properties": {"contour": 5, "metric": "distance"},
        }
    ],
}

ISOCHRONE_EMPTY = {"type": "FeatureCollection", "features": []}

TIMEZONE = {
    "tz_id": "America/Los_Angeles",
    "base_utc_offset": -28800,
    "dst_offset": 3600,
    "local_rfc_2822_timestamp": "Mon, 10 Jun 2024 09:30:00 -0700",
}

PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
PNG_BYTES = base64.b64decode(PNG_BASE64)
