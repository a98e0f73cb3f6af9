"""
Input schemas for the MCP tools.

These pydantic types are used directly in tool signatures, so FastMCP both
publishes them as JSON schema and rejects malformed input before a handler
runs.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


Latitude = Annotated[float, Field(ge=-90, le=90, description="The latitude of the point.")]
Longitude = Annotated[float, Field(ge=-180, le=180, description="The longitude of the point.")]


class Coordinates(BaseModel):
    """A geographic coordinate pair."""

    model_config = ConfigDict(frozen=True)

    lat: Latitude
    lon: Longitude


CountryCode = Annotated[
    str,
    Field(
        min_length=3,
        max_length=3,
        description="An ISO 3166-1 alpha-3 country code to limit the search to (e.g. USA, DEU, EST).",
    ),
]

CountryFilter = Annotated[
    Optional[List[CountryCode]],
    Field(description="ISO 3166-1 alpha-3 country codes to limit the search to."),
]

Language = Annotated[
    str,
    Field(
        min_length=2,
        description="A BCP-47 language tag (may just be the language) to localize the results in (e.g. en, de, et).",
    ),
]

FocusPoint = Annotated[
    Optional[Coordinates],
    Field(description="Geographic coordinates to focus the search around. Provide this whenever possible."),
]

GeocodingQuery = Annotated[
    str,
    Field(
        min_length=1,
        description=(
            "The address or place name to search for. Use local formatting and order when possible. "
            "When searching for a POI name (e.g. 'Starbucks'), you will get better results with a focus "
            "point and filters. Avoid spelling out precise locations (e.g. 'Starbucks, Downtown Greenville'); "
            "this is acceptable for large areas though (e.g. 'Paris, France' is OK, as is 'Louvre, Paris')."
        ),
    ),
]

Layer = Literal["address", "poi", "coarse", "country", "region", "locality"]

LayerFilter = Annotated[
    Optional[Layer],
    Field(
        description=(
            "The layer to search in. Coarse searches for areas such as neighborhoods, cities, states, "
            "and countries. Address searches for street addresses. Localities are what we would "
            "colloquially refer to as a 'city', town, or village. Region is for first-level subdivisions "
            "within countries like states or provinces. POI searches for points of interest including "
            "restaurants, parks, shops, and museums. Defaults to all layers if not specified."
        ),
    ),
]


class GeocodingFilters(BaseModel):
    country_filter: CountryFilter = None
    lang: Language = "en"
    focus_point: FocusPoint = None


class BulkUnstructuredItem(GeocodingFilters):
    query: GeocodingQuery


STRUCTURED_FIELDS = ("address", "locality", "region", "postalcode", "country")


class BulkStructuredItem(GeocodingFilters):
    address: Optional[str] = Field(None, description="Street address, including the house number.")
    locality: Optional[str] = Field(None, description="City, town or village.")
    region: Optional[str] = Field(None, description="First-level subdivision such as a state or province.")
    postalcode: Optional[str] = Field(None, description="Postal code.")
    country: Optional[str] = Field(None, description="Country name or code.")

    def has_structured_fields(self) -> bool:
        return any(getattr(self, name) for name in STRUCTURED_FIELDS)


BulkUnstructuredItems = Annotated[
    List[BulkUnstructuredItem],
    Field(min_length=1, description="The list of places or addresses to geocode."),
]

BulkStructuredItems = Annotated[
    List[BulkStructuredItem],
    Field(min_length=1, description="The list of structured addresses to geocode."),
]


# Routing


class CostingModel(str, Enum):
    AUTO = "auto"
    BUS = "bus"
    TAXI = "taxi"
    TRUCK = "truck"
    BICYCLE = "bicycle"
    BIKESHARE = "bikeshare"
    MOTOR_SCOOTER = "motor_scooter"
    MOTORCYCLE = "motorcycle"
    PEDESTRIAN = "pedestrian"
    LOW_SPEED_VEHICLE = "low_speed_vehicle"


class IsochroneCostingModel(str, Enum):
    AUTO = "auto"
    BICYCLE = "bicycle"
    PEDESTRIAN = "pedestrian"
    TRUCK = "truck"
    BUS = "bus"
    TAXI = "taxi"
    MOTOR_SCOOTER = "motor_scooter"
    MOTORCYCLE = "motorcycle"
    LOW_SPEED_VEHICLE = "low_speed_vehicle"


class DistanceUnit(str, Enum):
    KM = "km"
    MI = "mi"


Costing = Annotated[
    CostingModel,
    Field(description="The method of travel to use when routing (auto = automobile)."),
]

IsochroneCosting = Annotated[
    IsochroneCostingModel,
    Field(description="The method of travel to use for isochrone calculation (auto = automobile)."),
]

Units = Annotated[DistanceUnit, Field(description="The unit to report distances in.")]

RouteLocations = Annotated[
    List[Coordinates],
    Field(min_length=2, description="The places to visit along the route, in order."),
]


# Isochrones


class Contour(BaseModel):
    """A contour with either a time or a distance constraint."""

    time: Optional[float] = Field(
        None, gt=0, description="The time in minutes for the contour. Mutually exclusive with distance."
    )
    distance: Optional[float] = Field(
        None, gt=0, description="The distance in km for the contour. Mutually exclusive with time."
    )

    @model_validator(mode="after")
    def _exactly_one_metric(self) -> "Contour":
        if (self.time is None) == (self.distance is None):
            raise ValueError("Either time or distance must be specified, but not both.")
        return self

    @property
    def metric(self) -> str:
        return "time" if self.time is not None else "distance"


def _homogeneous(contours: List[Contour]) -> List[Contour]:
    if len({c.metric for c in contours}) > 1:
        raise ValueError(
            "All contours must be of the same type (either all time-based or all distance-based)."
        )
    return contours


Contours = Annotated[
    List[Contour],
    Field(
        min_length=1,
        max_length=4,
        description="Array of 1-4 contours. All contours must be of the same type (all time or all distance).",
    ),
    AfterValidator(_homogeneous),
]


# Static maps

DEFAULT_STYLE = "outdoors"
DEFAULT_SIZE = "600x400@2x"

MapStyle = Annotated[
    Literal["outdoors", "alidade_smooth", "alidade_smooth_dark"],
    Field(description="The Stadia Maps style slug to use."),
]

Zoom = Annotated[float, Field(ge=0, le=18, description="The map zoom level.")]

MapSize = Annotated[
    str,
    Field(
        pattern=r"^\d{1,4}x\d{1,4}(@2x)?$",
        description="Image size in pixels as WIDTHxHEIGHT, optionally with an @2x suffix for retina output.",
    ),
]

EncodedPolyline = Annotated[
    str,
    Field(min_length=1, description="An encoded polyline with 6 digits of precision."),
]

StrokeColor = Annotated[
    Optional[str],
    Field(description="Optional line color (hex code or CSS color name; no # prefix)."),
]

StrokeWidth = Annotated[Optional[float], Field(gt=0, description="Optional line width in pixels.")]

MarkerLabel = Annotated[
    Optional[str],
    Field(
        description="Optional label for the marker. This must be either a single character or supported emoji.",
    ),
]

MarkerColor = Annotated[
    Optional[str],
    Field(description="Optional color for the marker (hex code or CSS color name; no quoting and no # prefix)."),
]


class Marker(BaseModel):
    lat: Latitude
    lon: Longitude
    label: MarkerLabel = None
    color: MarkerColor = None
    marker_url: Optional[str] = Field(
        None, description="Optional custom marker style or URL to a custom marker image."
    )


Markers = Annotated[Optional[List[Marker]], Field(description="Optional markers to place on the map.")]
