"""
WGS84 Value Types

Degree-based coordinates and bounding boxes, used for display and export of
values computed in the NDS coordinate space.
"""

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shapely.geometry import Point, Polygon, mapping

from ndsgrid.core.exceptions import RangeError

if TYPE_CHECKING:
    from ndsgrid.core.coordinate import NdsCoordinate


def _feature(geometry: Any) -> dict[str, Any]:
    return {"type": "Feature", "properties": {}, "geometry": mapping(geometry)}


@dataclass(frozen=True)
class Wgs84Coordinate:
    """
    A longitude/latitude pair in decimal degrees

    Attributes:
        longitude: Longitude within [-180, 180]
        latitude: Latitude within [-90, 90]

    Examples:
        >>> Wgs84Coordinate(2.2945, 48.858222)
        Wgs84Coordinate(longitude=2.2945, latitude=48.858222)
        >>> Wgs84Coordinate(300.0, 40.0)
        Traceback (most recent call last):
        ...
        ndsgrid.core.exceptions.RangeError: The longitude value 300.0 exceeds the valid range of [-180; 180]
    """

    longitude: float
    latitude: float

    def __post_init__(self):
        check_degrees(self.longitude, self.latitude)

    def to_nds(self) -> "NdsCoordinate":
        """Convert to the NDS fixed-point coordinate space"""
        from ndsgrid.core.coordinate import NdsCoordinate

        return NdsCoordinate.from_wgs84(self)

    def to_point(self) -> Point:
        return Point(self.longitude, self.latitude)

    def to_geojson(self) -> str:
        """GeoJSON "Feature" with a "Point" geometry"""
        return json.dumps(_feature(self.to_point()))


@dataclass(frozen=True)
class Wgs84BBox:
    """
    Bounding box in decimal degrees

    Only produced from an NDS bounding box, see ``NdsBBox.to_wgs84``.
    """

    north: float
    east: float
    south: float
    west: float

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box as (minx, miny, maxx, maxy)"""
        return (self.west, self.south, self.east, self.north)

    def to_polygon(self) -> Polygon:
        """
        Polygon of the box

        The exterior ring runs west-south, east-south, east-north, west-north
        and closes on west-south again.
        """
        return Polygon(
            [
                (self.west, self.south),
                (self.east, self.south),
                (self.east, self.north),
                (self.west, self.north),
                (self.west, self.south),
            ]
        )

    def to_geojson(self) -> str:
        """GeoJSON "Feature" with a "Polygon" geometry"""
        return json.dumps(_feature(self.to_polygon()))


def check_degrees(lon: float, lat: float) -> None:
    """Raise RangeError unless lon is in [-180, 180] and lat in [-90, 90]"""
    # Written as inclusion tests so that NaN is rejected too
    if not -180 <= lon <= 180:
        raise RangeError(f"The longitude value {lon} exceeds the valid range of [-180; 180]")
    if not -90 <= lat <= 90:
        raise RangeError(f"The latitude value {lat} exceeds the valid range of [-90; 90]")
