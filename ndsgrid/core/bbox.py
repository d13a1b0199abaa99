"""
NDS Bounding Box

Rectangles in NDS units, kept separate from the tile class so that boxes can
be handled without tile arithmetic.
"""

from dataclasses import dataclass

from ndsgrid.core.coordinate import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    NdsCoordinate,
)
from ndsgrid.core.wgs84 import Wgs84BBox


def _half(value: int) -> int:
    """Halve, truncating toward zero"""
    return -(-value // 2) if value < 0 else value // 2


@dataclass(frozen=True)
class NdsBBox:
    """
    Bounding box in NDS units

    Attributes:
        north: Northern latitude bound
        east: Eastern longitude bound
        south: Southern latitude bound
        west: Western longitude bound
    """

    north: int
    east: int
    south: int
    west: int

    @property
    def south_west(self) -> NdsCoordinate:
        return NdsCoordinate(self.west, self.south)

    @property
    def south_east(self) -> NdsCoordinate:
        return NdsCoordinate(self.east, self.south)

    @property
    def north_west(self) -> NdsCoordinate:
        return NdsCoordinate(self.west, self.north)

    @property
    def north_east(self) -> NdsCoordinate:
        return NdsCoordinate(self.east, self.north)

    @property
    def center(self) -> NdsCoordinate:
        """Midpoint of the box, each axis halved toward zero"""
        return NdsCoordinate(_half(self.east + self.west), _half(self.north + self.south))

    def contains(self, coord: NdsCoordinate) -> bool:
        """Check if a coordinate lies within the box (edges included)"""
        return (
            self.west <= coord.longitude <= self.east
            and self.south <= coord.latitude <= self.north
        )

    def to_wgs84(self) -> Wgs84BBox:
        """Convert to a bounding box in WGS84 degrees"""
        ne = self.north_east.to_wgs84()
        sw = self.south_west.to_wgs84()
        return Wgs84BBox(ne.latitude, ne.longitude, sw.latitude, sw.longitude)

    def to_geojson(self) -> str:
        """GeoJSON "Feature" with a "Polygon" geometry in degrees"""
        return self.to_wgs84().to_geojson()


# Level 0 consists of two tiles, one per hemisphere
WEST_HEMISPHERE = NdsBBox(MAX_LATITUDE, 0, MIN_LATITUDE, MIN_LONGITUDE)
EAST_HEMISPHERE = NdsBBox(MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, 0)
