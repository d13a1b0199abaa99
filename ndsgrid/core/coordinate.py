"""
NDS Coordinate

Fixed-point coordinates according to the NDS Format Specification,
Version 2.5.4, section 7.2.1.

The NDS coordinate encoding divides the 360 degree range into 2^32 steps, so a
coordinate unit corresponds to 360/2^32 = 90/2^30 degrees for both longitude
and latitude. Longitude uses the full signed 32-bit range. Latitude only spans
180 degrees and therefore uses a 31-bit signed range, in favour of equally
sized units along both axes.
"""

import math
from dataclasses import dataclass

from ndsgrid.core.exceptions import RangeError
from ndsgrid.core.wgs84 import Wgs84Coordinate, check_degrees

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)

MAX_LONGITUDE = INT32_MAX
MIN_LONGITUDE = INT32_MIN
MAX_LATITUDE = MAX_LONGITUDE // 2
MIN_LATITUDE = MIN_LONGITUDE // 2

LONGITUDE_RANGE = MAX_LONGITUDE - MIN_LONGITUDE
LATITUDE_RANGE = MAX_LATITUDE - MIN_LATITUDE


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)"""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & (1 << 31) else value


@dataclass(frozen=True)
class NdsCoordinate:
    """
    A coordinate in NDS units

    Attributes:
        longitude: Signed 32-bit longitude, [-2^31, 2^31 - 1]
        latitude: Signed 31-bit latitude, [-2^30, 2^30 - 1]

    Examples:
        >>> c = NdsCoordinate.from_degrees(2.2945, 48.858222)  # Eiffel tower
        >>> c
        NdsCoordinate(longitude=27374451, latitude=582901293)
        >>> c.to_morton_code()
        579221254078012839
        >>> NdsCoordinate.from_morton_code(579221254078012839) == c
        True
    """

    longitude: int
    latitude: int

    def __post_init__(self):
        if self.longitude < MIN_LONGITUDE or self.longitude > MAX_LONGITUDE:
            raise RangeError(
                f"Longitude value {self.longitude} exceeds allowed range "
                f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}]."
            )
        if self.latitude < MIN_LATITUDE or self.latitude > MAX_LATITUDE:
            raise RangeError(
                f"Latitude value {self.latitude} exceeds allowed range "
                f"[{MIN_LATITUDE}, {MAX_LATITUDE}]."
            )

    @classmethod
    def from_degrees(cls, lon: float, lat: float) -> "NdsCoordinate":
        """
        Create a coordinate from WGS84 degrees

        Results may differ by one unit from the NDS reference table due to
        floating point arithmetic. Unit precision is far above the precision
        of map data, so this is accepted.

        Args:
            lon: Longitude within [-180, 180]
            lat: Latitude within [-90, 90]

        Raises:
            RangeError: If either value is out of its degree range
        """
        check_degrees(lon, lat)
        return cls(
            math.floor(lon / 360.0 * LONGITUDE_RANGE),
            math.floor(lat / 180.0 * LATITUDE_RANGE),
        )

    @classmethod
    def from_wgs84(cls, coord: Wgs84Coordinate) -> "NdsCoordinate":
        return cls.from_degrees(coord.longitude, coord.latitude)

    @classmethod
    def from_morton_code(cls, code: int) -> "NdsCoordinate":
        """
        Create a coordinate from its Morton code

        Even code bits carry the 32 longitude bits, odd code bits the 31
        latitude bits. Bit 63 is ignored.

        Raises:
            RangeError: If the code does not fit into 64 bits
        """
        if code < -(1 << 63) or code >= (1 << 64):
            raise RangeError(f"Morton code {code} does not fit into 64 bits.")
        lon = 0
        lat = 0
        for pos in range(32):
            if pos < 31 and code & (1 << (2 * pos + 1)):
                lat |= 1 << pos
            if code & (1 << (2 * pos)):
                lon |= 1 << pos
        # Latitude is a 31-bit signed integer: bit 30 is its sign bit
        if lat & (1 << 30):
            lat -= 1 << 31
        return cls(to_int32(lon), lat)

    def to_morton_code(self) -> int:
        """
        Morton code of this coordinate (NDS 2.5.4, section 7.2.1)

        Returns:
            Non-negative integer using bits 0..62
        """
        code = 0
        for pos in range(31):
            if self.longitude & (1 << pos):
                code |= 1 << (2 * pos)
            if self.latitude & (1 << pos):
                code |= 1 << (2 * pos + 1)
        if self.longitude < 0:
            code |= 1 << 62
        # The sign of the 31-bit latitude is copied to bit 61
        if self.latitude < 0:
            code |= 1 << 61
        return code

    def to_wgs84(self) -> Wgs84Coordinate:
        """Convert to WGS84 degrees"""
        if self.longitude >= 0:
            lon = self.longitude / MAX_LONGITUDE * 180.0
        else:
            lon = self.longitude / MIN_LONGITUDE * -180.0
        if self.latitude >= 0:
            lat = self.latitude / MAX_LATITUDE * 90.0
        else:
            lat = self.latitude / MIN_LATITUDE * -90.0
        return Wgs84Coordinate(lon, lat)

    def add(self, delta_longitude: int, delta_latitude: int) -> "NdsCoordinate":
        """
        Translate by raw unit offsets

        Longitude wraps around at the 32-bit boundary (antimeridian).

        Raises:
            RangeError: If the latitude leaves its range
        """
        return NdsCoordinate(
            to_int32(self.longitude + delta_longitude), self.latitude + delta_latitude
        )

    def to_geojson(self) -> str:
        """GeoJSON "Feature" with a "Point" geometry in degrees"""
        return self.to_wgs84().to_geojson()
