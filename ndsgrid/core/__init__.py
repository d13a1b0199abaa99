"""
ndsgrid Core Module

Coordinate value types, bounding boxes and exceptions.
"""

from ndsgrid.core.exceptions import NdsGridError, RangeError
from ndsgrid.core.wgs84 import Wgs84BBox, Wgs84Coordinate
from ndsgrid.core.coordinate import (
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    NdsCoordinate,
)
from ndsgrid.core.bbox import EAST_HEMISPHERE, WEST_HEMISPHERE, NdsBBox

__all__ = [
    # Classes
    "NdsCoordinate",
    "NdsBBox",
    "Wgs84Coordinate",
    "Wgs84BBox",
    # Constants
    "MAX_LONGITUDE",
    "MIN_LONGITUDE",
    "MAX_LATITUDE",
    "MIN_LATITUDE",
    "LONGITUDE_RANGE",
    "LATITUDE_RANGE",
    "WEST_HEMISPHERE",
    "EAST_HEMISPHERE",
    # Exceptions
    "NdsGridError",
    "RangeError",
]
