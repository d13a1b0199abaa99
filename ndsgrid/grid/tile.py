"""
NDS Tile

Implementation of the NDS tiling scheme, NDS Format Specification,
Version 2.5.4, section 7.3.1.

Level 0 splits the world into two tiles (west and east hemisphere); every
further level splits each tile into four. A tile is identified by its level
and its tile number, which equals the (2 * level + 1) most significant bits of
the Morton code of the tile's south-west corner.
"""

from dataclasses import dataclass
from functools import cached_property

from ndsgrid.core.bbox import EAST_HEMISPHERE, WEST_HEMISPHERE, NdsBBox
from ndsgrid.core.coordinate import (
    INT32_MAX,
    INT32_MIN,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_LONGITUDE,
    MIN_LONGITUDE,
    NdsCoordinate,
    to_int32,
)
from ndsgrid.core.exceptions import RangeError
from ndsgrid.core.wgs84 import Wgs84Coordinate

# The maximum tile level within the NDS specification
MAX_LEVEL = 15

_MORTON_MASK = (1 << 64) - 1


def _check_level(level: int) -> None:
    if level < 0 or level > MAX_LEVEL:
        raise RangeError(f"The tile level {level} exceeds the range [0, {MAX_LEVEL}].")


def _morton_shift(level: int) -> int:
    """Bits below the tile number in a coordinate's Morton code"""
    return 32 + (MAX_LEVEL - level) * 2


def _extract_level(packed_id: int) -> int | None:
    # Level 15's marker is bit 31, which is the sign bit of a signed int32
    if packed_id < 0:
        return MAX_LEVEL
    for level in range(MAX_LEVEL - 1, -1, -1):
        if packed_id & (1 << (16 + level)):
            return level
    return None


def _far_corner(sw: NdsCoordinate, level: int) -> tuple[int, int]:
    """
    North-east corner of the level's tile with south-west corner sw

    Adding one unit for negative corners keeps adjacent tiles free of gaps
    and overlaps despite the uneven split of the ranges around zero.
    """
    lon = sw.longitude + LONGITUDE_RANGE // (1 << (level + 1)) + (1 if sw.longitude < 0 else 0)
    lat = sw.latitude + LATITUDE_RANGE // (1 << level) + (1 if sw.latitude < 0 else 0)
    return lon, lat


@dataclass(frozen=True)
class NdsTile:
    """
    A tile of the NDS tiling scheme

    Attributes:
        level: Tile level, 0..15
        number: Tile number, 0 .. 2^(2 * level + 1) - 1

    Examples:
        >>> tile = NdsTile.from_packed_id(539636700)  # Barcelona area
        >>> tile
        NdsTile(level=13, number=2765788)
        >>> tile.center
        NdsCoordinate(longitude=24772607, latitude=493486079)
        >>> tile.bbox
        NdsBBox(north=493617151, east=24903679, south=493355008, west=24641536)
        >>> NdsTile.from_coordinate(13, tile.center) == tile
        True
    """

    level: int
    number: int

    def __post_init__(self):
        _check_level(self.level)
        if self.number < 0:
            raise RangeError(f"The tile number {self.number} must not be negative.")
        max_number = (1 << (2 * self.level + 1)) - 1
        if self.number > max_number:
            raise RangeError(
                f"Invalid tile number {self.number} for level {self.level}, "
                f"numbers 0 .. {max_number} are allowed."
            )

    @classmethod
    def from_packed_id(cls, packed_id: int) -> "NdsTile":
        """
        Create a tile from a packed tile ID (NDS 2.5.4, section 7.3.3)

        The level is given by the highest marker bit ``1 << (16 + level)``;
        the remaining bits are the tile number.

        Args:
            packed_id: Packed tile ID as signed 32-bit integer

        Raises:
            RangeError: If the ID is not a signed 32-bit integer or carries
                no level marker bit
        """
        if packed_id < INT32_MIN or packed_id > INT32_MAX:
            raise RangeError(f"Packed tile ID {packed_id} is not a signed 32-bit integer.")
        level = _extract_level(packed_id)
        if level is None:
            raise RangeError(f"Invalid packed tile ID {packed_id}: No level bit present.")
        number = packed_id ^ to_int32(1 << (16 + level))
        # The number keeps every bit below the marker, so no range check here
        tile = object.__new__(cls)
        object.__setattr__(tile, "level", level)
        object.__setattr__(tile, "number", number)
        return tile

    @classmethod
    def from_coordinate(cls, level: int, coord: NdsCoordinate) -> "NdsTile":
        """
        Create the tile of the given level containing a coordinate

        The tile number is the coordinate's Morton code shifted down to the
        level's resolution.
        """
        _check_level(level)
        return cls(level, to_int32(coord.to_morton_code() >> _morton_shift(level)))

    @classmethod
    def from_wgs84(cls, level: int, coord: Wgs84Coordinate) -> "NdsTile":
        return cls.from_coordinate(level, NdsCoordinate.from_wgs84(coord))

    @property
    def packed_id(self) -> int:
        """Packed tile ID: tile number plus the level marker bit, as signed int32"""
        return to_int32(self.number + (1 << (16 + self.level)))

    def contains(self, coord: NdsCoordinate) -> bool:
        """Check if the coordinate's tile number on this level matches"""
        return self.number == to_int32(coord.to_morton_code() >> _morton_shift(self.level))

    @property
    def bbox(self) -> NdsBBox:
        """Bounding box of this tile"""
        if self.level == 0:
            return EAST_HEMISPHERE if self.number == 0 else WEST_HEMISPHERE
        sw = self._south_west()
        east, north = _far_corner(sw, self.level)
        return NdsBBox(north, east, sw.latitude, sw.longitude)

    @cached_property
    def center(self) -> NdsCoordinate:
        """Center of this tile"""
        if self.level == 0:
            if self.number == 0:
                return NdsCoordinate(MAX_LONGITUDE // 2, 0)
            return NdsCoordinate(MIN_LONGITUDE // 2, 0)
        # Same as the bounding box, one level deeper
        lon, lat = _far_corner(self._south_west(), self.level + 1)
        return NdsCoordinate(lon, lat)

    def to_geojson(self) -> str:
        """GeoJSON "Feature" with the tile's "Polygon" geometry in degrees"""
        return self.bbox.to_geojson()

    def _south_west(self) -> NdsCoordinate:
        # Numbers from unchecked packed IDs may carry bits beyond the code width
        code = (self.number << _morton_shift(self.level)) & _MORTON_MASK
        return NdsCoordinate.from_morton_code(code)
