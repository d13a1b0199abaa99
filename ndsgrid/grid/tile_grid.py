"""
TileGrid Implementation

Implements the tile grid system on one level of the NDS tiling scheme.
"""

import logging
from typing import Tuple

from ndsgrid.core.coordinate import NdsCoordinate
from ndsgrid.core.exceptions import RangeError
from ndsgrid.core.wgs84 import Wgs84Coordinate
from ndsgrid.grid.tile import MAX_LEVEL, NdsTile

logger = logging.getLogger(__name__)

# Default grid level (~2.7km x 2.7km tiles at the equator)
DEFAULT_LEVEL = 13


class NdsTileGrid:
    """
    NDS tile grid on a fixed level

    All tiles of one level are squares of 2^(31 - level) NDS units, so the
    grid is regular in NDS units (not in meters).

    Examples:
        >>> grid = NdsTileGrid(level=13)
        >>> grid.get_tile_id(2.07, 41.36)  # Barcelona area
        539636700
        >>>
        >>> grid.get_tile(2.07, 41.36)
        NdsTile(level=13, number=2765788)
        >>>
        >>> len(grid.get_tiles_in_bounds((2.0, 41.3, 2.3, 41.5)))
        140
    """

    def __init__(self, level: int = DEFAULT_LEVEL):
        """
        Initialize tile grid

        Args:
            level: NDS tile level, 0..15 (default: 13)
        """
        if level < 0 or level > MAX_LEVEL:
            raise RangeError(f"The tile level {level} exceeds the range [0, {MAX_LEVEL}].")
        self.level = level

    @property
    def tile_size(self) -> int:
        """Edge length of a tile in NDS units"""
        return 1 << (31 - self.level)

    def get_tile(self, lon: float, lat: float) -> NdsTile:
        """Get the tile containing a WGS84 point"""
        return NdsTile.from_wgs84(self.level, Wgs84Coordinate(lon, lat))

    def get_tile_id(self, lon: float, lat: float) -> int:
        """
        Convert WGS84 coordinates to a packed tile ID

        Args:
            lon: Longitude in decimal degrees (-180 to 180)
            lat: Latitude in decimal degrees (-90 to 90)

        Returns:
            Packed tile ID of the tile containing the point
        """
        return self.get_tile(lon, lat).packed_id

    def get_tile_bounds(self, tile_id: int) -> Tuple[float, float, float, float]:
        """
        Get geographic bounds of a tile

        Args:
            tile_id: Packed tile ID of a tile on this grid's level

        Returns:
            Bounding box as (minx, miny, maxx, maxy) in WGS84 decimal degrees

        Raises:
            RangeError: If the ID is invalid or belongs to another level
        """
        tile = NdsTile.from_packed_id(tile_id)
        if tile.level != self.level:
            raise RangeError(
                f"Tile ID {tile_id} is on level {tile.level}, grid level is {self.level}"
            )
        return tile.bbox.to_wgs84().bounds

    def get_tiles_in_bounds(self, bounds: Tuple[float, float, float, float]) -> list[int]:
        """
        Get all tiles that intersect with the given bounds

        Bounds crossing the antimeridian are not supported.

        Args:
            bounds: Bounding box as (minx, miny, maxx, maxy) in WGS84 decimal degrees

        Returns:
            Packed tile IDs, column by column from west to east, each column
            from south to north
        """
        minx, miny, maxx, maxy = bounds
        if minx > maxx or miny > maxy:
            raise RangeError(f"Invalid bounds {bounds}: min values exceed max values")

        south_west = NdsCoordinate.from_degrees(minx, miny)
        north_east = NdsCoordinate.from_degrees(maxx, maxy)

        # South-west corner of the first tile; further tiles follow in steps
        # of the tile size
        first = NdsTile.from_coordinate(self.level, south_west).bbox

        tiles = []
        lon = first.west
        while lon <= north_east.longitude:
            lat = first.south
            while lat <= north_east.latitude:
                tile = NdsTile.from_coordinate(self.level, NdsCoordinate(lon, lat))
                tiles.append(tile.packed_id)
                lat += self.tile_size
            lon += self.tile_size

        logger.debug("Found %d tiles on level %d in bounds %s", len(tiles), self.level, bounds)
        return tiles

    def __repr__(self):
        return f"NdsTileGrid(level={self.level})"
