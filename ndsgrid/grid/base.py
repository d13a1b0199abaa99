"""
Tile Grid System Protocol

Geographic tile grid over the NDS coordinate space.
"""

from typing import Protocol, Tuple


class TileGrid(Protocol):
    """
    Geographic tile grid system bound to one NDS tile level

    Tiles are addressed by packed NDS tile IDs. On level ``n`` a tile covers
    2^(31 - n) coordinate units along both axes:
    - Level 0: 2 tiles (west and east hemisphere)
    - Level 13: ~2.7km tiles along the equator
    - Level 15: ~0.7km tiles along the equator
    """

    level: int

    def get_tile_id(self, lon: float, lat: float) -> int:
        """
        Convert WGS84 coordinates to a packed tile ID

        Args:
            lon: Longitude in decimal degrees
            lat: Latitude in decimal degrees

        Returns:
            Packed tile ID (signed 32-bit integer)
        """
        ...

    def get_tile_bounds(self, tile_id: int) -> Tuple[float, float, float, float]:
        """
        Get geographic bounds of a tile

        Args:
            tile_id: Packed tile ID

        Returns:
            Bounding box as (minx, miny, maxx, maxy) in WGS84
        """
        ...

    def get_tiles_in_bounds(self, bounds: Tuple[float, float, float, float]) -> list[int]:
        """
        Get all tiles intersecting the given bounds

        Args:
            bounds: Bounding box as (minx, miny, maxx, maxy) in WGS84

        Returns:
            Packed tile IDs
        """
        ...
