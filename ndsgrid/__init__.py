"""
ndsgrid - NDS coordinates, Morton codes and tiles

Fixed-point coordinates, Morton codes and the tile hierarchy of the
Navigation Data Standard (NDS 2.5.4, sections 7.2.1 and 7.3).

Quick Start:
    >>> import ndsgrid as ng
    >>>
    >>> # WGS84 degrees to NDS units and Morton code
    >>> c = ng.NdsCoordinate.from_degrees(2.2945, 48.858222)
    >>> c.to_morton_code()
    579221254078012839
    >>>
    >>> # Tile containing the coordinate, and back from its packed ID
    >>> tile = ng.NdsTile.from_coordinate(13, c)
    >>> ng.NdsTile.from_packed_id(tile.packed_id) == tile
    True
    >>>
    >>> # Tile geometry as GeoJSON
    >>> geojson = tile.to_geojson()
"""

from ndsgrid.core import (
    EAST_HEMISPHERE,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    WEST_HEMISPHERE,
    # Classes
    NdsBBox,
    NdsCoordinate,
    # Exceptions
    NdsGridError,
    RangeError,
    Wgs84BBox,
    Wgs84Coordinate,
)
from ndsgrid.grid import MAX_LEVEL, NdsTile, NdsTileGrid, TileGrid

__version__ = "0.1.0"

__all__ = [
    "EAST_HEMISPHERE",
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
    "MAX_LATITUDE",
    "MAX_LEVEL",
    "MAX_LONGITUDE",
    "MIN_LATITUDE",
    "MIN_LONGITUDE",
    "NdsBBox",
    "NdsCoordinate",
    "NdsGridError",
    "NdsTile",
    "NdsTileGrid",
    "RangeError",
    "TileGrid",
    "WEST_HEMISPHERE",
    "Wgs84BBox",
    "Wgs84Coordinate",
    "__version__",
    "query_tiles_by_geometry",
    "query_tiles_by_point",
]


# Lazy imports for the query helpers
def __getattr__(name):
    if name == "query_tiles_by_geometry":
        from ndsgrid.query.spatial import query_tiles_by_geometry

        return query_tiles_by_geometry
    elif name == "query_tiles_by_point":
        from ndsgrid.query.spatial import query_tiles_by_point

        return query_tiles_by_point
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
