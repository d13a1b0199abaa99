"""
Spatial query utilities for GeoJSON-based queries

Supports:
- GeoJSON polygon/multipolygon queries against an NDS tile level
- Shapely geometry support
- Point-in-tile queries
- GeoJSON export of tiles
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Union

from shapely.geometry import Polygon, mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from ndsgrid.grid.tile import NdsTile
from ndsgrid.grid.tile_grid import DEFAULT_LEVEL, NdsTileGrid

logger = logging.getLogger(__name__)


def tile_to_geometry(tile: NdsTile) -> Polygon:
    """
    Polygon of a tile in WGS84 degrees

    Examples:
        >>> poly = tile_to_geometry(NdsTile(0, 0))  # eastern hemisphere
        >>> poly.bounds
        (0.0, -90.0, 180.0, 90.0)
    """
    return tile.bbox.to_wgs84().to_polygon()


def query_tiles_by_point(lon: float, lat: float, level: int = DEFAULT_LEVEL) -> int:
    """
    Get the tile containing a point

    Args:
        lon: Longitude in decimal degrees
        lat: Latitude in decimal degrees
        level: NDS tile level (default: 13)

    Returns:
        Packed tile ID containing the point
    """
    return NdsTileGrid(level).get_tile_id(lon, lat)


def query_tiles_by_geometry(
    geometry: Union[dict, BaseGeometry, str, Path],
    level: int = DEFAULT_LEVEL,
    available_tiles: Iterable[int] | None = None,
) -> list[int]:
    """
    Find tiles that intersect with a GeoJSON geometry

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file
        level: NDS tile level (default: 13)
        available_tiles: Optional packed tile IDs to filter by

    Returns:
        Packed IDs of the tiles intersecting the geometry

    Examples:
        >>> geojson = {
        ...     "type": "Polygon",
        ...     "coordinates": [[[2.0, 41.3], [2.3, 41.3], [2.3, 41.5], [2.0, 41.3]]]
        ... }
        >>> tiles = query_tiles_by_geometry(geojson, level=13)
    """
    grid = NdsTileGrid(level)
    geom = _parse_geometry(geometry)

    bbox_tiles = grid.get_tiles_in_bounds(geom.bounds)

    # Filter to tiles that actually intersect with geometry
    intersecting_tiles = [
        tile_id
        for tile_id in bbox_tiles
        if geom.intersects(tile_to_geometry(NdsTile.from_packed_id(tile_id)))
    ]

    if available_tiles is not None:
        available_set = set(available_tiles)
        intersecting_tiles = [t for t in intersecting_tiles if t in available_set]

    logger.debug(
        "%d of %d candidate tiles intersect the geometry",
        len(intersecting_tiles),
        len(bbox_tiles),
    )
    return intersecting_tiles


def geometry_to_bbox(
    geometry: Union[dict, BaseGeometry, str, Path],
) -> tuple[float, float, float, float]:
    """
    Get bounding box from geometry

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Bounding box as (minx, miny, maxx, maxy)
    """
    geom = _parse_geometry(geometry)
    return geom.bounds  # type: ignore[no-any-return]


def tiles_to_feature_collection(tiles: Iterable[NdsTile]) -> dict[str, Any]:
    """
    Build a GeoJSON FeatureCollection with one polygon feature per tile

    Each feature carries the tile's ``packed_id``, ``level`` and ``number``
    as properties.
    """
    features = [
        {
            "type": "Feature",
            "properties": {
                "packed_id": tile.packed_id,
                "level": tile.level,
                "number": tile.number,
            },
            "geometry": mapping(tile_to_geometry(tile)),
        }
        for tile in tiles
    ]
    return {"type": "FeatureCollection", "features": features}


def _parse_geometry(
    geometry: Union[dict, BaseGeometry, str, Path],
) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    if isinstance(geometry, BaseGeometry):
        return geometry

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")
        with open(path) as f:
            geojson = json.load(f)
        return _geojson_to_geometry(geojson)

    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles FeatureCollection, Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise ValueError("Empty FeatureCollection")
        if len(features) == 1:
            return shape(features[0]["geometry"])
        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
