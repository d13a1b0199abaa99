"""
ndsgrid Query Module

Spatial queries and GeoJSON export over NDS tiles.
"""

from ndsgrid.query.spatial import (
    geometry_to_bbox,
    query_tiles_by_geometry,
    query_tiles_by_point,
    tile_to_geometry,
    tiles_to_feature_collection,
)

__all__ = [
    "geometry_to_bbox",
    "query_tiles_by_geometry",
    "query_tiles_by_point",
    "tile_to_geometry",
    "tiles_to_feature_collection",
]
