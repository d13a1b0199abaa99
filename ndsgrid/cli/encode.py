"""
Encode CLI command

Converts a WGS84 position to NDS units, its Morton code and containing tile.
"""

import argparse

from ndsgrid.core.coordinate import NdsCoordinate
from ndsgrid.grid.tile import NdsTile


def run_encode(args: argparse.Namespace) -> None:
    """Run the encode command"""
    coord = NdsCoordinate.from_degrees(args.lon, args.lat)
    tile = NdsTile.from_coordinate(args.level, coord)

    print(f"Longitude: {coord.longitude}")
    print(f"Latitude: {coord.latitude}")
    print(f"Morton Code: {coord.to_morton_code()}")
    print(f"Tile (level {tile.level}): {tile.number}")
    print(f"Packed Tile ID: {tile.packed_id}")
