"""
Tile CLI command

Shows level, number, bounding box and center of a packed tile ID.
"""

import argparse

from ndsgrid.grid.tile import NdsTile


def run_tile(args: argparse.Namespace) -> None:
    """Run the tile command"""
    tile = NdsTile.from_packed_id(args.packed_id)

    if args.geojson:
        print(tile.to_geojson())
        return

    bbox = tile.bbox
    wgs_bbox = bbox.to_wgs84()
    center = tile.center
    wgs_center = center.to_wgs84()

    print(f"Packed Tile ID: {tile.packed_id}")
    print(f"Level: {tile.level}")
    print(f"Number: {tile.number}")
    print()
    print("Bounding Box:")
    print(f"  North: {bbox.north:>12}  ({wgs_bbox.north:.7f})")
    print(f"  East:  {bbox.east:>12}  ({wgs_bbox.east:.7f})")
    print(f"  South: {bbox.south:>12}  ({wgs_bbox.south:.7f})")
    print(f"  West:  {bbox.west:>12}  ({wgs_bbox.west:.7f})")
    print(
        f"Center: {center.longitude}, {center.latitude}  "
        f"({wgs_center.longitude:.7f}, {wgs_center.latitude:.7f})"
    )
