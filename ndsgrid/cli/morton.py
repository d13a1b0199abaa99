"""
Morton CLI command

Decodes a Morton code to NDS units and WGS84 degrees.
"""

import argparse

from ndsgrid.core.coordinate import NdsCoordinate


def run_morton(args: argparse.Namespace) -> None:
    """Run the morton command"""
    coord = NdsCoordinate.from_morton_code(args.code)
    wgs = coord.to_wgs84()

    print(f"Longitude: {coord.longitude}  ({wgs.longitude:.7f})")
    print(f"Latitude: {coord.latitude}  ({wgs.latitude:.7f})")
