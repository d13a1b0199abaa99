"""
ndsgrid CLI Entry Points

Provides command-line interface for:
- encode: Convert WGS84 degrees to NDS units, Morton code and tile
- tile: Show level, number, bounding box and center of a packed tile ID
- morton: Decode a Morton code
"""

import argparse
import logging
import sys

from ndsgrid.core.exceptions import NdsGridError
from ndsgrid.grid.tile_grid import DEFAULT_LEVEL

logger = logging.getLogger(__name__)


def _integer(value: str) -> int:
    """Parse decimal or 0x-prefixed hexadecimal integers"""
    return int(value, 0)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="ndsgrid - NDS coordinates, Morton codes and tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ndsgrid encode 2.2945 48.858222          Encode a WGS84 position
  ndsgrid encode 2.2945 48.858222 -l 10    ... with the level 10 tile
  ndsgrid tile 539636700                   Show a packed tile ID
  ndsgrid tile 539636700 --geojson         ... as GeoJSON feature
  ndsgrid morton 579221254078012839        Decode a Morton code
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode WGS84 degrees")
    encode_parser.add_argument("lon", type=float, help="Longitude in degrees [-180, 180]")
    encode_parser.add_argument("lat", type=float, help="Latitude in degrees [-90, 90]")
    encode_parser.add_argument(
        "--level",
        "-l",
        type=int,
        default=DEFAULT_LEVEL,
        help=f"Tile level 0..15 (default: {DEFAULT_LEVEL})",
    )

    # Tile command
    tile_parser = subparsers.add_parser("tile", help="Show a packed tile ID")
    tile_parser.add_argument("packed_id", type=_integer, help="Packed tile ID (signed 32-bit)")
    tile_parser.add_argument(
        "--geojson", action="store_true", help="Print the tile as GeoJSON feature"
    )

    # Morton command
    morton_parser = subparsers.add_parser("morton", help="Decode a Morton code")
    morton_parser.add_argument("code", type=_integer, help="Morton code")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    try:
        if args.command == "encode":
            from ndsgrid.cli.encode import run_encode

            run_encode(args)
        elif args.command == "tile":
            from ndsgrid.cli.tile import run_tile

            run_tile(args)
        elif args.command == "morton":
            from ndsgrid.cli.morton import run_morton

            run_morton(args)
        else:
            parser.print_help()
            sys.exit(1)
    except NdsGridError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
