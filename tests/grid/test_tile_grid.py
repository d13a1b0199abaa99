"""
Tests for TileGrid implementation
"""

import pytest

from ndsgrid.core.exceptions import RangeError
from ndsgrid.grid.tile import NdsTile
from ndsgrid.grid.tile_grid import DEFAULT_LEVEL, NdsTileGrid


class TestNdsTileGrid:
    """Test NdsTileGrid implementation"""

    @pytest.fixture
    def grid(self):
        """Create a grid instance"""
        return NdsTileGrid()

    def test_init_default(self, grid):
        """Test default initialization"""
        assert grid.level == DEFAULT_LEVEL == 13
        assert grid.tile_size == 2**18

    def test_init_custom_level(self):
        """Test initialization with custom level"""
        grid = NdsTileGrid(level=2)
        assert grid.level == 2
        assert grid.tile_size == 2**29

    def test_init_invalid_level(self):
        """Test invalid levels raise error"""
        with pytest.raises(RangeError):
            NdsTileGrid(level=16)

        with pytest.raises(RangeError):
            NdsTileGrid(level=-1)

    def test_get_tile_id(self, grid):
        """Test tile ID of a point in the Barcelona tile"""
        assert grid.get_tile_id(2.07, 41.36) == 539636700

    def test_get_tile(self, grid):
        """Test tile of a point"""
        assert grid.get_tile(2.07, 41.36) == NdsTile(13, 2765788)

    def test_get_tile_id_consistency(self, grid):
        """Test that same coordinates return same tile ID"""
        assert grid.get_tile_id(127.05, 37.55) == grid.get_tile_id(127.05, 37.55)

    def test_get_tile_id_invalid(self, grid):
        """Test degrees out of range raise error"""
        with pytest.raises(RangeError):
            grid.get_tile_id(181.0, 0.0)

    def test_get_tile_bounds(self, grid):
        """Test bounds contain the point the tile was found for"""
        minx, miny, maxx, maxy = grid.get_tile_bounds(539636700)
        assert minx <= 2.07 <= maxx
        assert miny <= 41.36 <= maxy
        assert maxx - minx == pytest.approx(360.0 / 2**14, rel=1e-6)

    def test_get_tile_bounds_other_level(self):
        """Test tile IDs of another level raise error"""
        grid = NdsTileGrid(level=12)
        with pytest.raises(RangeError):
            grid.get_tile_bounds(539636700)

    def test_get_tile_bounds_invalid_tile_id(self, grid):
        """Test packed IDs without level bit raise error"""
        with pytest.raises(RangeError):
            grid.get_tile_bounds(34)

    def test_roundtrip_lon_lat_to_tile_to_bounds(self, grid):
        """Test roundtrip: lon/lat -> tile_id -> bounds contains original point"""
        test_points = [
            (0.01, 0.01),
            (127.05, 37.55),
            (-122.42, 37.77),
            (139.69, 35.68),  # Tokyo
            (2.35, 48.86),  # Paris
            (-43.16, -22.95),  # Rio de Janeiro
            (151.21, -33.86),  # Sydney
        ]

        for lon, lat in test_points:
            tile_id = grid.get_tile_id(lon, lat)
            minx, miny, maxx, maxy = grid.get_tile_bounds(tile_id)

            assert minx <= lon <= maxx, f"Point {lon}, {lat} not in tile {tile_id} x bounds"
            assert miny <= lat <= maxy, f"Point {lon}, {lat} not in tile {tile_id} y bounds"

    def test_get_tiles_in_bounds_single_tile(self, grid):
        """Test getting tiles for bounds within a single tile"""
        minx, miny, maxx, maxy = grid.get_tile_bounds(539636700)
        inner_bounds = (minx + 0.001, miny + 0.001, maxx - 0.001, maxy - 0.001)

        assert grid.get_tiles_in_bounds(inner_bounds) == [539636700]

    def test_get_tiles_in_bounds_multiple_tiles(self, grid):
        """Test getting tiles for bounds spanning multiple tiles"""
        bounds = (2.0, 41.3, 2.3, 41.5)
        tiles = grid.get_tiles_in_bounds(bounds)

        assert 539636700 in tiles
        assert len(tiles) == len(set(tiles))
        assert grid.get_tile_id(2.0, 41.3) in tiles
        assert grid.get_tile_id(2.3, 41.5) in tiles
        assert grid.get_tile_id(2.0, 41.5) in tiles
        assert grid.get_tile_id(2.3, 41.3) in tiles
        assert all(NdsTile.from_packed_id(t).level == 13 for t in tiles)

    def test_get_tiles_in_bounds_coverage(self, grid):
        """Test that all returned tiles actually intersect the bounds"""
        bounds = (2.0, 41.3, 2.3, 41.5)
        minx, miny, maxx, maxy = bounds

        for tile_id in grid.get_tiles_in_bounds(bounds):
            tile_minx, tile_miny, tile_maxx, tile_maxy = grid.get_tile_bounds(tile_id)
            assert tile_minx <= maxx, f"Tile {tile_id} doesn't intersect bounds (x)"
            assert tile_maxx >= minx, f"Tile {tile_id} doesn't intersect bounds (x)"
            assert tile_miny <= maxy, f"Tile {tile_id} doesn't intersect bounds (y)"
            assert tile_maxy >= miny, f"Tile {tile_id} doesn't intersect bounds (y)"

    def test_get_tiles_in_bounds_order(self, grid):
        """Test tiles run column by column, south to north within a column"""
        tiles = [NdsTile.from_packed_id(t) for t in grid.get_tiles_in_bounds((2.0, 41.3, 2.1, 41.4))]
        keys = [(t.bbox.west, t.bbox.south) for t in tiles]
        assert keys == sorted(keys)

    def test_get_tiles_in_bounds_negative_coords(self, grid):
        """Test getting tiles in negative coordinate region"""
        bounds = (-43.3, -23.0, -43.1, -22.8)
        tiles = grid.get_tiles_in_bounds(bounds)

        assert len(tiles) > 1
        assert grid.get_tile_id(-43.2, -22.9) in tiles
        for tile_id in tiles:
            bbox = NdsTile.from_packed_id(tile_id).bbox
            assert bbox.west < 0
            assert bbox.south < 0

    def test_get_tiles_in_bounds_world_level_0(self):
        """Test the whole world on level 0 yields both hemispheres"""
        grid = NdsTileGrid(level=0)
        tiles = grid.get_tiles_in_bounds((-180.0, -90.0, 180.0, 90.0))
        assert tiles == [NdsTile(0, 1).packed_id, NdsTile(0, 0).packed_id]

    def test_get_tiles_in_bounds_world_level_1(self):
        """Test the whole world on level 1 yields all eight tiles"""
        grid = NdsTileGrid(level=1)
        tiles = grid.get_tiles_in_bounds((-180.0, -90.0, 180.0, 90.0))
        assert sorted(tiles) == sorted(NdsTile(1, n).packed_id for n in range(8))

    def test_get_tiles_in_bounds_invalid(self, grid):
        """Test inverted bounds raise error"""
        with pytest.raises(RangeError):
            grid.get_tiles_in_bounds((2.3, 41.3, 2.0, 41.5))

        with pytest.raises(RangeError):
            grid.get_tiles_in_bounds((2.0, 41.5, 2.3, 41.3))

    def test_repr(self, grid):
        """Test string representation"""
        assert repr(grid) == "NdsTileGrid(level=13)"
