"""
ndsgrid Grid Module

NDS tile hierarchy (levels 0..15) and level-bound tile grids.
"""

from ndsgrid.grid.base import TileGrid
from ndsgrid.grid.tile import MAX_LEVEL, NdsTile
from ndsgrid.grid.tile_grid import DEFAULT_LEVEL, NdsTileGrid

__all__ = [
    "DEFAULT_LEVEL",
    "MAX_LEVEL",
    "NdsTile",
    "NdsTileGrid",
    "TileGrid",
]
