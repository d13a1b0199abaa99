"""
ndsgrid Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from ndsgrid.core.coordinate import NdsCoordinate
from ndsgrid.grid.tile import NdsTile


@pytest.fixture
def barcelona_tile():
    """Level 13 tile in the Barcelona area"""
    return NdsTile.from_packed_id(539636700)


@pytest.fixture
def barcelona_center():
    """Center of the Barcelona tile in NDS units"""
    return NdsCoordinate(24772607, 493486079)
