"""
pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / 'src'))

import pytest
import numpy as np

import dmx


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square():
    """[[1, 2], [3, 4]]"""
    return dmx.from_list([[1, 2], [3, 4]])


@pytest.fixture
def wide():
    """2x3 integer matrix"""
    return dmx.from_list([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def tall():
    """3x2 integer matrix"""
    return dmx.from_list([[1, 2], [3, 4], [5, 6]])
