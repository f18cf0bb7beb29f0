# src/dmx/__init__.py
"""
dmx - Small generic dense matrix library
"""

from .matrix import Matrix
from .functional import zeros, ones, full, eye, from_list, from_numpy, array, transpose, matmul, tensor, kron
from .exceptions import MatrixError, ValidationError, DimensionError, ShapeMismatchError, StateShapeError

__all__ = [
    'Matrix',
    'zeros',
    'ones',
    'full',
    'eye',
    'from_list',
    'from_numpy',
    'array',
    'transpose',
    'matmul',
    'tensor',
    'kron',
    'MatrixError',
    'ValidationError',
    'DimensionError',
    'ShapeMismatchError',
    'StateShapeError',
]

__version__ = '0.1.0'

import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
