"""
gridfield: dimension-generic grid fields and finite-difference operators.

A ``Grid`` is a fixed-size D-dimensional array of scalar or vector samples
with one uniform spacing. The ``operators`` package supplies gradient,
divergence, Laplacian, multilinear interpolation and semi-Lagrangian
advection on it.
"""

from gridfield._exceptions import GridError, SizeMismatchError, OutOfGridError
from gridfield._coordinates import Coord
from gridfield._vector import Float, Vector
from gridfield._grid import CellRef, Grid, capacity
from gridfield._iteration import GridIterator
from gridfield._boundary import is_boundary_cell, boundary_cells, interior_cells
from gridfield._params import GridParams, DisplayParams

__version__ = '0.1.0'

__all__ = [
    'GridError', 'SizeMismatchError', 'OutOfGridError',
    'Coord', 'Float', 'Vector',
    'CellRef', 'Grid', 'GridIterator', 'capacity',
    'is_boundary_cell', 'boundary_cells', 'interior_cells',
    'GridParams', 'DisplayParams',
]
