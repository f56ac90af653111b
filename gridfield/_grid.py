"""
Fixed-size D-dimensional grid of samples with a uniform cell spacing.

The grid owns one flat, row-major numpy array. Scalar fields store one
number per cell, vector fields one row of ``ndim`` floats per cell.
The shape never changes after construction; cell values are mutated
through bounds-checked accessors.

Two access regimes
------------------
``get`` / ``get_mut``
    Total. An out-of-range coordinate gives ``None``.
``grid[coord]`` and the operators
    Partial. The cell must exist, otherwise ``OutOfGridError`` is raised.

Usage
-----
    from gridfield import Grid, Vector

    p = Grid((20, 20), delta=0.05)                       # scalar field
    u = Grid((20, 20), delta=0.05, value_type=Vector)    # vector field
    p[(3, 4)] = 1.0
    p.get((-1, 4))          # None
    p.gradient((3, 4))      # Vector
    for coord, value in p:
        ...
"""

import functools
import logging
import operator
from typing import Optional, Sequence, Union

import numpy as np

from gridfield._coordinates import Coord
from gridfield._exceptions import OutOfGridError, SizeMismatchError
from gridfield._iteration import GridIterator
from gridfield._vector import Vector

logger = logging.getLogger(__name__)

CoordLike = Union[Coord, Sequence[int]]


class CellRef:
    """Write handle to exactly one cell, returned by ``Grid.get_mut``.

    Only one handle should be used to write a given cell at a time.
    """

    __slots__ = ('_grid', '_offset', 'coord')

    def __init__(self, grid: 'Grid', offset: int, coord: Coord):
        self._grid = grid
        self._offset = offset
        self.coord = coord

    @property
    def value(self):
        return self._grid._read(self._offset)

    @value.setter
    def value(self, new_value):
        self._grid._write(self._offset, new_value)

    def set(self, new_value) -> None:
        self._grid._write(self._offset, new_value)

    def update(self, fn) -> None:
        """Replace the cell value with ``fn(value)``."""
        self._grid._write(self._offset, fn(self._grid._read(self._offset)))

    def __repr__(self):
        return f"CellRef({tuple(self.coord)!r}, value={self.value!r})"


def capacity(size: Sequence[int]) -> int:
    """Number of cells of a grid of the given per-axis size."""
    return functools.reduce(operator.mul, size, 1)


class Grid:
    """A field sampled on a regular D-dimensional grid.

    Parameters
    ----------
    size : sequence of int
        Number of cells along each axis. All must be positive.
    delta : float
        Physical spacing between adjacent cells, shared by all axes.
    value_type : type
        ``float`` (default), ``int`` or ``complex`` for a scalar field,
        ``Vector`` for a vector field with ``ndim`` components.

    Raises
    ------
    ValueError
        For an empty or non-positive size, or a non-positive delta.
    TypeError
        For a value type that is neither numeric nor ``Vector``.
    """

    def __init__(self, size: Sequence[int], delta: float = 1.0, value_type: type = float):
        size = Coord(size)
        if len(size) == 0:
            raise ValueError("a grid needs at least one axis")
        if any(n <= 0 for n in size):
            raise ValueError(f"axis sizes must be positive, got {tuple(size)}")
        delta = float(delta)
        if not delta > 0.0:
            raise ValueError(f"delta must be positive, got {delta}")

        self._size = size
        self._delta = delta
        self._value_type = value_type
        n = capacity(size)
        if value_type is Vector:
            self._data = np.zeros((n, len(size)), dtype=float)
        else:
            dtype = np.dtype(value_type)
            if not np.issubdtype(dtype, np.number):
                raise TypeError(f"unsupported value type {value_type!r}")
            self._data = np.zeros(n, dtype=dtype)

        logger.debug("created %s grid size=%s delta=%g (%d cells)",
                     value_type.__name__, tuple(size), delta, n)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def size(self) -> Coord:
        return self._size

    @property
    def ndim(self) -> int:
        return len(self._size)

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    @property
    def value_type(self) -> type:
        return self._value_type

    @property
    def is_vector_field(self) -> bool:
        return self._value_type is Vector

    def __len__(self):
        return self.capacity

    def __repr__(self):
        return (f"Grid(size={tuple(self._size)}, delta={self._delta}, "
                f"value_type={self._value_type.__name__})")

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    def _coord(self, coord: CoordLike) -> Coord:
        if not isinstance(coord, Coord):
            coord = Coord(coord)
        if len(coord) != self.ndim:
            raise SizeMismatchError(self.ndim, len(coord), what="coordinate")
        return coord

    def contains(self, coord: CoordLike) -> bool:
        """True if every component lies in ``[0, size_i)``."""
        coord = self._coord(coord)
        return all(0 <= c < n for c, n in zip(coord, self._size))

    def flatten_index(self, coord: CoordLike) -> int:
        """Row-major storage offset, ``acc = acc * size_i + coord_i``.

        Not bounds checked; only meaningful for coordinates in the grid.
        """
        coord = self._coord(coord)
        acc = 0
        for c, n in zip(coord, self._size):
            acc = acc * n + c
        return acc

    def _read(self, offset: int):
        if self._value_type is Vector:
            return Vector(self._data[offset])
        return self._data[offset].item()

    def _write(self, offset: int, value) -> None:
        if self._value_type is Vector:
            row = np.asarray(value, dtype=float)
            if row.shape != (self.ndim,):
                raise SizeMismatchError(self.ndim, row.size, what="vector value")
            self._data[offset] = row
        else:
            self._data[offset] = self._checked_scalar(value)

    def _checked_scalar(self, value):
        # refuse writes that would truncate, e.g. 0.5 into an integer grid
        source = np.asarray(value).dtype
        if not np.can_cast(source, self._data.dtype, casting='same_kind'):
            raise TypeError(
                f"cannot store {source} value {value!r} in a {self._data.dtype} grid"
            )
        return value

    def _ref_at(self, offset: int, coord: Coord) -> CellRef:
        return CellRef(self, offset, coord)

    def get(self, coord: CoordLike):
        """Value at ``coord``, or None if the coordinate is outside the grid."""
        coord = self._coord(coord)
        if not self.contains(coord):
            return None
        return self._read(self.flatten_index(coord))

    def get_mut(self, coord: CoordLike) -> Optional[CellRef]:
        """Write handle for ``coord``, or None if it is outside the grid."""
        coord = self._coord(coord)
        if not self.contains(coord):
            return None
        return CellRef(self, self.flatten_index(coord), coord)

    def __getitem__(self, coord: CoordLike):
        coord = self._coord(coord)
        if not self.contains(coord):
            raise OutOfGridError(coord, self._size)
        return self._read(self.flatten_index(coord))

    def __setitem__(self, coord: CoordLike, value) -> None:
        coord = self._coord(coord)
        if not self.contains(coord):
            raise OutOfGridError(coord, self._size)
        self._write(self.flatten_index(coord), value)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def __iter__(self) -> GridIterator:
        return GridIterator(self)

    def iter_mut(self) -> GridIterator:
        """Sweep yielding ``(Coord, CellRef)`` pairs."""
        return GridIterator(self, mutable=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def default_value(self):
        """Zero of the value type; every cell starts with it."""
        if self._value_type is Vector:
            return Vector.zeros(self.ndim)
        return self._data.dtype.type(0).item()

    def position_of(self, coord: CoordLike) -> Vector:
        """Physical position of a cell."""
        return Vector.from_coord_int(self._coord(coord), self._delta)

    def fill(self, value) -> None:
        if self._value_type is Vector:
            row = np.asarray(value, dtype=float)
            if row.shape != (self.ndim,):
                raise SizeMismatchError(self.ndim, row.size, what="vector value")
            self._data[:] = row
        else:
            self._data[:] = self._checked_scalar(value)

    def copy(self) -> 'Grid':
        new = Grid(self._size, self._delta, self._value_type)
        new._data[...] = self._data
        return new

    def to_array(self) -> np.ndarray:
        """Copy of the contents with shape ``size`` (plus ``(ndim,)`` for vectors)."""
        return self._data.reshape(tuple(self._size) + self._data.shape[1:]).copy()

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def gradient(self, coord: CoordLike) -> Vector:
        """Central-difference gradient of a scalar field at ``coord``."""
        from gridfield.operators.differential import gradient
        return gradient(self, coord)

    def divergence(self, coord: CoordLike) -> float:
        """Central-difference divergence of a vector field at ``coord``."""
        from gridfield.operators.differential import divergence
        return divergence(self, coord)

    def laplacian(self, coord: CoordLike):
        """Five-point (in 2D) Laplacian at ``coord``."""
        from gridfield.operators.differential import laplacian
        return laplacian(self, coord)

    def get_at(self, position):
        """Multilinear interpolation at a physical position."""
        from gridfield.operators.interpolation import get_at
        return get_at(self, position)

    def advect(self, velocity: 'Grid', coord: CoordLike, dt: float):
        """Semi-Lagrangian backtrace of this field through ``velocity``."""
        from gridfield.operators.advection import advect
        return advect(self, velocity, coord, dt)
