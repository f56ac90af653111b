"""
Fixed-length real vectors used as the value type of vector fields.

``Vector`` wraps a 1-D float64 numpy array. Arithmetic is component-wise
and always returns a new ``Vector``; instances are never mutated in place,
so a value read out of a grid cannot alias the grid's storage.
"""

import numbers
from typing import Iterable, Union

import numpy as np

from gridfield._coordinates import Coord
from gridfield._exceptions import SizeMismatchError

Float = float


class Vector:
    """A D-component real vector.

    Parameters
    ----------
    components : iterable of float
        The components. Must be one-dimensional.

    Examples
    --------
    >>> Vector([1.0, 2.0]) + Vector([3.0, 4.0])
    Vector([4.0, 6.0])
    >>> 2.0 * Vector([1.0, 2.0])
    Vector([2.0, 4.0])
    """

    __slots__ = ('_c',)
    # numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, components: Iterable[float]):
        c = np.array(components, dtype=float)
        if c.ndim != 1:
            raise ValueError(f"Vector needs a flat sequence, got shape {c.shape}")
        c.setflags(write=False)
        self._c = c

    @classmethod
    def zeros(cls, ndim: int) -> 'Vector':
        return cls(np.zeros(ndim))

    @classmethod
    def from_coord_int(cls, coord: Coord, delta: float) -> 'Vector':
        """Physical position of a cell: ``coord_i * delta`` on every axis."""
        return cls(np.asarray(coord, dtype=float) * delta)

    @property
    def ndim(self) -> int:
        return self._c.shape[0]

    def __len__(self):
        return self._c.shape[0]

    def __iter__(self):
        return (float(x) for x in self._c)

    def __getitem__(self, i) -> float:
        return float(self._c[i])

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._c.copy()
        return self._c.astype(dtype)

    def tolist(self) -> list:
        return self._c.tolist()

    def _other(self, other: 'Vector') -> np.ndarray:
        if not isinstance(other, Vector):
            return NotImplemented
        if other.ndim != self.ndim:
            raise SizeMismatchError(self.ndim, other.ndim, what="vector")
        return other._c

    def __add__(self, other):
        o = self._other(other)
        if o is NotImplemented:
            return NotImplemented
        return Vector(self._c + o)

    def __sub__(self, other):
        o = self._other(other)
        if o is NotImplemented:
            return NotImplemented
        return Vector(self._c - o)

    def __neg__(self):
        return Vector(-self._c)

    def __mul__(self, scalar: Union[float, int]):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self._c * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Union[float, int]):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vector(self._c / scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.ndim == other.ndim and bool(np.array_equal(self._c, other._c))

    __hash__ = None

    def isclose(self, other: 'Vector', rtol: float = 1e-09, atol: float = 0.0) -> bool:
        """Approximate equality, component-wise (see ``numpy.allclose``)."""
        o = self._other(other)
        if o is NotImplemented:
            raise TypeError(f"cannot compare Vector with {type(other).__name__}")
        return bool(np.allclose(self._c, o, rtol=rtol, atol=atol))

    def __repr__(self):
        return f"Vector({self._c.tolist()!r})"
