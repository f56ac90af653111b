"""
Integer coordinates in D-dimensional index space.

A ``Coord`` is a plain tuple of signed integers. It carries no range
invariant: ``Coord((-1, 3))`` is a legal value and is how stencils probe
neighbors past the domain edge before the grid's bounds check rejects them.

Usage
-----
    from gridfield import Coord

    c = Coord((2, 3))
    c + Coord.unit(0, 2)        # Coord((3, 3))
    c.shifted(1, -1)            # Coord((2, 2))
    Coord.from_counts([4, 5], ndim=2)
"""

import operator
from typing import Iterable, Sequence

from gridfield._exceptions import SizeMismatchError


class Coord(tuple):
    """Fixed-length tuple of signed integers identifying a cell."""

    __slots__ = ()

    def __new__(cls, components: Iterable[int] = ()):
        return super().__new__(cls, (operator.index(c) for c in components))

    @classmethod
    def from_counts(cls, counts: Sequence[int], ndim: int) -> 'Coord':
        """Build a coordinate from a sequence of unsigned counts.

        Parameters
        ----------
        counts : sequence of int
            Non-negative components.
        ndim : int
            Required number of components.

        Raises
        ------
        SizeMismatchError
            If ``len(counts) != ndim``.
        ValueError
            If a component is negative.
        """
        counts = list(counts)
        if len(counts) != ndim:
            raise SizeMismatchError(ndim, len(counts), what="count sequence")
        for c in counts:
            if operator.index(c) < 0:
                raise ValueError(f"counts must be non-negative, got {c}")
        return cls(counts)

    @classmethod
    def origin(cls, ndim: int) -> 'Coord':
        """The all-zero coordinate."""
        return cls((0,) * ndim)

    @classmethod
    def unit(cls, axis: int, ndim: int) -> 'Coord':
        """Unit offset ``e_axis``."""
        if not 0 <= axis < ndim:
            raise ValueError(f"axis {axis} out of range for ndim={ndim}")
        return cls(1 if i == axis else 0 for i in range(ndim))

    @property
    def ndim(self) -> int:
        return len(self)

    def shifted(self, axis: int, step: int = 1) -> 'Coord':
        """Return the neighbor ``step`` cells away along ``axis``."""
        components = list(self)
        components[axis] += step
        return Coord(components)

    def _check_other(self, other) -> 'Coord':
        other = other if isinstance(other, Coord) else Coord(other)
        if len(other) != len(self):
            raise SizeMismatchError(len(self), len(other), what="coordinate")
        return other

    def __add__(self, other):
        other = self._check_other(other)
        return Coord(a + b for a, b in zip(self, other))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._check_other(other)
        return Coord(a - b for a, b in zip(self, other))

    def __rsub__(self, other):
        return self._check_other(other).__sub__(self)

    def __neg__(self):
        return Coord(-a for a in self)

    def __repr__(self):
        return f"Coord({tuple(self)!r})"
