"""
Initial conditions that seed grid fields.

Each IC writes every cell of a grid in place through ``Grid.iter_mut``.
ICs can be composed via CompositeIC.

Usage
-----
    from gridfield.initial_conditions import CompositeIC, UniformValue, LinearScalarField

    p = Grid((32, 32), delta=0.1)
    LinearScalarField(offset=1.0, slope=[0.0, -9.81]).apply(p)

    u = Grid((32, 32), delta=0.1, value_type=Vector)
    LinearVectorField([[0.0, -1.0], [1.0, 0.0]]).apply(u)   # solid rotation
"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence

import numpy as np

from gridfield._exceptions import SizeMismatchError
from gridfield._vector import Vector


class InitialCondition(ABC):
    """Abstract base for initial conditions on a grid."""

    @abstractmethod
    def apply(self, grid) -> None:
        """Write the initial value of every cell of ``grid`` in place."""


class CompositeIC(InitialCondition):
    """Apply multiple ICs in sequence (later ICs overwrite earlier ones)."""

    def __init__(self, *ics: InitialCondition):
        self.ics = ics

    def apply(self, grid) -> None:
        for ic in self.ics:
            ic.apply(grid)


class UniformValue(InitialCondition):
    """Set every cell to ``value`` (a number or a Vector)."""

    def __init__(self, value):
        self.value = value

    def apply(self, grid) -> None:
        grid.fill(self.value)


class LinearScalarField(InitialCondition):
    """Set f = offset + slope . x on a scalar field.

    Parameters
    ----------
    offset : float
        Value at the origin.
    slope : sequence of float
        Gradient, one component per axis.
    """

    def __init__(self, offset: float, slope: Sequence[float]):
        self.offset = offset
        self.slope = np.asarray(slope, dtype=float)

    def apply(self, grid) -> None:
        if self.slope.shape != (grid.ndim,):
            raise SizeMismatchError(grid.ndim, self.slope.size, what="slope")
        for coord, ref in grid.iter_mut():
            x = np.asarray(grid.position_of(coord))
            ref.set(self.offset + float(self.slope @ x))


class LinearVectorField(InitialCondition):
    """Set u = K x on a vector field, K an ``ndim x ndim`` matrix.

    The divergence of this field is ``trace(K)``.
    """

    def __init__(self, matrix):
        self.matrix = np.asarray(matrix, dtype=float)

    def apply(self, grid) -> None:
        if self.matrix.shape != (grid.ndim, grid.ndim):
            raise SizeMismatchError(grid.ndim, self.matrix.shape[0], what="matrix")
        for coord, ref in grid.iter_mut():
            ref.set(Vector(self.matrix @ np.asarray(grid.position_of(coord))))


class CustomFieldIC(InitialCondition):
    """Set each cell to ``fn(position)``, position a Vector."""

    def __init__(self, fn: Callable[[Vector], object]):
        self.fn = fn

    def apply(self, grid) -> None:
        for coord, ref in grid.iter_mut():
            ref.set(self.fn(grid.position_of(coord)))
