"""
Multilinear interpolation of grid fields at continuous positions.

A physical position ``x`` maps to fractional index ``x / delta``, clamped to
``[0, size_i - 1]``. Positions outside the grid therefore sample the nearest
boundary value instead of failing. The value is the weighted sum of the
``2**D`` corners of the cell containing the clamped position.

``sample_positions`` does the same for many positions at once with
``scipy.interpolate.RegularGridInterpolator``.
"""

import math
from typing import Sequence, Union

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from gridfield._coordinates import Coord
from gridfield._exceptions import SizeMismatchError
from gridfield._numeric import SupportsAdd, SupportsScale, require_capabilities
from gridfield._vector import Vector

PositionLike = Union[Vector, Sequence[float]]


def _position(grid, position: PositionLike) -> list:
    position = [float(x) for x in position]
    if len(position) != grid.ndim:
        raise SizeMismatchError(grid.ndim, len(position), what="position")
    if any(math.isnan(x) for x in position):
        raise ValueError(f"position has a NaN component: {position}")
    return position


def cell_weights(grid, position: PositionLike):
    """Lower corner and per-axis fractional weights for ``position``.

    Returns
    -------
    lower : list of int
        Lower-corner index per axis, at most ``size_i - 2``.
    upper : list of int
        Upper-corner index per axis (equal to ``lower`` on a one-cell axis).
    frac : list of float
        Weight of the upper corner per axis, in ``[0, 1]``.
    """
    lower, upper, frac = [], [], []
    for x, n in zip(_position(grid, position), grid.size):
        g = min(max(x / grid.delta, 0.0), float(n - 1))
        lo = min(int(math.floor(g)), max(n - 2, 0))
        lower.append(lo)
        upper.append(min(lo + 1, n - 1))
        frac.append(g - lo)
    return lower, upper, frac


def get_at(grid, position: PositionLike):
    """Interpolated field value at a physical position.

    Parameters
    ----------
    grid : Grid
        Scalar or vector field.
    position : Vector or sequence of float
        Physical coordinates, one per axis.

    Returns
    -------
    float or Vector
        Same value type as the grid.

    Raises
    ------
    ValueError
        If a component of ``position`` is NaN. Infinite components clamp
        like any other position outside the grid.

    Examples
    --------
    >>> f = Grid((3, 3), delta=5.0)
    >>> LinearScalarField(0.0, [0.7, -0.3]).apply(f)
    >>> v = get_at(f, [1.3, 3.7])     # 0.7 * 1.3 - 0.3 * 3.7
    """
    require_capabilities(grid, SupportsAdd, SupportsScale, operation="get_at")
    lower, upper, frac = cell_weights(grid, position)

    total = grid.default_value()
    for corner in range(1 << grid.ndim):
        weight = 1.0
        index = []
        for axis in range(grid.ndim):
            if corner >> axis & 1:
                weight *= frac[axis]
                index.append(upper[axis])
            else:
                weight *= 1.0 - frac[axis]
                index.append(lower[axis])
        if weight == 0.0:
            continue
        total = total + grid[Coord(index)] * weight
    return total


def sample_positions(grid, positions) -> np.ndarray:
    """Interpolate a field at many positions at once.

    Same clamping as :func:`get_at`.

    Parameters
    ----------
    grid : Grid
        Scalar or vector field.
    positions : array_like of shape (n, ndim)

    Returns
    -------
    np.ndarray
        Shape ``(n,)`` for scalar fields, ``(n, ndim)`` for vector fields.
    """
    positions = np.atleast_2d(np.asarray(positions, dtype=float))
    if positions.shape[1] != grid.ndim:
        raise SizeMismatchError(grid.ndim, positions.shape[1], what="position")
    if np.isnan(positions).any():
        raise ValueError("positions contain NaN components")

    if any(n < 2 for n in grid.size):
        # RegularGridInterpolator needs two samples per axis
        values = [get_at(grid, p) for p in positions]
        return np.array([np.asarray(v) for v in values])

    upper_bounds = (np.asarray(grid.size) - 1) * grid.delta
    clamped = np.clip(positions, 0.0, upper_bounds)
    axes = [np.arange(n) * grid.delta for n in grid.size]
    interpolator = RegularGridInterpolator(axes, grid.to_array(), method="linear")
    return interpolator(clamped)
