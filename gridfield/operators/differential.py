"""
Finite-difference gradient, divergence and Laplacian on regular grids.

All three use the immediate axis-aligned neighbors of a cell. A neighbor
outside the grid takes the center value, so at a domain edge the central
difference degenerates to half the one-sided slope:

    interior:  (f[i+1] - f[i-1]) / (2 h)
    edge i=0:  (f[1]   - f[0])   / (2 h)

Usage
-----
    from gridfield.operators.differential import gradient, divergence, laplacian

    g = gradient(p, (3, 4))          # Vector, p a scalar field
    d = divergence(u, (3, 4))        # float,  u a vector field
    l = laplacian(p, (3, 4))         # same value type as p
"""

from gridfield._numeric import (
    SupportsAdd,
    SupportsDivide,
    SupportsScale,
    SupportsSub,
    require_capabilities,
)
from gridfield._vector import Vector
from gridfield.operators._stencil import axis_neighbors, center_value


def gradient(grid, coord) -> Vector:
    """Central-difference gradient of a scalar field.

    Parameters
    ----------
    grid : Grid
        Scalar field.
    coord : Coord or sequence of int
        Cell at which to evaluate. Must be inside the grid.

    Returns
    -------
    Vector
        ``ndim`` components, ``(f(c + e_i) - f(c - e_i)) / (2 delta)``.

    Raises
    ------
    OutOfGridError
        If ``coord`` is not a cell of the grid.
    TypeError
        If the grid is a vector field.
    """
    if grid.is_vector_field:
        raise TypeError("gradient is defined for scalar fields only")
    require_capabilities(grid, SupportsSub, SupportsDivide, operation="gradient")

    coord, center = center_value(grid, coord)
    two_h = 2.0 * grid.delta
    components = []
    for axis in range(grid.ndim):
        plus, minus = axis_neighbors(grid, coord, axis, center)
        components.append((plus - minus) / two_h)
    return Vector(components)


def divergence(grid, coord) -> float:
    """Central-difference divergence of a vector field.

    Sums, over axes ``i``, the central difference of component ``i`` along
    axis ``i``. Missing neighbors are substituted per axis.

    Raises
    ------
    OutOfGridError
        If ``coord`` is not a cell of the grid.
    TypeError
        If the grid is a scalar field.
    """
    if not grid.is_vector_field:
        raise TypeError("divergence is defined for vector fields only")

    coord, center = center_value(grid, coord)
    two_h = 2.0 * grid.delta
    total = 0.0
    for axis in range(grid.ndim):
        plus, minus = axis_neighbors(grid, coord, axis, center)
        total += (plus[axis] - minus[axis]) / two_h
    return total


def laplacian(grid, coord):
    """Standard ``2 D + 1`` point Laplacian of a scalar or vector field.

    ``(sum_i (f(c + e_i) + f(c - e_i)) - 2 D f(c)) / delta**2``

    At the domain edge the substituted neighbor changes the effective
    stencil coefficients.

    Raises
    ------
    OutOfGridError
        If ``coord`` is not a cell of the grid.
    """
    require_capabilities(grid, SupportsAdd, SupportsSub, SupportsScale, SupportsDivide,
                         operation="laplacian")

    coord, center = center_value(grid, coord)
    total = center * (-2 * grid.ndim)
    for axis in range(grid.ndim):
        plus, minus = axis_neighbors(grid, coord, axis, center)
        total = total + (plus + minus)
    return total / (grid.delta * grid.delta)
