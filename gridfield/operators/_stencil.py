"""Neighbor sampling shared by the finite-difference operators."""

from gridfield._exceptions import OutOfGridError


def center_value(grid, coord):
    """Value at ``coord``; the operators are only defined for existing cells."""
    coord = grid._coord(coord)
    value = grid.get(coord)
    if value is None:
        raise OutOfGridError(coord, grid.size)
    return coord, value


def axis_neighbors(grid, coord, axis: int, center):
    """Return ``(value(coord + e_axis), value(coord - e_axis))``.

    A neighbor outside the grid is replaced by ``center``, which gives a
    zero-gradient (Neumann) condition at the domain edge without ghost cells.
    """
    plus = grid.get(coord.shifted(axis, 1))
    minus = grid.get(coord.shifted(axis, -1))
    if plus is None:
        plus = center
    if minus is None:
        minus = center
    return plus, minus
