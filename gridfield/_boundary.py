"""
Boundary cell identification.

The operators never pad the grid with ghost cells; instead a missing
neighbor takes the center value. These helpers mark the cells where that
substitution kicks in, i.e. those with a component at ``0`` or
``size_i - 1``.
"""

from gridfield._coordinates import Coord


def is_boundary_cell(grid, coord) -> bool:
    """True if ``coord`` is in the grid and touches the domain edge on any axis."""
    coord = grid._coord(coord)
    if not grid.contains(coord):
        return False
    return any(c == 0 or c == n - 1 for c, n in zip(coord, grid.size))


def boundary_cells(grid) -> set[Coord]:
    """Set of all cells on a face of the grid."""
    return {coord for coord, _ in grid if is_boundary_cell(grid, coord)}


def interior_cells(grid) -> set[Coord]:
    """Set of all cells with both neighbors present on every axis."""
    return {coord for coord, _ in grid if not is_boundary_cell(grid, coord)}
