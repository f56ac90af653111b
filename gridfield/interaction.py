"""
Pointer input applied to a density grid.

The event loop that produces pointer positions lives outside gridfield;
these helpers turn a pixel position into a cell and nudge that cell.
"""

from gridfield._coordinates import Coord


def pixel_to_cell(px: int, py: int, cell_size: int) -> Coord:
    """Cell under pixel ``(px, py)`` when each cell is ``cell_size`` pixels wide."""
    return Coord((int(px) // cell_size, int(py) // cell_size))


def nudge_cell(grid, coord, amount: float = 0.05, ceiling: float = 1.0) -> bool:
    """Raise the value of one cell by ``amount``, capped at ``ceiling``.

    Returns False, leaving the grid untouched, if ``coord`` is outside it.
    """
    ref = grid.get_mut(coord)
    if ref is None:
        return False
    ref.update(lambda value: min(value + amount, ceiling))
    return True
