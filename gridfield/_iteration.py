"""
Deterministic, lazy sweep over every cell of a grid.

Cells come out in strictly increasing row-major order (last axis fastest),
which is also the order of the grid's flat storage, so the iterator keeps a
running storage offset next to its odometer instead of re-flattening each
coordinate.
"""

from gridfield._coordinates import Coord


class GridIterator:
    """Single-pass iterator over ``(Coord, value)`` pairs of a grid.

    Parameters
    ----------
    grid : Grid
        The grid to sweep. Its shape is fixed, so the sweep is finite.
    mutable : bool
        If True yield ``(Coord, CellRef)`` pairs instead of values, for
        in-place updates during the sweep.

    Notes
    -----
    State is one cursor of ``ndim`` integers plus an offset, whatever the
    grid size. Once exhausted the iterator stays exhausted; create a new
    one with ``iter(grid)`` to sweep again.
    """

    def __init__(self, grid, mutable: bool = False):
        self._grid = grid
        self._mutable = mutable
        self._size = tuple(grid.size)
        self._cursor = [0] * len(self._size)
        self._offset = 0
        self._done = grid.capacity == 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        coord = Coord(self._cursor)
        if self._mutable:
            item = self._grid._ref_at(self._offset, coord)
        else:
            item = self._grid._read(self._offset)
        self._advance()
        return coord, item

    def _advance(self):
        # odometer: bump the last axis, carry into more significant axes
        self._offset += 1
        for axis in range(len(self._size) - 1, -1, -1):
            self._cursor[axis] += 1
            if self._cursor[axis] < self._size[axis]:
                return
            self._cursor[axis] = 0
        self._done = True

    def __length_hint__(self):
        if self._done:
            return 0
        return self._grid.capacity - self._offset
