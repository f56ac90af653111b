"""Exception types raised by gridfield."""


class GridError(Exception):
    """Base class for all gridfield errors."""


class SizeMismatchError(GridError, ValueError):
    """A sequence does not have the number of components the grid expects."""

    def __init__(self, expected: int, got: int, what: str = "sequence"):
        self.expected = expected
        self.got = got
        super().__init__(
            f"{what} has {got} components, expected {expected}"
        )


class OutOfGridError(GridError, IndexError):
    """A cell that must exist is outside the grid.

    Raised by the operators and by ``grid[coord]``; these are only defined
    for in-bounds cells. Plain ``Grid.get`` returns ``None`` instead.
    """

    def __init__(self, coord, size):
        self.coord = coord
        self.size = size
        super().__init__(f"coordinate {tuple(coord)} not in grid of size {tuple(size)}")
