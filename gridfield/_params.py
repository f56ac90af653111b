"""
Parameter objects for building grids and frame buffers.

Usage
-----
    from gridfield import GridParams

    params = GridParams.from_dict({"size": [64, 64], "delta": 0.05})
    density = params.build()
    velocity = GridParams(size=(64, 64), delta=0.05, value_kind="vector").build()
"""

from dataclasses import dataclass, fields
from typing import Any, Sequence

from gridfield._grid import Grid
from gridfield._vector import Vector

_VALUE_KINDS = {
    'scalar': float,
    'integer': int,
    'complex': complex,
    'vector': Vector,
}


@dataclass
class GridParams:
    """Parameters of a grid field.

    Attributes
    ----------
    size : sequence of int
        Cells per axis.
    delta : float
        Uniform cell spacing.
    value_kind : str
        One of ``"scalar"``, ``"integer"``, ``"complex"``, ``"vector"``.
    """
    size: Sequence[int]
    delta: float = 1.0
    value_kind: str = 'scalar'

    def __post_init__(self):
        self.size = tuple(self.size)

    @property
    def ndim(self) -> int:
        return len(self.size)

    @property
    def value_type(self) -> type:
        return _VALUE_KINDS[self.value_kind]

    def validate(self) -> 'GridParams':
        """Raise ValueError for unusable parameters. Returns self."""
        if self.value_kind not in _VALUE_KINDS:
            raise ValueError(
                f"Unknown value_kind {self.value_kind!r}. "
                f"Available: {list(_VALUE_KINDS)}"
            )
        if not self.size or any(int(n) <= 0 for n in self.size):
            raise ValueError(f"size must be non-empty and positive, got {self.size}")
        if not self.delta > 0:
            raise ValueError(f"delta must be positive, got {self.delta}")
        return self

    def build(self) -> Grid:
        """Construct an all-zero grid with these parameters."""
        self.validate()
        return Grid(self.size, self.delta, self.value_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'GridParams':
        """Build from a plain mapping (e.g. a parsed config section).

        Unknown keys raise TypeError.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise TypeError(f"unknown grid parameters: {sorted(unknown)}")
        return cls(**data).validate()


@dataclass
class DisplayParams:
    """Frame buffer layout: ``width x height`` cells of ``cell_size`` pixels."""
    width: int = 20
    height: int = 20
    cell_size: int = 32

    @property
    def window_size(self) -> tuple[int, int]:
        """``(window_width, window_height)`` in pixels."""
        return self.width * self.cell_size, self.height * self.cell_size

    def grid_params(self, delta: float = 1.0) -> GridParams:
        """Density grid matching this display, axis 0 = x, axis 1 = y."""
        return GridParams(size=(self.width, self.height), delta=delta)
