"""
Numeric capabilities required of a field's value type.

Each operator asks only for what it uses:

    get_at / advect : SupportsAdd, SupportsScale
    gradient        : SupportsSub, SupportsDivide  (scalar field only)
    divergence      : SupportsSub, SupportsDivide  (vector field only)
    laplacian       : SupportsAdd, SupportsSub, SupportsScale, SupportsDivide

``float``, ``int``, ``complex`` and ``Vector`` satisfy all of them.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsAdd(Protocol):
    def __add__(self, other): ...


@runtime_checkable
class SupportsSub(Protocol):
    def __sub__(self, other): ...


@runtime_checkable
class SupportsScale(Protocol):
    """Multiplication by a real scalar."""

    def __mul__(self, scalar): ...


@runtime_checkable
class SupportsDivide(Protocol):
    """Division by a real scalar."""

    def __truediv__(self, scalar): ...


def require_capabilities(grid, *capabilities, operation: str = "operator") -> None:
    """Raise TypeError unless the grid's value type has every capability."""
    sample = grid.default_value()
    missing = [c.__name__ for c in capabilities if not isinstance(sample, c)]
    if missing:
        raise TypeError(
            f"{operation} needs a value type supporting {', '.join(missing)}; "
            f"grid stores {grid.value_type.__name__}"
        )
