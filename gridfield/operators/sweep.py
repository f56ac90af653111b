"""
Full-grid operator sweeps.

Apply a per-cell operator to every cell of a grid, in iteration order, and
collect the results in a new grid of the same size and spacing. This is
the building block for a solver pass; it does not step time.

Usage
-----
    from gridfield.operators import apply_operator, advect_field

    lap = apply_operator(p, "laplacian")         # scalar field
    grad = apply_operator(p, "gradient")         # vector field
    p_next = advect_field(p, u, dt=0.01)
"""

import logging
from typing import Callable, Optional, Union

from gridfield._grid import Grid
from gridfield._vector import Vector
from gridfield.operators._registry import MethodRegistry
from gridfield.operators.advection import advect
from gridfield.operators.differential import divergence, gradient, laplacian

logger = logging.getLogger(__name__)

field_operators = MethodRegistry("field operator")
field_operators.register("gradient", gradient)
field_operators.register("divergence", divergence)
field_operators.register("laplacian", laplacian)


def apply_operator(grid: Grid, op: Union[str, Callable], output_type: Optional[type] = None,
                   **op_kwargs) -> Grid:
    """Evaluate ``op(grid, coord, **op_kwargs)`` at every cell.

    Parameters
    ----------
    grid : Grid
        Input field.
    op : str or callable
        Name in ``field_operators`` or a callable with the same signature.
    output_type : type or None
        Value type of the result grid. If None it is ``Vector`` when the
        first result is a ``Vector`` and ``float`` otherwise (``complex``
        for complex results).

    Returns
    -------
    Grid
        New grid with the same size and delta as ``grid``.
    """
    fn = field_operators[op] if isinstance(op, str) else op
    name = op if isinstance(op, str) else getattr(op, '__name__', repr(op))

    out = None
    for coord, _ in grid:
        value = fn(grid, coord, **op_kwargs)
        if out is None:
            out = Grid(grid.size, grid.delta, output_type or _infer_type(value))
        out[coord] = value

    logger.debug("applied %s over %d cells", name, grid.capacity)
    return out


def advect_field(field: Grid, velocity: Grid, dt: float) -> Grid:
    """Semi-Lagrangian advection of every cell of ``field``.

    Interpolated values are fractional, so an integer field advects into a
    float field; other value types are kept.
    """
    out = None
    for coord, _ in field:
        value = advect(field, velocity, coord, dt)
        if out is None:
            out = Grid(field.size, field.delta, _infer_type(value))
        out[coord] = value
    logger.debug("advected %d cells with dt=%g", field.capacity, dt)
    return out


def _infer_type(value) -> type:
    if isinstance(value, Vector):
        return Vector
    if isinstance(value, complex):
        return complex
    return float
