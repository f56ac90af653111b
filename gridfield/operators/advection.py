"""
Semi-Lagrangian advection.

The value carried into a cell over one step ``dt`` is the field sampled at
the point a particle occupied a step earlier:

    x_src = x(c) - u(c) * dt
    f_new(c) = f(x_src)            (multilinear, clamped to the domain)

Backtraces leaving the domain inherit the clamping of ``get_at``.
"""

from gridfield._exceptions import SizeMismatchError
from gridfield._numeric import SupportsAdd, SupportsScale, require_capabilities
from gridfield.operators._stencil import center_value
from gridfield.operators.interpolation import get_at


def backtrace(field, velocity, coord, dt: float):
    """Physical position reached by tracing ``coord`` back over ``dt``."""
    if not velocity.is_vector_field:
        raise TypeError("advection needs a vector-valued velocity grid")
    if velocity.ndim != field.ndim:
        raise SizeMismatchError(field.ndim, velocity.ndim, what="velocity grid")
    coord, u = center_value(velocity, coord)
    return field.position_of(coord) - u * dt


def advect(field, velocity, coord, dt: float):
    """Advected value of ``field`` at cell ``coord``.

    Parameters
    ----------
    field : Grid
        Scalar or vector field being transported.
    velocity : Grid
        Vector field with the same number of axes.
    coord : Coord or sequence of int
        Destination cell. Must be inside ``velocity``.
    dt : float
        Time step.

    Raises
    ------
    OutOfGridError
        If ``coord`` is not a cell of the velocity grid.
    """
    require_capabilities(field, SupportsAdd, SupportsScale, operation="advect")
    return get_at(field, backtrace(field, velocity, coord, dt))
