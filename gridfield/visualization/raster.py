"""
Rasterize a 2D scalar field into a packed-RGB frame buffer.

Each cell ``(x, y)`` becomes a ``cell_size x cell_size`` block of grey
pixels; pixel ``(px, py)`` lives at ``buffer[py, px]``. Cells the grid does
not have are painted ``OUT_OF_GRID_COLOR``.
"""

import numpy as np

from gridfield._coordinates import Coord

OUT_OF_GRID_COLOR = 0xFF0000FF


def density_to_color(density: float) -> int:
    """Grey level ``0x00RRGGBB`` for a density in ``[0, 1]``."""
    intensity = int(min(max(density * 255.0, 0.0), 255.0))
    return (intensity << 16) | (intensity << 8) | intensity


def render_scalar_field(grid, window_width: int, window_height: int,
                        cell_size: int = 32) -> np.ndarray:
    """Draw a 2D scalar field into a new ``uint32`` buffer.

    Parameters
    ----------
    grid : Grid
        2D scalar field, axis 0 horizontal, axis 1 vertical.
    window_width, window_height : int
        Buffer size in pixels. Partial cells at the right/bottom edge are
        clipped.
    cell_size : int
        Pixels per cell side.

    Returns
    -------
    np.ndarray
        Shape ``(window_height, window_width)``, dtype ``uint32``.
    """
    if grid.ndim != 2 or grid.is_vector_field:
        raise ValueError("render_scalar_field needs a 2D scalar field")

    buffer = np.zeros((window_height, window_width), dtype=np.uint32)
    nx = -(-window_width // cell_size)
    ny = -(-window_height // cell_size)
    for y in range(ny):
        for x in range(nx):
            density = grid.get(Coord((x, y)))
            color = OUT_OF_GRID_COLOR if density is None else density_to_color(density)
            buffer[y * cell_size:(y + 1) * cell_size,
                   x * cell_size:(x + 1) * cell_size] = color
    return buffer
