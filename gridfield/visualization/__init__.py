"""Visualization utilities for grid fields.

Submodules
----------
raster        : packed-RGB frame buffer for a 2D scalar field
matplotlib_2d : 2D scalar field image and vector field quiver plots
"""

from gridfield.visualization.raster import (
    OUT_OF_GRID_COLOR,
    density_to_color,
    render_scalar_field,
)
from gridfield.visualization.matplotlib_2d import (
    plot_scalar_field_2d,
    plot_vector_field_2d,
)

__all__ = [
    'OUT_OF_GRID_COLOR',
    'density_to_color',
    'render_scalar_field',
    'plot_scalar_field_2d',
    'plot_vector_field_2d',
]
