"""2D visualization: scalar fields (image) and vector fields (quiver) on grids."""

import numpy as np


def _cell_centers(grid):
    x = np.arange(grid.size[0]) * grid.delta
    y = np.arange(grid.size[1]) * grid.delta
    return np.meshgrid(x, y, indexing='ij')


def plot_scalar_field_2d(
    grid,
    ax=None,
    cmap: str = 'viridis',
    colorbar: bool = True,
    label: str = 'value',
    title: str = None,
    **imshow_kwargs,
):
    """Image plot of a 2D scalar field.

    Parameters
    ----------
    grid : Grid
        2D scalar field. Axis 0 is drawn horizontally.
    ax : matplotlib Axes or None
        If None, a new figure is created.
    cmap : str
        Colormap name.
    colorbar : bool
        Whether to add a colorbar.
    label : str
        Colorbar label.
    title : str or None
        Plot title.
    **imshow_kwargs
        Forwarded to ``ax.imshow()``.

    Returns
    -------
    fig, ax
    """
    import matplotlib.pyplot as plt

    if grid.ndim != 2 or grid.is_vector_field:
        raise ValueError("plot_scalar_field_2d needs a 2D scalar field")

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()

    h = grid.delta
    extent = (-h / 2, (grid.size[0] - 0.5) * h, -h / 2, (grid.size[1] - 0.5) * h)
    im = ax.imshow(np.real(grid.to_array()).T, origin='lower', extent=extent,
                   cmap=cmap, **imshow_kwargs)
    if colorbar:
        fig.colorbar(im, ax=ax, label=label)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)

    return fig, ax


def plot_vector_field_2d(
    grid,
    ax=None,
    scale: float = None,
    title: str = None,
    **quiver_kwargs,
):
    """Quiver plot of a 2D vector field, one arrow per cell.

    Returns
    -------
    fig, ax
    """
    import matplotlib.pyplot as plt

    if grid.ndim != 2 or not grid.is_vector_field:
        raise ValueError("plot_vector_field_2d needs a 2D vector field")

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()

    x, y = _cell_centers(grid)
    u = grid.to_array()
    ax.quiver(x, y, u[..., 0], u[..., 1], scale=scale, **quiver_kwargs)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)

    return fig, ax
