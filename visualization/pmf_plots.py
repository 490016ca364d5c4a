"""
PMF plotting functions.

Debug views of lattice PMFs: bar charts for one dimension and heat maps for
two. Both place cells at their lattice coordinates, not grid indices.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional
from pmf_api import PMF


def plot_pmf_1d(pmf: PMF, ax: Optional[plt.Axes] = None, **bar_kwargs) -> plt.Axes:
    """
    Bar plot of a 1-D PMF.

    Parameters:
    -----------
    pmf : PMF
        Dimension-1 PMF
    ax : plt.Axes, optional
        Axes to draw into; a new figure is created if omitted
    **bar_kwargs
        Forwarded to ``ax.bar``

    Returns:
    --------
    plt.Axes
    """
    if pmf.dimension != 1:
        raise ValueError(f"plot_pmf_1d expects a 1-D PMF, got dimension {pmf.dimension}")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    x = np.arange(pmf.first_support[0], pmf.last_support[0] + 1)
    bar_kwargs.setdefault('width', 0.8)
    ax.bar(x, pmf.table, **bar_kwargs)
    ax.set_xlabel('x')
    ax.set_ylabel('P(X = x)')
    ax.set_title(f'PMF on [{pmf.first_support[0]}, {pmf.last_support[0]}]')
    ax.grid(True, alpha=0.3)
    return ax


def plot_pmf_2d(pmf: PMF, ax: Optional[plt.Axes] = None, cmap: str = 'viridis') -> plt.Axes:
    """
    Heat map of a 2-D PMF; axis 0 runs along y, axis 1 along x.

    Returns:
    --------
    plt.Axes
    """
    if pmf.dimension != 2:
        raise ValueError(f"plot_pmf_2d expects a 2-D PMF, got dimension {pmf.dimension}")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 5))

    first = pmf.first_support
    last = pmf.last_support
    extent = (first[1] - 0.5, last[1] + 0.5, last[0] + 0.5, first[0] - 0.5)
    image = ax.imshow(pmf.table, cmap=cmap, extent=extent, aspect='auto')
    ax.figure.colorbar(image, ax=ax, label='mass')
    ax.set_xlabel('x[1]')
    ax.set_ylabel('x[0]')
    ax.set_title(f'PMF on {first.tolist()} to {last.tolist()}')
    return ax
