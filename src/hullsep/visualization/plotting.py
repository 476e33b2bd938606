"""
Visualization utilities for hull plotting.

Contains plotting functions for:
- A single point set with its convex hull
- Two point sets before/after separation
"""

from typing import Iterable, Optional, Sequence, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from ..core.geometry import Edge, edges_to_array, points_to_array
from ..hull.quickhull import compute_hull
from ..separation.separator import separation_stats

if TYPE_CHECKING:
    from ..separation.separator import SeparationResult


def plot_hull(
    edges: Sequence[Edge],
    points: Optional[Iterable] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Convex Hull",
    color: str = 'steelblue',
    label: Optional[str] = None
) -> plt.Axes:
    """
    Visualize a convex hull and, optionally, its point set.

    Parameters
    ----------
    edges : sequence of Edge
        Hull edges from compute_hull().
    points : iterable, optional
        Points to scatter alongside the hull.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    color : str
        Color for points, outline and fill.
    label : str, optional
        Legend label for the hull outline.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    if points is not None:
        coords = points_to_array(points)
        if len(coords):
            ax.scatter(coords[:, 0], coords[:, 1], c=color, alpha=0.6, s=20, zorder=2)

    poly = edges_to_array(edges)
    if len(poly):
        closed_poly = np.vstack([poly, poly[0]])
        ax.plot(closed_poly[:, 0], closed_poly[:, 1], '-', color=color,
                linewidth=2, zorder=3, label=label)
        ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color=color, zorder=1)
        ax.scatter(poly[:, 0], poly[:, 1], c='black', s=40, marker='s', zorder=4)

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_separation(
    fixed: Iterable,
    displaced: Iterable,
    result: Optional["SeparationResult"] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Separated Hulls",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a fixed and a displaced point set with their hulls.

    Parameters
    ----------
    fixed : iterable
        Points of the fixed set.
    displaced : iterable
        Points of the displaced set.
    result : SeparationResult, optional
        Result from displace_points(); adds the applied translation to the
        stats box.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_stats : bool
        Whether to show gap and overlap statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    plot_hull(compute_hull(fixed), fixed, ax=ax, title=title,
              color='steelblue', label='Fixed')
    plot_hull(compute_hull(displaced), displaced, ax=ax, title=title,
              color='coral', label='Displaced')

    if show_stats:
        stats = separation_stats(fixed, displaced)
        gap = "n/a" if stats['gap'] is None else f"{stats['gap']:.3f}"
        stats_text = (
            f"Gap: {gap}\n"
            f"Overlap area: {stats['overlap_area']:.3f}"
        )
        if result is not None:
            stats_text += (
                f"\nStatus: {result.status.value}\n"
                f"Shift: ({result.dx:.3f}, {result.dy:.3f})"
            )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')

    return ax
