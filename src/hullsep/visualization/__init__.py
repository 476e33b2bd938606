"""
Visualization utilities.
"""

from .plotting import plot_hull, plot_separation

__all__ = ['plot_hull', 'plot_separation']
