"""
Convex hull computation.
"""

from .quickhull import compute_hull, hull_vertices, hull_stats

__all__ = ['compute_hull', 'hull_vertices', 'hull_stats']
