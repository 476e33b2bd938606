"""
Hullsep - Convex hulls and hull separation for 2D point sets.

This package provides tools for:
- Computing the convex hull of a point set (QuickHull), as edges that
  reference the original point objects
- Translating one point set so its hull clears another's, with an
  optional padding margin

Main Functions
--------------
compute_hull : Convex hull of a point set as a list of edges
displace_points : Move a point set clear of a fixed point set
separation_stats : Overlap and gap between two point sets' hulls
plot_separation : Draw two point sets and their hulls

Example
-------
>>> from hullsep import Point, displace_points

>>> fixed = [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
>>> moving = [Point(1, 1), Point(1, 2), Point(2, 1), Point(2, 2)]
>>> result = displace_points(fixed, moving, padding=0.5)
>>> result.separated
True
"""

from .core.geometry import EPS, Point, Edge, contains, edges_to_array, edges_to_polygon
from .hull.quickhull import compute_hull, hull_vertices, hull_stats
from .separation.separator import (
    SeparationStatus,
    SeparationResult,
    DisplacementVector,
    displace_points,
    separation_stats,
)
from .visualization.plotting import plot_hull, plot_separation

__all__ = [
    # Core geometry
    'EPS',
    'Point',
    'Edge',
    'contains',
    'edges_to_array',
    'edges_to_polygon',
    # Hull
    'compute_hull',
    'hull_vertices',
    'hull_stats',
    # Separation
    'SeparationStatus',
    'SeparationResult',
    'DisplacementVector',
    'displace_points',
    'separation_stats',
    # Visualization
    'plot_hull',
    'plot_separation',
]
