"""
QuickHull Module

Computes the convex hull of a 2D point set by divide and conquer:
- The leftmost and rightmost points split the set into two halves
- Each baseline recurses on the point farthest outside it
- A baseline with nothing outside is a hull edge

Edges hold the original point objects, so callers can map hull vertices
back to their input. Edges are emitted with the hull interior on their
right (clockwise traversal).
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.geometry import (
    Edge,
    as_point_list,
    signed_distance,
    edges_to_array,
    polygon_area,
)


logger = logging.getLogger(__name__)


def _find_most_distant_from_baseline(
    baseline: Edge,
    points: Sequence
) -> Tuple[Optional[object], list]:
    """
    Split off the points lying outside (left of) a baseline.

    Parameters
    ----------
    baseline : Edge
        Directed baseline (p0, p1).
    points : sequence
        Candidate points.

    Returns
    -------
    tuple
        (farthest outside point or None, list of all outside points).
    """
    p0, p1 = baseline
    max_d = 0.0
    max_pt = None
    outside = []

    for pt in points:
        distance = signed_distance(p0, p1, pt)
        if distance > 0:
            outside.append(pt)
            # Strict comparison: first-seen wins on ties
            if distance > max_d:
                max_d = distance
                max_pt = pt

    return max_pt, outside


def _build_hull(baseline: Edge, points: Sequence) -> List[Edge]:
    max_pt, outside = _find_most_distant_from_baseline(baseline, points)

    if max_pt is None:
        return [baseline]

    return (
        _build_hull((baseline[0], max_pt), outside) +
        _build_hull((max_pt, baseline[1]), outside)
    )


def compute_hull(points: Iterable) -> List[Edge]:
    """
    Compute the convex hull of a point set.

    Parameters
    ----------
    points : iterable
        Objects with numeric `x` and `y` attributes. A mapping contributes
        its values. Duplicates are allowed and order is irrelevant except
        for tie-breaking.

    Returns
    -------
    list of Edge
        Hull edges as (start, end) pairs of the input objects. Empty when
        there are fewer than 3 points or all points are collinear.
    """
    pts = as_point_list(points)

    if len(pts) < 3:
        logger.debug("Need at least 3 points for a hull, got %d", len(pts))
        return []

    min_pt = max_pt = pts[0]
    for pt in pts[1:]:
        if pt.x < min_pt.x:
            min_pt = pt
        if pt.x > max_pt.x:
            max_pt = pt

    edges = _build_hull((min_pt, max_pt), pts) + _build_hull((max_pt, min_pt), pts)

    if len(edges) < 3:
        logger.debug("All %d points are collinear, no hull", len(pts))
        return []

    return edges


def hull_vertices(edges: Sequence[Edge]) -> list:
    """
    Distinct hull vertices in edge emission order.

    Each vertex is taken from the start of its edge; identity, not
    coordinates, decides what is distinct.
    """
    seen = set()
    vertices = []
    for edge in edges:
        if id(edge[0]) not in seen:
            seen.add(id(edge[0]))
            vertices.append(edge[0])
    return vertices


def hull_stats(edges: Sequence[Edge]) -> dict:
    """
    Compute diagnostic statistics for a hull.

    Parameters
    ----------
    edges : sequence of Edge
        Hull edges from compute_hull().

    Returns
    -------
    dict
        Statistics including:
        - num_edges: Number of hull edges
        - num_vertices: Number of distinct hull vertices
        - area: Enclosed area
        - perimeter: Total edge length
        - centroid: Mean of the hull vertices, or None for an empty hull
    """
    poly = edges_to_array(edges)
    perimeter = sum(
        float(np.hypot(e[1].x - e[0].x, e[1].y - e[0].y)) for e in edges
    )

    return {
        'num_edges': len(edges),
        'num_vertices': len(hull_vertices(edges)),
        'area': float(polygon_area(poly)),
        'perimeter': perimeter,
        'centroid': np.mean(poly, axis=0) if len(poly) else None,
    }
