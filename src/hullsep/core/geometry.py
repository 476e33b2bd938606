"""
Core geometry operations for 2D point sets and hull edges.

Contains utility functions for:
- Mutable points and directed edges
- Signed distance to a directed line
- Point-to-segment distance and closest point
- Polygon area and vertex ordering (CCW)
- numpy/Shapely conversions
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry import Point as ShapelyPoint


# Numerical tolerance for floating point comparisons
EPS = 1e-10


@dataclass(eq=False)
class Point:
    """
    Mutable 2D point.

    Equality and hashing are by identity, so two points at the same
    coordinates stay distinct and hull edges can be traced back to the
    exact objects that were passed in.

    Attributes
    ----------
    x : float
        Horizontal coordinate.
    y : float
        Vertical coordinate.
    """
    x: float
    y: float


# A directed hull segment holding the original point objects
Edge = Tuple[Any, Any]


def as_point_list(points: Iterable) -> list:
    """
    Materialize a point collection as a list.

    A mapping contributes its values, any other iterable its items. The
    point objects themselves are never copied.
    """
    if isinstance(points, Mapping):
        return list(points.values())
    return list(points)


def signed_distance(line_pt1, line_pt2, pt) -> float:
    """
    Scaled signed distance of a point from the directed line (line_pt1, line_pt2).

    Positive values lie to the left of the line direction. The value is the
    2D cross product, i.e. the true distance multiplied by the line length.
    """
    vx = line_pt1.y - line_pt2.y
    vy = line_pt2.x - line_pt1.x
    return vx * (pt.x - line_pt1.x) + vy * (pt.y - line_pt1.y)


def dist2(pt1, pt2) -> float:
    """Squared Euclidean distance between two points."""
    return (pt1.x - pt2.x) ** 2 + (pt1.y - pt2.y) ** 2


def _segment_parameter(pt, v1, v2) -> float:
    l2 = dist2(v1, v2)
    if l2 == 0:
        return 0.0
    t = ((pt.x - v1.x) * (v2.x - v1.x) + (pt.y - v1.y) * (v2.y - v1.y)) / l2
    return min(1.0, max(0.0, t))


def closest_point_on_segment(pt, v1, v2) -> Tuple[float, float]:
    """
    Closest point of segment (v1, v2) to pt.

    Parameters
    ----------
    pt : Point
        Query point.
    v1, v2 : Point
        Segment endpoints. A zero-length segment collapses to v1.

    Returns
    -------
    tuple of float
        (x, y) coordinates of the closest point.
    """
    t = _segment_parameter(pt, v1, v2)
    return (v1.x + t * (v2.x - v1.x), v1.y + t * (v2.y - v1.y))


def dist_to_segment_squared(pt, v1, v2) -> float:
    """Squared distance from pt to segment (v1, v2)."""
    cx, cy = closest_point_on_segment(pt, v1, v2)
    return (pt.x - cx) ** 2 + (pt.y - cy) ** 2


def dist_to_segment(pt, v1, v2) -> float:
    """Distance from pt to segment (v1, v2)."""
    return float(np.sqrt(dist_to_segment_squared(pt, v1, v2)))


def points_to_array(points: Iterable) -> np.ndarray:
    """
    Convert a point collection to a numpy array of shape (N, 2).
    """
    pts = as_point_list(points)
    if not pts:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([[pt.x, pt.y] for pt in pts], dtype=np.float64)


def points_from_array(coords: np.ndarray) -> List[Point]:
    """
    Build mutable points from an array of shape (N, 2).

    Parameters
    ----------
    coords : np.ndarray
        Coordinates of shape (N, 2).

    Returns
    -------
    list of Point
        One new point per row.
    """
    coords = np.asarray(coords, dtype=np.float64)

    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {coords.shape}")

    return [Point(float(x), float(y)) for x, y in coords]


def polygon_area(poly: np.ndarray) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    float
        Area of the polygon.
    """
    n = len(poly)
    if n < 3:
        return 0.0

    x = poly[:, 0]
    y = poly[:, 1]
    return 0.5 * abs(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def ensure_ccw(poly: np.ndarray) -> np.ndarray:
    """
    Ensure polygon vertices are in counter-clockwise order.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    np.ndarray
        Polygon vertices in CCW order.
    """
    if len(poly) < 3:
        return poly

    x = poly[:, 0]
    y = poly[:, 1]
    signed_area = 0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y)

    if signed_area < 0:
        return poly[::-1].copy()
    return poly


def _walk_edges(edges: Sequence[Edge]) -> list:
    # Follow edge[0] -> edge[1] links; returns [] if they do not close a single ring
    successor = {id(e[0]): e[1] for e in edges}
    start = edges[0][0]
    ring = [start]
    current = successor.get(id(start))
    while current is not None and current is not start:
        if len(ring) > len(edges):
            return []
        ring.append(current)
        current = successor.get(id(current))
    if current is None or len(ring) != len(edges):
        return []
    return ring


def edges_to_array(edges: Sequence[Edge]) -> np.ndarray:
    """
    Convert hull edges to an ordered vertex array.

    Edges are chained end to start into a ring. When they do not form a
    single ring, the distinct first endpoints are sorted by angle around
    their mean instead, which is exact for convex input.

    Parameters
    ----------
    edges : sequence of Edge
        Directed hull edges.

    Returns
    -------
    np.ndarray
        Hull vertices of shape (M, 2) in counter-clockwise order.
    """
    if len(edges) == 0:
        return np.zeros((0, 2), dtype=np.float64)

    ring = _walk_edges(edges)
    if ring:
        return ensure_ccw(points_to_array(ring))

    seen = {}
    for edge in edges:
        seen.setdefault(id(edge[0]), edge[0])
    coords = points_to_array(seen.values())
    center = np.mean(coords, axis=0)
    angles = np.arctan2(coords[:, 1] - center[1], coords[:, 0] - center[0])
    return coords[np.argsort(angles, kind='stable')]


def edges_to_polygon(edges: Sequence[Edge]) -> Polygon:
    """
    Build a Shapely polygon from hull edges.

    Parameters
    ----------
    edges : sequence of Edge
        Directed hull edges (at least 3).

    Returns
    -------
    Polygon
        The hull as a Shapely polygon.
    """
    if len(edges) < 3:
        raise ValueError(f"Need at least 3 edges to build a polygon, got {len(edges)}")
    return Polygon(edges_to_array(edges))


def contains(poly: np.ndarray, points: np.ndarray, tolerance: float = EPS) -> np.ndarray:
    """
    Test if points are inside or on a polygon.

    Points within `tolerance` of the boundary count as on it.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    points : np.ndarray
        Points to test of shape (N, 2) or (2,).
    tolerance : float
        Distance below which an outside point is accepted.

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,) indicating containment.
    """
    points = np.atleast_2d(points)
    n_points = len(points)

    if len(poly) < 3:
        return np.zeros(n_points, dtype=bool)

    shapely_poly = Polygon(poly)

    inside = np.zeros(n_points, dtype=bool)
    for i, pt in enumerate(points):
        shapely_point = ShapelyPoint(pt)
        inside[i] = shapely_poly.covers(shapely_point) or shapely_poly.distance(shapely_point) <= tolerance

    return inside
