"""
Hull Separation Module

Displaces one point set so that its convex hull no longer overlaps the
convex hull of a fixed point set:
- A reference point inside the fixed hull is pushed to the hull boundary,
  either to the nearest edge or along a requested direction
- The boundary point and the push direction define a separating line
- The displaced set is translated so its extreme vertex lands on that line,
  then moved a further `padding` away from the fixed hull

The translation is rigid and applied in place; the fixed set is never
modified.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from ..core.geometry import (
    EPS,
    Edge,
    Point,
    as_point_list,
    signed_distance,
    closest_point_on_segment,
    dist_to_segment_squared,
    edges_to_polygon,
)
from ..hull.quickhull import compute_hull


logger = logging.getLogger(__name__)


class SeparationStatus(Enum):
    """Outcome of a displace_points() call."""
    SEPARATED = "separated"
    DEGENERATE_HULL = "degenerate_hull"
    NO_INTERSECTION = "no_intersection"


@dataclass
class LineIntersection:
    """
    Intersection of two infinite lines given by point pairs.

    Attributes
    ----------
    x, y : float or None
        Intersection coordinates, None when the lines are parallel.
    t1, t2 : float or None
        Parameters of the intersection along line 1 and line 2
        (0 at the start point, 1 at the end point).
    on_line1, on_line2 : bool
        Whether the intersection lies strictly inside each segment.
    """
    x: Optional[float] = None
    y: Optional[float] = None
    t1: Optional[float] = None
    t2: Optional[float] = None
    on_line1: bool = False
    on_line2: bool = False


@dataclass
class DisplacementVector:
    """
    Vector from a reference point to the fixed hull boundary.

    Attributes
    ----------
    dx, dy : float
        Vector components.
    edge : Edge
        Hull edge that produced the vector.
    """
    dx: float
    dy: float
    edge: Edge

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


@dataclass
class SeparationResult:
    """
    Container for the outcome of displace_points().

    Attributes
    ----------
    status : SeparationStatus
        Whether the points were moved, and if not, why.
    dx, dy : float
        Translation applied to every displaced point (0 when not moved).
    vector : DisplacementVector or None
        Reference-point-to-boundary vector used to pick the separating line.
    axis : tuple of float or None
        Direction of the separating line.
    """
    status: SeparationStatus
    dx: float = 0.0
    dy: float = 0.0
    vector: Optional[DisplacementVector] = None
    axis: Optional[Tuple[float, float]] = None

    @property
    def separated(self) -> bool:
        return self.status is SeparationStatus.SEPARATED


def check_line_intersection(line1_start, line1_end, line2_start, line2_end) -> LineIntersection:
    """
    Intersect the lines through two point pairs.

    Parameters
    ----------
    line1_start, line1_end : Point
        Points defining line 1.
    line2_start, line2_end : Point
        Points defining line 2.

    Returns
    -------
    LineIntersection
        Intersection point and parameters. Parallel or zero-length lines
        give an empty result rather than NaN coordinates.
    """
    result = LineIntersection()

    denominator = (
        (line2_end.y - line2_start.y) * (line1_end.x - line1_start.x) -
        (line2_end.x - line2_start.x) * (line1_end.y - line1_start.y)
    )
    if denominator == 0:
        return result

    a = line1_start.y - line2_start.y
    b = line1_start.x - line2_start.x
    numerator1 = (line2_end.x - line2_start.x) * a - (line2_end.y - line2_start.y) * b
    numerator2 = (line1_end.x - line1_start.x) * a - (line1_end.y - line1_start.y) * b
    t1 = numerator1 / denominator
    t2 = numerator2 / denominator

    result.x = line1_start.x + t1 * (line1_end.x - line1_start.x)
    result.y = line1_start.y + t1 * (line1_end.y - line1_start.y)
    result.t1 = t1
    result.t2 = t2
    result.on_line1 = 0 < t1 < 1
    result.on_line2 = 0 < t2 < 1
    return result


def find_most_distant_point(line_pt1, line_pt2, edges: Sequence[Edge]):
    """
    Hull vertex farthest to the left of the directed line (line_pt1, line_pt2).

    Distances may be negative; the largest wins and the first-seen vertex
    wins ties. Returns None for an empty hull.
    """
    max_d = None
    max_pt = None
    for edge in edges:
        for pt in edge:
            distance = signed_distance(line_pt1, line_pt2, pt)
            if max_d is None or distance > max_d:
                max_d = distance
                max_pt = pt
    return max_pt


def min_distance_vector(edges: Sequence[Edge], pt) -> Optional[DisplacementVector]:
    """
    Shortest vector from a point to the boundary of a convex hull.

    Parameters
    ----------
    edges : sequence of Edge
        Hull edges.
    pt : Point
        Reference point.

    Returns
    -------
    DisplacementVector or None
        Vector to the nearest boundary point together with the edge it lies
        on (first edge wins ties). None for an empty hull.
    """
    min_dist = None
    min_edge = None
    for edge in edges:
        dist = dist_to_segment_squared(pt, edge[0], edge[1])
        if min_dist is None or dist < min_dist:
            min_dist = dist
            min_edge = edge

    if min_edge is None:
        logger.warning("Null distance vector: hull has no edges")
        return None

    cx, cy = closest_point_on_segment(pt, min_edge[0], min_edge[1])
    return DisplacementVector(dx=cx - pt.x, dy=cy - pt.y, edge=min_edge)


def min_distance_vector_in_direction(
    edges: Sequence[Edge],
    pt,
    toward
) -> Optional[DisplacementVector]:
    """
    Vector from a point along a ray until it clears a convex hull.

    The ray starts at `pt` and passes through `toward`. It must cross one
    of the hull edges; the returned vector then runs along the ray up to
    the line that is perpendicular to the ray and touches the hull vertex
    farthest in the ray direction. It is the projection of the offset to
    that vertex onto the ray, not the offset itself, so the line through
    its end point perpendicular to it always supports the hull.

    Parameters
    ----------
    edges : sequence of Edge
        Hull edges.
    pt : Point
        Ray origin.
    toward : Point
        Second point on the ray.

    Returns
    -------
    DisplacementVector or None
        Vector along the ray plus the crossed edge. None when the ray
        crosses no edge (empty hull, ray pointing away, or pt == toward).
    """
    ux = toward.x - pt.x
    uy = toward.y - pt.y

    for edge in edges:
        hit = check_line_intersection(pt, toward, edge[0], edge[1])
        if hit.x is None:
            continue
        if hit.t1 < -EPS or not (-EPS <= hit.t2 <= 1 + EPS):
            continue

        # Line through pt perpendicular to the ray; "left" of it is ahead on the ray
        perpendicular = Point(pt.x + uy, pt.y - ux)
        farthest = find_most_distant_point(pt, perpendicular, edges)
        scale = (ux * (farthest.x - pt.x) + uy * (farthest.y - pt.y)) / (ux * ux + uy * uy)
        return DisplacementVector(dx=scale * ux, dy=scale * uy, edge=edge)

    logger.warning(
        "Null distance vector: ray from (%g, %g) through (%g, %g) crosses no hull edge",
        pt.x, pt.y, toward.x, toward.y
    )
    return None


def hull_centroid(edges: Sequence[Edge]) -> Point:
    """
    Average of the first endpoint of every edge.

    A vertex anchoring more than one edge is counted once per edge.
    """
    x = sum(edge[0].x for edge in edges) / len(edges)
    y = sum(edge[0].y for edge in edges) / len(edges)
    return Point(x, y)


def _points_inward(edges: Sequence[Edge], boundary_pt, dx: float, dy: float) -> bool:
    # The hull centroid is strictly interior, so its side of the boundary point is exact
    center = hull_centroid(edges)
    return dx * (center.x - boundary_pt.x) + dy * (center.y - boundary_pt.y) > 0


def displace_points(
    fixed: Iterable,
    to_displace: Iterable,
    padding: Optional[float] = 0.0,
    pt1=None,
    pt2=None
) -> SeparationResult:
    """
    Translate a point set so its convex hull clears another set's hull.

    Parameters
    ----------
    fixed : iterable
        Points that stay put. Never modified.
    to_displace : iterable
        Points to move. Every point gets the same translation, applied in
        place to its `x` and `y` attributes. A mapping contributes its values.
    padding : float, optional
        Minimum clearance between the hulls afterwards. None means 0.
    pt1 : Point, optional
        Reference point the separation is measured from. Defaults to the
        centroid of the fixed hull.
    pt2 : Point, optional
        If given, the separation is along the ray (pt1, pt2); otherwise
        pt1 is pushed to the nearest edge of the fixed hull.

    Returns
    -------
    SeparationResult
        Status, applied translation and the geometry used. Nothing is moved
        unless the status is SEPARATED.
    """
    if padding is None:
        padding = 0.0
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding}")

    to_displace = as_point_list(to_displace)

    fixed_hull = compute_hull(fixed)
    displace_hull = compute_hull(to_displace)
    if len(fixed_hull) < 3 or len(displace_hull) < 3:
        logger.debug(
            "Degenerate hull (fixed: %d edges, to displace: %d edges), nothing moved",
            len(fixed_hull), len(displace_hull)
        )
        return SeparationResult(status=SeparationStatus.DEGENERATE_HULL)

    if pt1 is None:
        pt1 = hull_centroid(fixed_hull)

    if pt2 is None:
        vector = min_distance_vector(fixed_hull, pt1)
    else:
        vector = min_distance_vector_in_direction(fixed_hull, pt1, pt2)

    if vector is None:
        return SeparationResult(status=SeparationStatus.NO_INTERSECTION)

    # Separating axis: outward vector rotated by 90 degrees
    if not vector.is_zero:
        out_x, out_y = vector.dx, vector.dy
        if _points_inward(fixed_hull, Point(pt1.x + out_x, pt1.y + out_y), out_x, out_y):
            # pt1 outside the hull: the vector points inward
            out_x, out_y = -out_x, -out_y
        axis = (-out_y, out_x)
    else:
        # pt1 on the boundary: fall back to the matched edge
        edge_start, edge_end = vector.edge
        axis = (edge_start.x - edge_end.x, edge_start.y - edge_end.y)

    separating_point = Point(pt1.x + vector.dx, pt1.y + vector.dy)
    farthest = find_most_distant_point(
        separating_point,
        Point(separating_point.x + axis[0], separating_point.y + axis[1]),
        displace_hull
    )
    displace_x = separating_point.x - farthest.x
    displace_y = separating_point.y - farthest.y

    # Padding: axis rotated by -90 degrees, scaled to `padding`
    length = float(np.hypot(axis[0], axis[1]))
    if length > 0:
        displace_x += axis[1] * (padding / length)
        displace_y -= axis[0] * (padding / length)

    for pt in to_displace:
        pt.x += displace_x
        pt.y += displace_y

    logger.debug("Displaced %d points by (%g, %g)", len(to_displace), displace_x, displace_y)

    return SeparationResult(
        status=SeparationStatus.SEPARATED,
        dx=displace_x,
        dy=displace_y,
        vector=vector,
        axis=axis,
    )


def separation_stats(fixed: Iterable, displaced: Iterable) -> dict:
    """
    Compute diagnostic statistics for two hulls.

    Parameters
    ----------
    fixed : iterable
        First point set.
    displaced : iterable
        Second point set.

    Returns
    -------
    dict
        Statistics including:
        - valid: Whether both sets have a hull
        - overlap_area: Area shared by the two hulls
        - gap: Minimum distance between the hulls (0 when they touch)
        - overlapping: Whether the hulls share interior area
    """
    fixed_hull = compute_hull(fixed)
    displaced_hull = compute_hull(displaced)

    if len(fixed_hull) < 3 or len(displaced_hull) < 3:
        return {
            'valid': False,
            'overlap_area': 0.0,
            'gap': None,
            'overlapping': False,
        }

    fixed_poly = edges_to_polygon(fixed_hull)
    displaced_poly = edges_to_polygon(displaced_hull)
    overlap_area = float(fixed_poly.intersection(displaced_poly).area)
    area_tolerance = EPS * max(1.0, fixed_poly.area, displaced_poly.area)

    return {
        'valid': True,
        'overlap_area': overlap_area,
        'gap': float(fixed_poly.distance(displaced_poly)),
        'overlapping': overlap_area > area_tolerance,
    }
