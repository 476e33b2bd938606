"""
Core geometry operations.
"""

from .geometry import (
    EPS,
    Point,
    Edge,
    as_point_list,
    signed_distance,
    dist2,
    closest_point_on_segment,
    dist_to_segment_squared,
    dist_to_segment,
    points_to_array,
    points_from_array,
    polygon_area,
    ensure_ccw,
    edges_to_array,
    edges_to_polygon,
    contains,
)

__all__ = [
    'EPS',
    'Point',
    'Edge',
    'as_point_list',
    'signed_distance',
    'dist2',
    'closest_point_on_segment',
    'dist_to_segment_squared',
    'dist_to_segment',
    'points_to_array',
    'points_from_array',
    'polygon_area',
    'ensure_ccw',
    'edges_to_array',
    'edges_to_polygon',
    'contains',
]
