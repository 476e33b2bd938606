"""
Hull separation.
"""

from .separator import (
    SeparationStatus,
    SeparationResult,
    DisplacementVector,
    LineIntersection,
    check_line_intersection,
    find_most_distant_point,
    min_distance_vector,
    min_distance_vector_in_direction,
    hull_centroid,
    displace_points,
    separation_stats,
)

__all__ = [
    'SeparationStatus',
    'SeparationResult',
    'DisplacementVector',
    'LineIntersection',
    'check_line_intersection',
    'find_most_distant_point',
    'min_distance_vector',
    'min_distance_vector_in_direction',
    'hull_centroid',
    'displace_points',
    'separation_stats',
]
