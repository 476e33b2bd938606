"""
Tests for QuickHull convex hull computation.

Covers degenerate input, identity of returned points, correctness against
scipy's Qhull wrapper, and tie-breaking reproducibility.
"""

from collections import Counter

import numpy as np
import pytest
from scipy.spatial import ConvexHull

from hullsep import Point, compute_hull, hull_vertices, hull_stats, contains, edges_to_array
from hullsep.core.geometry import points_from_array, points_to_array


def _endpoint_counts(edges):
    return Counter(id(pt) for edge in edges for pt in edge)


class TestDegenerateInput:
    """Inputs that have no hull."""

    @pytest.mark.parametrize("n_points", [0, 1, 2])
    def test_too_few_points(self, n_points):
        """Fewer than 3 points gives no edges."""
        points = [Point(float(i), float(i * i)) for i in range(n_points)]
        assert compute_hull(points) == []

    def test_collinear_points(self):
        """Points on a slanted line have no hull."""
        points = [Point(float(i), 2.0 * i + 1.0) for i in range(5)]
        assert compute_hull(points) == []

    def test_vertical_line(self):
        """Points sharing one x coordinate have no hull."""
        points = [Point(0.0, float(i)) for i in range(4)]
        assert compute_hull(points) == []

    def test_all_duplicates(self):
        """Repeated copies of one location have no hull."""
        points = [Point(1.0, 1.0) for _ in range(5)]
        assert compute_hull(points) == []


class TestSmallHulls:
    """Hand-checkable hulls."""

    def test_triangle(self):
        """Three non-collinear points give a triangle."""
        points = [Point(0, 0), Point(4, 0), Point(1, 3)]
        edges = compute_hull(points)

        assert len(edges) == 3
        counts = _endpoint_counts(edges)
        assert all(counts[id(pt)] == 2 for pt in points)

    def test_square_edges(self):
        """Square hull is traced clockwise from the leftmost point."""
        a, b, c, d = Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)
        edges = compute_hull([a, b, c, d])

        assert edges == [(a, b), (b, c), (c, d), (d, a)]

    def test_returns_original_objects(self):
        """Edges reference the input objects, not copies."""
        points = [Point(0, 0), Point(3, 0), Point(3, 3), Point(0, 3), Point(1, 1)]
        ids = {id(pt) for pt in points}
        edges = compute_hull(points)

        assert all(id(pt) in ids for edge in edges for pt in edge)

    def test_mapping_input(self):
        """A mapping of points contributes its values."""
        points = {'a': Point(0, 0), 'b': Point(2, 0), 'c': Point(1, 2), 'd': Point(1, 1)}
        edges = compute_hull(points)

        assert len(edges) == 3
        vertices = {id(v) for v in hull_vertices(edges)}
        assert id(points['d']) not in vertices

    def test_duplicates_collapse(self):
        """Duplicated corners do not add edges."""
        coords = [(0, 0), (0, 2), (2, 2), (2, 0)]
        points = [Point(x, y) for x, y in coords] + [Point(x, y) for x, y in coords]
        edges = compute_hull(points)

        assert len(edges) == 4
        assert {(v.x, v.y) for v in hull_vertices(edges)} == set(coords)

    def test_collinear_boundary_points_dropped(self):
        """Points in the middle of a hull edge are not vertices."""
        mid = Point(1, 0)
        points = [Point(0, 0), mid, Point(2, 0), Point(1, 2)]
        edges = compute_hull(points)

        assert len(edges) == 3
        assert all(mid is not pt for edge in edges for pt in edge)


class TestHullCorrectness:
    """Properties that must hold for any point cloud."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42])
    def test_all_points_inside(self, seed):
        """No input point lies outside the hull."""
        rng = np.random.RandomState(seed)
        points = points_from_array(rng.randn(200, 2) * [3.0, 1.0])
        edges = compute_hull(points)

        inside = contains(edges_to_array(edges), points_to_array(points), tolerance=1e-9)
        assert inside.all()

    @pytest.mark.parametrize("seed", [0, 3, 11])
    def test_matches_scipy(self, seed):
        """Hull vertices agree with scipy.spatial.ConvexHull."""
        rng = np.random.RandomState(seed)
        coords = rng.uniform(-5, 5, size=(150, 2))
        points = points_from_array(coords)
        edges = compute_hull(points)

        reference = ConvexHull(coords)
        expected = {tuple(row) for row in coords[reference.vertices]}
        actual = {(v.x, v.y) for v in hull_vertices(edges)}

        assert actual == expected
        assert len(edges) == len(reference.vertices)

    def test_regular_polygon_minimality(self):
        """Only convex-position points become hull vertices."""
        np.random.seed(42)
        angles = np.linspace(0, 2 * np.pi, 12, endpoint=False)
        ring = [Point(10 * np.cos(a), 10 * np.sin(a)) for a in angles]
        radii = np.random.uniform(0, 5, 30)
        thetas = np.random.uniform(0, 2 * np.pi, 30)
        interior = [Point(r * np.cos(t), r * np.sin(t)) for r, t in zip(radii, thetas)]

        points = interior[:15] + ring + interior[15:]
        edges = compute_hull(points)

        assert len(edges) == 12
        assert {id(v) for v in hull_vertices(edges)} == {id(pt) for pt in ring}
        counts = _endpoint_counts(edges)
        assert all(counts[id(pt)] == 2 for pt in ring)

    def test_edges_form_closed_ring(self):
        """Each hull vertex starts exactly one edge and ends exactly one."""
        np.random.seed(5)
        edges = compute_hull(points_from_array(np.random.randn(100, 2)))

        starts = Counter(id(e[0]) for e in edges)
        ends = Counter(id(e[1]) for e in edges)
        assert starts == ends
        assert set(starts.values()) == {1}


class TestTieBreaking:
    """Reproducibility of the baseline choice."""

    def test_first_seen_extremes(self):
        """The first point with minimal x starts the first edge."""
        low = Point(0, 0)
        high = Point(0, 5)
        points = [low, high, Point(3, 1), Point(3, 4)]
        edges = compute_hull(points)

        assert edges[0][0] is low

    def test_repeatable(self):
        """Repeated calls produce the same edge sequence."""
        np.random.seed(8)
        points = points_from_array(np.round(np.random.randn(60, 2), 1))
        first = compute_hull(points)
        second = compute_hull(points)

        assert [(id(a), id(b)) for a, b in first] == [(id(a), id(b)) for a, b in second]


class TestHullStats:
    """Tests for hull_stats() function."""

    def test_square(self):
        """Square statistics."""
        stats = hull_stats(compute_hull([Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]))

        assert stats['num_edges'] == 4
        assert stats['num_vertices'] == 4
        assert stats['area'] == pytest.approx(4.0)
        assert stats['perimeter'] == pytest.approx(8.0)
        np.testing.assert_array_almost_equal(stats['centroid'], [1.0, 1.0])

    def test_empty(self):
        """Empty hull has zero area and no centroid."""
        stats = hull_stats([])

        assert stats['num_edges'] == 0
        assert stats['area'] == 0.0
        assert stats['centroid'] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
