"""Tests for the 2D convex hull backends."""

import pytest

from cg2d.geom import Pt
from cg2d.hull import convex_hull, scipy_convex_hull, get_hull


def signed_area(poly):
    s = 0.0
    for i in range(len(poly)):
        a, b = poly[i], poly[(i + 1) % len(poly)]
        s += a.x * b.y - b.x * a.y
    return 0.5 * s


CLOUD = [
    Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1),
    Pt(0.5, 0.5), Pt(0.2, 0.7), Pt(0.5, 0.0), Pt(1, 1), Pt(0, 0),
]


class TestNativeHull:

    def test_square_with_interior_and_duplicates(self):
        hull = convex_hull(CLOUD)
        assert set(hull) == {Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1)}
        assert len(hull) == 4

    def test_counter_clockwise(self):
        assert signed_area(convex_hull(CLOUD)) == pytest.approx(1.0)

    def test_collinear_points_keep_endpoints(self):
        hull = convex_hull([Pt(1, 0), Pt(0, 0), Pt(2, 0), Pt(1.5, 0)])
        assert hull == [Pt(0, 0), Pt(2, 0)]

    def test_fewer_than_three_points(self):
        assert convex_hull([]) == []
        assert convex_hull([Pt(1, 1)]) == [Pt(1, 1)]
        assert convex_hull([Pt(2, 0), Pt(1, 1), Pt(2, 0)]) == [Pt(1, 1), Pt(2, 0)]


class TestScipyHull:

    def test_matches_native(self):
        # без точок на ребрах: joggle (QJ) може зробити їх вершинами
        cloud = [p for p in CLOUD if p != Pt(0.5, 0.0)]
        hull = scipy_convex_hull(cloud)
        assert set(hull) == set(convex_hull(cloud))
        assert signed_area(hull) == pytest.approx(1.0)

    def test_fewer_than_three_points(self):
        assert scipy_convex_hull([Pt(2, 0), Pt(1, 1)]) == [Pt(1, 1), Pt(2, 0)]


class TestBackendSelection:

    def test_known_backends(self):
        assert get_hull("native") is convex_hull
        assert get_hull("SciPy") is scipy_convex_hull

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            get_hull("cgal")
