"""Tests for geometric predicates."""

from cg2d.geom import Pt, bounding_box
from cg2d.predicates import orient2d, incircle, point_in_polygon


SQUARE = [Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1)]
L_SHAPE = [Pt(0, 0), Pt(2, 0), Pt(2, 1), Pt(1, 1), Pt(1, 2), Pt(0, 2)]


class TestOrientation:

    def test_signs(self):
        a, b = Pt(0, 0), Pt(1, 0)
        assert orient2d(a, b, Pt(0, 1)) > 0
        assert orient2d(a, b, Pt(0, -1)) < 0
        assert orient2d(a, b, Pt(5, 0)) == 0


class TestIncircle:

    def test_inside_outside(self):
        a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
        assert incircle(a, b, c, Pt(0.5, 0.5)) > 0
        assert incircle(a, b, c, Pt(2, 2)) < 0

    def test_independent_of_orientation(self):
        a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
        assert incircle(a, c, b, Pt(0.5, 0.5)) > 0
        assert incircle(a, c, b, Pt(2, 2)) < 0

    def test_cocircular_is_zero(self):
        assert incircle(Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1)) == 0

    def test_collinear_triangle_is_zero(self):
        assert incircle(Pt(0, 0), Pt(1, 0), Pt(2, 0), Pt(1, 1)) == 0.0


class TestPointInPolygon:
    """Bounding box + Jordan scanline; межа: зовні."""

    def test_square(self):
        assert point_in_polygon(SQUARE, Pt(0.5, 0.5))
        assert not point_in_polygon(SQUARE, Pt(2, 2))
        assert not point_in_polygon(SQUARE, Pt(-0.1, 0.5))

    def test_boundary_is_outside(self):
        assert not point_in_polygon(SQUARE, Pt(0, 0.5))
        assert not point_in_polygon(SQUARE, Pt(1, 1))
        assert not point_in_polygon(SQUARE, Pt(0.5, 0))

    def test_concave_polygon(self):
        assert point_in_polygon(L_SHAPE, Pt(0.5, 1.5))
        assert point_in_polygon(L_SHAPE, Pt(1.5, 0.5))
        # всередині bbox, але у «вирізі»
        assert not point_in_polygon(L_SHAPE, Pt(1.5, 1.5))

    def test_precomputed_bbox(self):
        bbox = bounding_box(L_SHAPE)
        assert point_in_polygon(L_SHAPE, Pt(0.5, 1.5), bbox)
        assert not point_in_polygon(L_SHAPE, Pt(1.5, 1.5), bbox)

    def test_degenerate_polygon(self):
        assert not point_in_polygon([Pt(0, 0), Pt(1, 1)], Pt(0.5, 0.5))
