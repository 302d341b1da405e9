"""Tests for outline-clipped Voronoi cell construction."""

import math

from cg2d.geom import Pt
from cg2d.hull import scipy_convex_hull
from cg2d.mesh import Triangle
from cg2d.triangulator import Triangulator
from cg2d.voronoi import nearest_midpoint, compute_voronoi_cells

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


def quadrant(x0, y0):
    return {Pt(x0, y0), Pt(x0 + 0.5, y0), Pt(x0 + 0.5, y0 + 0.5), Pt(x0, y0 + 0.5)}


class TestNearestMidpoint:

    def test_picks_closest_side_midpoint(self):
        t = Triangle(Pt(0, 0), Pt(2, 0), Pt(0, 2))
        assert nearest_midpoint(Pt(1, -5), [t]) == Pt(1, 0)
        assert nearest_midpoint(Pt(-3, 1), [t]) == Pt(0, 1)

    def test_no_triangles(self):
        assert nearest_midpoint(Pt(0, 0), []) is None


class TestSquareCells:
    """Одиничний квадрат: кожна клітина: чверть квадрата біля своєї вершини."""

    def test_cells_are_quadrants(self, square):
        cells = square.get_voronoi_diagram()
        assert len(cells) == 4
        for p, cell in zip(square.points, cells):
            x0 = 0.0 if p.x == 0 else 0.5
            y0 = 0.0 if p.y == 0 else 0.5
            assert set(cell) == quadrant(x0, y0)

    def test_cells_stay_inside_outline(self, square):
        for cell in square.get_voronoi_diagram():
            for c in cell:
                assert 0.0 <= c.x <= 1.0
                assert 0.0 <= c.y <= 1.0

    def test_scipy_hull_gives_same_cells(self, square):
        tri = Triangulator(UNIT_SQUARE, hull=scipy_convex_hull)
        native = [set(c) for c in square.get_voronoi_diagram()]
        assert [set(c) for c in tri.get_voronoi_diagram()] == native


class TestInteriorCells:

    def test_interior_point_cell_is_diamond(self, square):
        square.dynamic_update_point((0.5, 0.5))
        idx = square.points.index(Pt(0.5, 0.5))
        cell = square.get_voronoi_diagram()[idx]
        # усі чотири трикутники прямокутні при (0.5, 0.5), тож центри лежать на серединах сторін квадрата
        assert set(cell) == {Pt(0, 0.5), Pt(0.5, 0), Pt(1, 0.5), Pt(0.5, 1)}

    def test_interior_cell_has_no_anchor(self, square):
        square.dynamic_update_point((0.5, 0.5))
        idx = square.points.index(Pt(0.5, 0.5))
        assert Pt(0.5, 0.5) not in square.get_voronoi_diagram()[idx]


class TestComputeDirectly:

    def test_one_cell_per_point_in_order(self, square):
        cells = compute_voronoi_cells(
            square.points,
            square.all_triangles,
            square.get_delaunay_triangles(),
            square.outline,
        )
        assert cells == square.get_voronoi_diagram()

    def test_custom_inside_strategy(self, square):
        calls = []

        def never_inside(polygon, p, bbox):
            calls.append(p)
            return False

        cells = compute_voronoi_cells(
            square.points,
            square.all_triangles,
            square.get_delaunay_triangles(),
            square.outline,
            inside=never_inside,
        )
        assert calls
        for cell in cells:
            assert all(math.isfinite(c.x) and math.isfinite(c.y) for c in cell)
