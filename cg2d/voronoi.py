"""
Діаграма Вороного як дуал тріангуляції Делоне, обрізана контуром.

Для кожної точки клітина = опукла оболонка центрів описаних кіл трикутників,
що містять цю точку. Центри поза контуром замінюються найближчою серединою
сторони серед внутрішніх трикутників клітини (наближення до перетину
ребра Вороного з межею, без явного відсікання прямими).
"""
from __future__ import annotations
from typing import Callable, Collection, List, Optional, Sequence

from .geom import Pt, dist2
from .hull import HullFn, convex_hull
from .mesh import Triangle
from .predicates import BBox, point_in_polygon

InsideFn = Callable[[Sequence[Pt], Pt, Optional[BBox]], bool]


def nearest_midpoint(p: Pt, triangles: Sequence[Triangle]) -> Optional[Pt]:
    """Найближча до p середина сторони серед triangles (None, якщо їх немає)."""
    best: Optional[Pt] = None
    best_d = float("inf")
    for t in triangles:
        for m in t.midpoints():
            d = dist2(m, p)
            if d < best_d:
                best_d = d
                best = m
    return best


def voronoi_cell(
    vertex: Pt,
    all_triangles: Sequence[Triangle],
    inner_triangles: Collection[Triangle],
    outline: Sequence[Pt],
    is_outline_point: bool,
    hull: HullFn = convex_hull,
    inside: InsideFn = point_in_polygon,
    bbox: Optional[BBox] = None,
) -> List[Pt]:
    cell_tris = [t for t in all_triangles if t.contains_vertex(vertex)]
    inner_cell_tris = [t for t in cell_tris if t in inner_triangles]

    candidates: List[Pt] = []
    for t in cell_tris:
        c = t.center
        if not inside(outline, c, bbox):
            m = nearest_midpoint(c, inner_cell_tris)
            if m is not None:
                c = m
        candidates.append(c)

    # точка контуру має необмежену клітину: додаємо саму точку як якір
    if is_outline_point:
        candidates.append(vertex)

    return hull(candidates)


def compute_voronoi_cells(
    points: Sequence[Pt],
    all_triangles: Sequence[Triangle],
    inner_triangles: Sequence[Triangle],
    outline: Sequence[Pt],
    hull: HullFn = convex_hull,
    inside: InsideFn = point_in_polygon,
    bbox: Optional[BBox] = None,
) -> List[List[Pt]]:
    """
    Повна перебудова діаграми: одна клітина на кожну точку, у тому ж порядку, що й points.
    """
    inner = set(inner_triangles)  # ідентичність трикутників (eq=False)
    outline_set = set(outline)
    return [
        voronoi_cell(v, all_triangles, inner, outline, v in outline_set, hull, inside, bbox)
        for v in points
    ]
