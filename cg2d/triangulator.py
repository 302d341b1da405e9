from __future__ import annotations
from bisect import insort
from typing import Dict, Iterable, List, Sequence

import structlog

from .geom import Pt, EPS, PointLike, as_pt, bounding_box, dist2
from .hull import HullFn, convex_hull
from .mesh import Triangle, remove_duplicate_edges
from .predicates import point_in_polygon
from .voronoi import InsideFn, compute_voronoi_cells

logger = structlog.get_logger()


class InsufficientPointsError(ValueError):
    """Контур має менше 3 різних точок: тріангулювати нічого."""


def _x_key(p: Pt) -> float:
    return p.x


class Triangulator:
    """
    Інкрементальна 2D тріангуляція Делоне (Bowyer–Watson) точок контуру
    + обрізана контуром діаграма Вороного.

    Точки вставляються за зростанням x: трикутник, чиє описане коло повністю
    лівіше поточної x, вже ніколи не зачепиться: позначаємо swept і більше
    не перевіряємо (≈ O(n^1.5) замість O(n^2)).

    Після побудови можна додавати внутрішні точки через dynamic_update_point(s);
    діаграма Вороного тоді перераховується повністю.
    """

    def __init__(
        self,
        outline: Sequence[PointLike],
        *,
        eps: float = EPS,
        hull: HullFn = convex_hull,
        inside: InsideFn = point_in_polygon,
    ):
        pts = list(dict.fromkeys(as_pt(p) for p in outline))
        if len(pts) < 3:
            raise InsufficientPointsError(
                f"There must be at least 3 points to triangulate, got {len(pts)}"
            )
        self.eps = eps
        self._hull = hull
        self._inside = inside

        self._outline: List[Pt] = pts
        self._extremes = bounding_box(pts)  # x_min, y_min, x_max, y_max контуру
        # стабільне сортування: рівні x лишаються в порядку контуру
        self._all_points: List[Pt] = sorted(pts, key=_x_key)

        self._super = self._build_super_triangle()
        self._triangles_all: List[Triangle] = []
        self._triangles_inner: List[Triangle] = []
        self._cells: List[List[Pt]] = []

        self._build()
        self._compute_voronoi()
        logger.info(
            "triangulation built",
            points=len(self._all_points),
            triangles=len(self._triangles_inner),
        )

    # ---------------- Публічний API ----------------
    @property
    def outline(self) -> List[Pt]:
        return self._outline[:]

    @property
    def points(self) -> List[Pt]:
        """Усі точки в порядку клітин Вороного (за зростанням x)."""
        return self._all_points[:]

    @property
    def super_triangle(self) -> Triangle:
        return self._super

    @property
    def all_triangles(self) -> List[Triangle]:
        """Тріангуляція разом із трикутниками, що торкаються супер-трикутника."""
        return self._triangles_all[:]

    def get_delaunay_triangles(self) -> List[Triangle]:
        return self._triangles_inner[:]

    def get_voronoi_diagram(self) -> List[List[Pt]]:
        """Одна клітина (опуклий багатокутник) на кожну точку з points."""
        return [cell[:] for cell in self._cells]

    def contains(self, p: PointLike) -> bool:
        """Чи лежить точка строго всередині контуру."""
        return self._inside(self._outline, as_pt(p), self._extremes)

    def dynamic_update_point(self, p: PointLike) -> bool:
        """Додати одну точку. False: точку відкинуто (поза контуром або дублікат)."""
        return bool(self.dynamic_update_points([p]))

    def dynamic_update_points(self, points: Iterable[PointLike]) -> List[Pt]:
        """
        Додати точки до наявної тріангуляції й перерахувати діаграму Вороного.

        Приймаються лише точки строго всередині контуру, яких ще немає.
        Решта мовчки відкидається (видно в логах на рівні debug).
        Повертає прийняті точки у порядку вставки (за зростанням x).
        """
        # попередній прохід мав свій порядок x: його висновки вже не діють
        for t in self._triangles_all:
            t.reset_swept()

        known = set(self._all_points)
        accepted: List[Pt] = []
        for raw in points:
            p = as_pt(raw)
            if not self.contains(p):
                logger.debug("dynamic point rejected", point=(p.x, p.y), reason="outside")
                continue
            if p in known:
                logger.debug("dynamic point rejected", point=(p.x, p.y), reason="duplicate")
                continue
            known.add(p)
            accepted.append(p)

        if not accepted:
            return []

        accepted.sort(key=_x_key)
        for p in accepted:
            insort(self._all_points, p, key=_x_key)
            self._triangles_all = self._insert(p, self._triangles_all)

        self._triangles_inner = self._strip_super(self._triangles_all)
        self._compute_voronoi()
        logger.info(
            "dynamic update applied",
            accepted=len(accepted),
            points=len(self._all_points),
            triangles=len(self._triangles_inner),
        )
        return accepted

    # ---------------- Внутрішні методи ----------------
    def _build_super_triangle(self) -> Triangle:
        """
        Трикутник, що гарантовано охоплює bbox контуру: вершини відкладені від
        центру bbox на подвоєний максимальний розмір.
        """
        x_min, y_min, x_max, y_max = self._extremes
        d = max(x_max - x_min, y_max - y_min)
        cx = (x_min + x_max) * 0.5
        cy = (y_min + y_max) * 0.5
        return Triangle(
            Pt(cx - 2.0 * d, cy - d),
            Pt(cx, cy + 2.0 * d),
            Pt(cx + 2.0 * d, cy - d),
            self.eps,
        )

    def _build(self) -> None:
        """Прохід Bowyer–Watson по всіх точках (вони вже відсортовані за x)."""
        self._super.reset_swept()
        triangles: List[Triangle] = [self._super]
        for p in self._all_points:
            triangles = self._insert(p, triangles)
        self._triangles_all = triangles
        self._triangles_inner = self._strip_super(triangles)

    def _insert(self, point: Pt, triangles: List[Triangle]) -> List[Triangle]:
        """
        Вставка однієї точки:
          1) знести трикутники, в описане коло яких потрапляє point (ребра: у буфер);
          2) спільні ребра видалених трикутників: внутрішні, викидаємо;
          3) кожне граничне ребро порожнини + point = новий трикутник.
        """
        edge_buffer = []
        # у зворотному порядку, щоб видалення не зсувало ще не переглянуті індекси
        for j in range(len(triangles) - 1, -1, -1):
            t = triangles[j]
            if t.swept:
                continue
            if not t.in_x_reach(point.x):
                # коло повністю лівіше: наступні точки (x не менший) теж не дістануть
                if t.center.x < point.x:
                    t.swept = True
                continue
            if t.in_circumcircle(point):
                edge_buffer.extend(t.edges())
                del triangles[j]

        for e in remove_duplicate_edges(edge_buffer):
            triangles.append(Triangle(e.a, e.b, point, self.eps))
        return triangles

    def _strip_super(self, triangles: List[Triangle]) -> List[Triangle]:
        return [t for t in triangles if not t.shares_vertex_with(self._super)]

    def _compute_voronoi(self) -> None:
        self._cells = compute_voronoi_cells(
            self._all_points,
            self._triangles_all,
            self._triangles_inner,
            self._outline,
            hull=self._hull,
            inside=self._inside,
            bbox=self._extremes,
        )

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - жодна точка не лежить строго всередині описаного кола трикутника (з допуском eps);
          - жоден трикутник не торкається супер-трикутника;
          - кількість клітин Вороного = кількість точок.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        bad_delaunay: List[int] = []
        for ti, t in enumerate(self._triangles_inner):
            tol = self.eps * max(t.radius_sq, 1.0)
            for p in self._all_points:
                if t.contains_vertex(p):
                    continue
                if dist2(t.center, p) < t.radius_sq - tol:
                    bad_delaunay.append(ti)
                    break

        super_leaks = [
            ti for ti, t in enumerate(self._triangles_inner)
            if t.shares_vertex_with(self._super)
        ]

        return {
            "triangles": len(self._triangles_inner),
            "points": len(self._all_points),
            "cells": len(self._cells),
            "bad_delaunay": bad_delaunay,
            "super_leaks": super_leaks,
            "cell_mismatch": len(self._cells) != len(self._all_points),
        }

    def to_off(self) -> str:
        """
        Експорт тріангуляції (без супер-трикутника) у формат OFF, z = 0.
        """
        index: Dict[Pt, int] = {}
        for t in self._triangles_inner:
            for v in t.vertices():
                if v not in index:
                    index[v] = len(index)
        lines = ["OFF", f"{len(index)} {len(self._triangles_inner)} 0"]
        for v in index:
            lines.append(f"{v.x} {v.y} 0")
        for t in self._triangles_inner:
            a, b, c = (index[v] for v in t.vertices())
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)

    def write_off(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_off())

