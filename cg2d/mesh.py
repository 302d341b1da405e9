# cg2d/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .geom import Pt, EPS, dist2, midpoint

INCIRCLE_REL_TOL = 1e-12  # відносний допуск строгого тесту «всередині кола»


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Неорієнтоване ребро: Edge(a, b) == Edge(b, a), і хеш однаковий.
    Живе лише всередині одного кроку вставки.
    """
    a: Pt
    b: Pt

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self.a == other.a and self.b == other.b)
                or (self.a == other.b and self.b == other.a))

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))


def circumcircle(a: Pt, b: Pt, c: Pt, eps: float = EPS) -> Tuple[Pt, float]:
    """
    Центр і квадрат радіуса описаного кола трикутника (a, b, c).

    Якщо |G| < eps (майже колінеарні вершини), справжнього кола немає:
    як «центр» беремо середину bounding box трьох вершин, а радіус² дорівнює квадрату
    відстані від нього до мінімального кута bbox. Коло тоді охоплює всі три вершини.
    """
    A = b.x - a.x
    B = b.y - a.y
    C = c.x - a.x
    D = c.y - a.y

    E = A * (a.x + b.x) + B * (a.y + b.y)
    F = C * (a.x + c.x) + D * (a.y + c.y)

    G = 2.0 * (A * (c.y - b.y) - B * (c.x - b.x))

    if abs(G) < eps:
        x_min = min(a.x, b.x, c.x)
        y_min = min(a.y, b.y, c.y)
        x_max = max(a.x, b.x, c.x)
        y_max = max(a.y, b.y, c.y)
        center = Pt((x_min + x_max) * 0.5, (y_min + y_max) * 0.5)
        return center, dist2(center, Pt(x_min, y_min))

    center = Pt((D * E - B * F) / G, (A * F - C * E) / G)
    return center, dist2(center, a)


@dataclass(eq=False)
class Triangle:
    """
    Трикутник тріангуляції з передобчисленим описаним колом.
    Рівність за ідентичністю об'єкта: два трикутники з тими самими
    вершинами в різних множинах є різними записами.
    swept належить одному проходу вставки і означає, що коло вже не дістане жодної
    наступної точки (точки йдуть за зростанням x). Скидається перед кожним проходом.
    """
    a: Pt
    b: Pt
    c: Pt
    eps: float = EPS
    center: Pt = field(init=False)
    radius_sq: float = field(init=False)
    swept: bool = field(default=False, init=False)
    _midpoints: Optional[Tuple[Pt, Pt, Pt]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.center, self.radius_sq = circumcircle(self.a, self.b, self.c, self.eps)

    def vertices(self) -> Tuple[Pt, Pt, Pt]:
        return (self.a, self.b, self.c)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a))

    def in_circumcircle(self, p: Pt) -> bool:
        """
        Строго всередині описаного кола (з відносним допуском).
        Точка на колі (співколові вершини) всередині не вважається.
        """
        return dist2(self.center, p) < self.radius_sq * (1.0 - INCIRCLE_REL_TOL)

    def in_x_reach(self, x: float) -> bool:
        """Одновимірна необхідна умова: вертикаль x перетинає описане коло."""
        d = self.center.x - x
        return d * d <= self.radius_sq

    def contains_vertex(self, p: Pt) -> bool:
        return self.a == p or self.b == p or self.c == p

    def shares_vertex_with(self, other: "Triangle") -> bool:
        return any(self.contains_vertex(v) for v in other.vertices())

    def midpoints(self) -> Tuple[Pt, Pt, Pt]:
        """Середини сторін (ab, bc, ca); рахуються один раз."""
        if self._midpoints is None:
            self._midpoints = (midpoint(self.a, self.b),
                               midpoint(self.b, self.c),
                               midpoint(self.c, self.a))
        return self._midpoints

    def reset_swept(self) -> None:
        self.swept = False

    def to_vertex_array(self) -> List[float]:
        """Плоский масив [ax, ay, bx, by, cx, cy] для малювання polygon'ом."""
        return [self.a.x, self.a.y, self.b.x, self.b.y, self.c.x, self.c.y]


def remove_duplicate_edges(edges: List[Edge]) -> List[Edge]:
    """
    Лишає тільки ребра, що зустрілись рівно один раз (межа порожнини).
    Ребро, спільне для двох видалених трикутників, внутрішнє, тож викидаємо обидва входження.
    Порядок першої появи зберігається.
    """
    count: Dict[Edge, int] = {}
    for e in edges:
        count[e] = count.get(e, 0) + 1
    return [e for e in edges if count[e] == 1]
