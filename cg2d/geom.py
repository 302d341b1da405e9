from __future__ import annotations
from dataclasses import dataclass
from math import cos, sin, sqrt
from typing import Iterable, Tuple, Union

EPS = 1e-6  # поріг виродження (колінеарність) для описаного кола

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

PointLike = Union[Pt, Tuple[float, float]]

def as_pt(p: PointLike) -> Pt:
    if isinstance(p, Pt):
        return p
    x, y = p
    return Pt(float(x), float(y))

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def scale(a: Pt, k: float) -> Pt:
    return Pt(a.x*k, a.y*k)

def rotate(a: Pt, angle: float) -> Pt:
    """Поворот навколо початку координат (кут у радіанах, проти годинникової)."""
    c, s = cos(angle), sin(angle)
    return Pt(a.x*c - a.y*s, a.x*s + a.y*c)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def dist2(a: Pt, b: Pt) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx*dx + dy*dy

def dist(a: Pt, b: Pt) -> float:
    return sqrt(dist2(a, b))

def midpoint(a: Pt, b: Pt) -> Pt:
    return Pt((a.x + b.x) * 0.5, (a.y + b.y) * 0.5)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def bounding_box(points: Iterable[Pt]) -> Tuple[float, float, float, float]:
    """Крайні значення набору: (x_min, y_min, x_max, y_max)."""
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("empty set") from None
    x_min = x_max = first.x
    y_min = y_max = first.y
    for p in it:
        if p.x < x_min: x_min = p.x
        if p.x > x_max: x_max = p.x
        if p.y < y_min: y_min = p.y
        if p.y > y_max: y_max = p.y
    return x_min, y_min, x_max, y_max

def unique_points(points: Iterable[PointLike], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for raw in points:
        p = as_pt(raw)
        key = (int(round(p.x*scale)), int(round(p.y*scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())
