# cg2d/predicates.py
from __future__ import annotations
from typing import Optional, Sequence, Tuple

from .geom import Pt, bounding_box

BBox = Tuple[float, float, float, float]

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """>0 якщо (a, b, c) проти годинникової, <0 якщо за годинниковою, 0 якщо колінеарні."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)

def incircle(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    """
    Знак тесту «чи всередині кола через a, b, c лежить d?».
    Повертає:
      >0  якщо d всередині,
      <0  якщо зовні,
       0  якщо на колі або (a, b, c) колінеарні.
    Знак нормалізуємо на орієнтацію (a, b, c).
    """
    adx, ady = a.x - d.x, a.y - d.y
    bdx, bdy = b.x - d.x, b.y - d.y
    cdx, cdy = c.x - d.x, c.y - d.y
    ad = adx*adx + ady*ady
    bd = bdx*bdx + bdy*bdy
    cd = cdx*cdx + cdy*cdy
    val = (adx * (bdy*cd - bd*cdy)
           - ady * (bdx*cd - bd*cdx)
           + ad * (bdx*cdy - bdy*cdx))
    ori = orient2d(a, b, c)
    if ori > 0:
        return val
    elif ori < 0:
        return -val
    return 0.0

def point_in_polygon(polygon: Sequence[Pt], p: Pt, bbox: Optional[BBox] = None) -> bool:
    """
    Точка всередині багатокутника: спершу bounding box, потім Jordan scanline
    (парність перетинів горизонтального променя з ребрами).
    Точки на межі bbox вважаються зовнішніми.
    """
    if len(polygon) < 3:
        return False
    x_min, y_min, x_max, y_max = bbox if bbox is not None else bounding_box(polygon)
    if p.x <= x_min or p.x >= x_max or p.y <= y_min or p.y >= y_max:
        return False

    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        pi, pj = polygon[i], polygon[j]
        if (pi.y >= p.y) != (pj.y >= p.y):
            # pi.y != pj.y гарантовано умовою вище
            x_cross = (pj.x - pi.x) * (p.y - pi.y) / (pj.y - pi.y) + pi.x
            if p.x <= x_cross:
                inside = not inside
        j = i
    return inside
