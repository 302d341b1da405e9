from __future__ import annotations
from typing import Callable, List, Sequence

from .geom import Pt
from .predicates import orient2d

HullFn = Callable[[Sequence[Pt]], List[Pt]]


def convex_hull(points: Sequence[Pt]) -> List[Pt]:
    """
    Опукла оболонка на площині (монотонний ланцюг Ендрю, O(n log n)).

    Вхід: довільний набір Pt (дублікати й колінеарні точки допускаються).
    Вихід: вершини оболонки проти годинникової стрілки, без повтору першої
    вершини в кінці. Для менш ніж 3 різних точок повертає їх відсортованими.
    """
    pts = sorted(set(points), key=lambda p: (p.x, p.y))
    if len(pts) < 3:
        return pts

    lower: List[Pt] = []
    for p in pts:
        while len(lower) >= 2 and orient2d(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Pt] = []
    for p in reversed(pts):
        while len(upper) >= 2 and orient2d(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # останні точки кожного ланцюга дублюють початок іншого
    hull = lower[:-1] + upper[:-1]
    if len(hull) < 3:
        # усі точки колінеарні: лишаємо два крайні кінці
        return [pts[0], pts[-1]]
    return hull


def scipy_convex_hull(points: Sequence[Pt]) -> List[Pt]:
    """Оболонка через SciPy (Qhull). QJ = joggle, щоб не падати на колінеарних."""
    try:
        import numpy as np
        from scipy.spatial import ConvexHull
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай backend='native'."
        ) from e

    pts = list(dict.fromkeys(points))
    if len(pts) < 3:
        return sorted(pts, key=lambda p: (p.x, p.y))
    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    hull = ConvexHull(arr, qhull_options="QJ")
    # у 2D SciPy віддає vertices проти годинникової
    return [pts[int(i)] for i in hull.vertices]


def get_hull(backend: str = "native") -> HullFn:
    if backend.lower() == "native":
        return convex_hull
    if backend.lower() == "scipy":
        return scipy_convex_hull
    raise ValueError(f"Unknown hull backend: {backend}")
