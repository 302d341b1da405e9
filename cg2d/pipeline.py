from __future__ import annotations
from typing import Iterable, List, Tuple

import structlog

from .geom import Pt, PointLike, unique_points
from .triangulator import Triangulator

logger = structlog.get_logger()


def triangulate_points(
    points: Iterable[PointLike],
    backend: str = "native",
) -> Tuple[List[Pt], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує 2D Делоне: нашим Triangulator ("native") або SciPy Delaunay ("scipy").

    Повертає:
      pts:       список Pt у фінальному порядку;
      triangles: список трикутників (індекси у pts).
    """
    pts: List[Pt] = unique_points(points)

    if backend.lower() == "native":
        # хмару подаємо як «контур»: клітини Вороного рахуються і відкидаються,
        # для звірки з SciPy це прийнятна ціна
        tri = Triangulator(pts)
        index = {p: i for i, p in enumerate(pts)}
        triangles = [
            (index[t.a], index[t.b], index[t.c]) for t in tri.get_delaunay_triangles()
        ]

    elif backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='native'."
            ) from e

        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        dela = Delaunay(arr)
        triangles = [tuple(int(i) for i in simplex) for simplex in dela.simplices]

    else:
        raise ValueError(f"Unknown backend: {backend}")

    logger.debug("points triangulated", backend=backend, points=len(pts), triangles=len(triangles))
    return pts, triangles
