"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: інкрементальна тріангуляція Делоне (Bowyer–Watson зі sweep-відсіканням)
+ діаграма Вороного, обрізана контуром, з динамічним додаванням точок.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, centroid, bounding_box, unique_points
from cg2d.predicates import orient2d, incircle, point_in_polygon
from cg2d.hull import convex_hull, scipy_convex_hull, get_hull
from cg2d.mesh import Edge, Triangle, circumcircle
from cg2d.triangulator import Triangulator, InsufficientPointsError

__all__ = [
    "Pt", "EPS", "centroid", "bounding_box", "unique_points",
    "orient2d", "incircle", "point_in_polygon",
    "convex_hull", "scipy_convex_hull", "get_hull",
    "Edge", "Triangle", "circumcircle",
    "Triangulator", "InsufficientPointsError", "__version__",
]
