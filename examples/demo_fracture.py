# examples/demo_fracture.py
import random

from cg2d.triangulator import Triangulator

if __name__ == "__main__":
    # контур «астероїда» + точки удару, як їх підкидає ігровий цикл
    outline = [(0, 0), (4, -1), (7, 1), (8, 4), (6, 7), (2, 7), (-1, 4)]
    tri = Triangulator(outline)
    print("initial triangles:", len(tri.get_delaunay_triangles()))

    random.seed(7)
    impacts = [(random.uniform(-1, 8), random.uniform(-1, 7)) for _ in range(12)]
    accepted = tri.dynamic_update_points(impacts)
    print(f"accepted {len(accepted)} of {len(impacts)} impact points")

    # повтор тієї самої точки: no-op
    if accepted:
        print("duplicate accepted?", tri.dynamic_update_point(accepted[0]))

    print("points:", len(tri.points))
    print("triangles:", len(tri.get_delaunay_triangles()))
    print("fragments (voronoi cells):", len(tri.get_voronoi_diagram()))
    print("VALIDATION:", tri.validate())
