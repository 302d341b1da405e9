# examples/demo_pipeline.py
from cg2d.pipeline import triangulate_points

if __name__ == "__main__":
    pts = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.3),
    ]

    for backend in ("native", "scipy"):
        out_pts, triangles = triangulate_points(pts, backend=backend)
        print(f"[{backend}] vertices:", len(out_pts), "triangles:", len(triangles))
