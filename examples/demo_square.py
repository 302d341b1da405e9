# examples/demo_square.py
from cg2d.triangulator import Triangulator

if __name__ == "__main__":
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    tri = Triangulator(square)

    print("triangles:", len(tri.get_delaunay_triangles()))
    for t in tri.get_delaunay_triangles():
        print("  ", t.to_vertex_array())

    for p, cell in zip(tri.points, tri.get_voronoi_diagram()):
        print(f"cell of ({p.x}, {p.y}):", [(c.x, c.y) for c in cell])

    print("VALIDATION:", tri.validate())
