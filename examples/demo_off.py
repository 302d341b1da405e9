# examples/demo_off.py
from cg2d.triangulator import Triangulator

if __name__ == "__main__":
    # шестикутник + кілька внутрішніх
    outline = [(2, 0), (4, 1), (4, 3), (2, 4), (0, 3), (0, 1)]
    tri = Triangulator(outline)
    tri.dynamic_update_points([(2, 2), (1.2, 1.5), (2.8, 2.6)])

    report = tri.validate()
    print("VALIDATION:", report)

    tri.write_off("delaunay.off")
    print("Wrote delaunay.off: можна глянути в MeshLab/ParaView.")
