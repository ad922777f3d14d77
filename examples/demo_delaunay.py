# examples/demo_delaunay.py
import logging
import random

from cgnd.mesh import delaunay_mesh

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    mesh = delaunay_mesh(square, seed=3)
    print("Square triangles:", mesh.simplices)

    rng = random.Random(7)
    pts = [(rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(30)]
    mesh = delaunay_mesh(pts, seed=7)
    print("Random 2D triangles:", len(mesh))
    print("Boundary edges:", len(mesh.boundary_faces()))
    print("VALIDATION:", mesh.validate(pts))

    # колінеарні точки — не відмова-виняток, а порожня сітка з причиною
    bad = delaunay_mesh([(float(i), 0.0) for i in range(5)])
    print("Collinear:", bad.failure, bad.message)
