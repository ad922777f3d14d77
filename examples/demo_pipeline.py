# examples/demo_pipeline.py
import random

from cgnd.pipeline import triangulate


def report(name, points, backend):
    surface, simplices = triangulate(points, backend=backend, seed=2)
    print(f"[{name}, {backend}] points: {len(points)}, "
          f"hull facets: {len(surface)}, simplices: {len(simplices)}")


if __name__ == "__main__":
    rng = random.Random(5)
    disk = []
    while len(disk) < 25:
        x, y = rng.uniform(-1, 1), rng.uniform(-1, 1)
        if x*x + y*y <= 1.0:
            disk.append((x, y))

    ball = [tuple(rng.gauss(0.0, 1.0) for _ in range(3)) for _ in range(30)]

    # той самий виклик для 2D і 3D; "scipy" — звірка з Qhull
    for backend in ("internal", "scipy"):
        try:
            report("2D disk", disk, backend)
            report("3D ball", ball, backend)
        except RuntimeError as e:
            print(f"[{backend}] skipped: {e}")
