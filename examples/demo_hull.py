import logging
import random

from cgnd.hull import ConvexHullND, convex_hull_3d

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    raw = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]
    res = convex_hull_3d(raw, seed=1)
    print("Cube faces:", len(res), res.faces)

    # 4D: випадкова хмара, внутрішні точки відкидаються
    rng = random.Random(0)
    cloud = [tuple(rng.gauss(0.0, 1.0) for _ in range(4)) for _ in range(40)]
    hull = ConvexHullND(cloud, seed=0)
    print("4D faces:", len(hull.faces()), "interior:", len(hull.interior))
    print("VALIDATION:", hull.validate())
