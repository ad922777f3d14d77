from __future__ import annotations
from typing import List, Sequence, Tuple

from .hull import convex_hull_nd
from .mesh import delaunay_mesh


def triangulate(
    points: Sequence[Sequence[float]],
    backend: str = "internal",
    **options,
) -> Tuple[List[Tuple[int, ...]], List[Tuple[int, ...]]]:
    """
    Повний пайплайн для точок у R^nd:
      - опукла оболонка (грані з nd вершин);
      - Делоне-тріангуляція (симплекси з nd+1 вершин).

    backend="internal" — наші ConvexHullND + delaunay_mesh (відмова -> типізована помилка);
    backend="scipy"    — Qhull через SciPy, для звірки.
    """
    if backend.lower() == "internal":
        hull = convex_hull_nd(points, with_planes=False, **options).unwrap()
        mesh = delaunay_mesh(points, **options)
        if not mesh.ok:
            raise RuntimeError(f"Delaunay failed: {mesh.message}")
        return hull.faces, mesh.simplices

    elif backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull, Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy; install it or use backend='internal'"
            ) from e

        arr = np.array(points, dtype=float)
        hull = ConvexHull(arr)
        dela = Delaunay(arr, qhull_options="QJ")  # QJ = joggle, як і наш шум
        surface = [tuple(int(i) for i in s) for s in hull.simplices]
        simplices = [tuple(int(i) for i in s) for s in dela.simplices]
        return surface, simplices

    else:
        raise ValueError(f"Unknown backend: {backend}")
