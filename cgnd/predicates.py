# cgnd/predicates.py
from __future__ import annotations
from typing import List, Sequence

from .geom import Vec, dot
from .linalg import det


def signed_distance(normal: Sequence[float], offset: float, x: Sequence[float]) -> float:
    """normal·x + offset; однорідна 1 у x ігнорується (dot по довжині нормалі)."""
    return dot(normal, x) + offset

def visible(distance: float) -> bool:
    """Грань видима з точки, якщо її знакова відстань строго додатна (зовнішній бік)."""
    return distance > 0.0

def orientation(points: Sequence[Sequence[float]], face: Sequence[int], witness: int) -> float:
    """
    Детермінант (d+1)x(d+1) з розширених вершин грані та точки-свідка.
    < 0  — свідок з видимого боку (грань треба перевернути),
    > 0  — свідок «всередині»,
      0  — свідок компланарний з гранню.
    """
    rows = [points[i] for i in face]
    rows.append(points[witness])
    return det(rows)

def signed_distances(
    normals: Sequence[Sequence[float]],
    offsets: Sequence[float],
    x: Sequence[float],
    backend: str = "python",
) -> List[float]:
    """
    Відстані від x до всіх граней разом.
    backend="numpy" — один матрично-векторний добуток (результат еквівалентний,
    але не обов'язково біт-у-біт).
    """
    if backend == "python":
        return [signed_distance(n, o, x) for n, o in zip(normals, offsets)]
    if backend == "numpy":
        try:
            import numpy as np
        except ImportError as e:
            raise RuntimeError(
                "backend='numpy' requires numpy; install it or use backend='python'"
            ) from e
        if not normals:
            return []
        a = np.asarray(normals, dtype=float)
        xs = np.asarray(x[:a.shape[1]], dtype=float)
        return (a @ xs + np.asarray(offsets, dtype=float)).tolist()
    raise ValueError(f"Unknown backend: {backend}")

def lift_coordinate(p: Sequence[float], nd: int) -> float:
    """Сума квадратів перших nd координат — висота на параболоїді."""
    s = 0.0
    for j in range(nd):
        s += p[j]*p[j]
    return s

def homogeneous(p: Sequence[float], d: int) -> Vec:
    """Перші d координат + однорідна 1."""
    row = [float(p[j]) for j in range(d)]
    row.append(1.0)
    return row
