from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence

EPS = 1e-10       # обережний епс для перевірок
NOISE = 1e-7      # амплітуда шуму, яким розбиваємо точні збіги координат
SPAN_EPS = 1e-7   # мінімальний розмах по осі, нижче — точки «плоскі»

Vec = List[float]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Скалярний добуток по спільній довжині (зайва однорідна 1 ігнорується)."""
    s = 0.0
    for x, y in zip(a, b):
        s += x*y
    return s

def centroid(points: Iterable[Sequence[float]], d: int) -> Vec:
    acc = [0.0] * d
    n = 0
    for p in points:
        for j in range(d):
            acc[j] += p[j]
        n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return [s*inv for s in acc]


def make_rng(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> random.Random:
    """Власне джерело шуму на кожну побудову — без спільного глобального стану."""
    if rng is not None:
        return rng
    return random.Random(seed)

def augment(points: Sequence[Sequence[float]], d: int, noise: float, rng: random.Random) -> List[Vec]:
    """
    Розширені точки: кожна координата + noise*U[0,1) (шум лише невід'ємний),
    останній стовпчик — однорідна 1 для (d+1)x(d+1) детермінантів.
    """
    out: List[Vec] = []
    for p in points:
        row = [p[j] + noise * rng.random() for j in range(d)]
        row.append(1.0)
        out.append(row)
    return out

def spans(points: Sequence[Sequence[float]], d: int) -> Vec:
    """Розмах (max - min) по кожній з перших d осей."""
    lo = [float("inf")] * d
    hi = [float("-inf")] * d
    for p in points:
        for j in range(d):
            v = p[j]
            if v < lo[j]:
                lo[j] = v
            if v > hi[j]:
                hi[j] = v
    return [h - l for h, l in zip(hi, lo)]
