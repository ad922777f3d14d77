from __future__ import annotations

import math
import random

import pytest

from cgnd.errors import DegenerateInputError
from cgnd.linalg import det
from cgnd.pipeline import triangulate

CUBE_WITH_INSIDE = [
    (0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0),
    (0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1),
    (0.5, 0.5, 0.5), (0.3, 0.6, 0.4), (0.7, 0.25, 0.65),
]


def volume(points, s) -> float:
    rows = [list(map(float, points[i])) + [1.0] for i in s]
    return abs(det(rows)) / math.factorial(len(s) - 1)


def test_internal_backend_on_cube() -> None:
    surface, simplices = triangulate(CUBE_WITH_INSIDE, seed=4)
    assert len(surface) == 12
    assert {i for f in surface for i in f} == set(range(8))
    assert all(len(s) == 4 for s in simplices)
    assert sum(volume(CUBE_WITH_INSIDE, s) for s in simplices) == pytest.approx(1.0, abs=1e-6)


def test_scipy_backend_agrees_with_internal() -> None:
    pytest.importorskip("scipy.spatial")
    rng = random.Random(10)
    pts = [(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)) for _ in range(25)]
    ours_surface, ours_simplices = triangulate(pts, seed=10)
    ref_surface, ref_simplices = triangulate(pts, backend="scipy")
    assert {frozenset(f) for f in ours_surface} == {frozenset(f) for f in ref_surface}
    assert len(ours_simplices) == len(ref_simplices)


def test_unknown_backend() -> None:
    with pytest.raises(ValueError):
        triangulate(CUBE_WITH_INSIDE, backend="cgal")


def test_degenerate_input_raises_typed_error() -> None:
    flat = [(x, y, 0.0) for x in range(3) for y in range(3)]
    with pytest.raises(DegenerateInputError):
        triangulate(flat, seed=0)
