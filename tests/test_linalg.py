from __future__ import annotations

import math
import random

import pytest

from cgnd.linalg import MAX_DIMENSIONS, det, det_3x3, det_4x4, det_nxn, fit_hyperplane, plane_3d


def _random_matrix(n: int, seed: int) -> list[list[float]]:
    rng = random.Random(seed)
    return [[rng.uniform(-2.0, 2.0) for _ in range(n)] for _ in range(n)]


def test_det_known_values() -> None:
    assert det([[3.0]]) == 3.0
    assert det([[1.0, 2.0], [3.0, 4.0]]) == pytest.approx(-2.0)
    assert det([[2.0, 0.0, 1.0], [1.0, 3.0, 2.0], [1.0, 1.0, 2.0]]) == pytest.approx(6.0)
    assert det_nxn([]) == 1.0


def test_identity_and_row_swap() -> None:
    n = MAX_DIMENSIONS + 1
    eye = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    assert det(eye) == pytest.approx(1.0)
    swapped = [eye[1], eye[0]] + eye[2:]
    assert det(swapped) == pytest.approx(-1.0)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_closed_forms_match_recursion(seed: int) -> None:
    m3 = _random_matrix(3, seed)
    m4 = _random_matrix(4, seed + 100)
    assert det_3x3(m3) == pytest.approx(det_nxn(m3), abs=1e-12)
    assert det_4x4(m4) == pytest.approx(det_nxn(m4), abs=1e-12)


def test_det_capacity_is_checked() -> None:
    n = MAX_DIMENSIONS + 2
    eye = [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]
    with pytest.raises(ValueError):
        det(eye)
    with pytest.raises(ValueError):
        det([[1.0, 2.0], [3.0]])


def test_plane_3d_xy_plane() -> None:
    normal, offset = plane_3d([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)])
    assert normal == pytest.approx([0.0, 0.0, 1.0])
    assert offset == pytest.approx(0.0)


def test_plane_3d_matches_cofactor_formula() -> None:
    p = [(0.3, -1.0, 2.0), (1.5, 0.2, 0.7), (-0.4, 0.9, 1.1)]
    diffs = [[p[i + 1][j] - p[i][j] for j in range(3)] for i in range(2)]
    c = []
    for i in range(3):
        minor = [row[:i] + row[i + 1:] for row in diffs]
        c.append((-1.0) ** i * det(minor))
    length = math.sqrt(sum(x * x for x in c))
    expected = [x / length for x in c]

    normal, offset = plane_3d(p)
    assert normal == pytest.approx(expected)
    assert offset == pytest.approx(-sum(a * b for a, b in zip(expected, p[0])))


@pytest.mark.parametrize("d", [2, 4, 5])
def test_fit_hyperplane_unit_simplex(d: int) -> None:
    # e_1..e_d лежать на площині sum(x) = 1
    pts = [[1.0 if i == j else 0.0 for j in range(d)] for i in range(d)]
    normal, offset = fit_hyperplane(pts)

    assert math.sqrt(sum(c * c for c in normal)) == pytest.approx(1.0)
    for c in normal:
        assert abs(c) == pytest.approx(1.0 / math.sqrt(d))
    for p in pts:
        assert sum(a * b for a, b in zip(normal, p)) + offset == pytest.approx(0.0, abs=1e-12)


def test_fit_hyperplane_ignores_homogeneous_column() -> None:
    pts = [(2.0, 0.0, 0.0, 0.0), (0.0, 2.0, 0.0, 0.0), (0.0, 0.0, 2.0, 0.0), (0.0, 0.0, 0.0, 2.0)]
    with_ones = [p + (1.0,) for p in pts]
    assert fit_hyperplane(with_ones) == fit_hyperplane(pts)


def test_degenerate_points_give_zero_normal() -> None:
    normal, offset = fit_hyperplane([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (2.0, 2.0, 2.0)])
    assert normal == [0.0, 0.0, 0.0]
    assert offset == 0.0
