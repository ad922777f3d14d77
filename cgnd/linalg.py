# cgnd/linalg.py
from __future__ import annotations
from math import sqrt
from typing import List, Sequence, Tuple

from .geom import Vec

MAX_DIMENSIONS = 5  # найбільша підтримувана розмірність оболонки

Matrix = Sequence[Sequence[float]]


# ---------- детермінанти ----------
def _sub_matrix(m: Matrix, col: int) -> List[List[float]]:
    """Мінор: без першого рядка і без стовпчика col."""
    return [list(row[:col]) + list(row[col+1:]) for row in m[1:]]

def det_nxn(m: Matrix) -> float:
    """Детермінант розкладом за першим рядком (рекурсивно, O(n!))."""
    n = len(m)
    if n == 0:
        return 1.0
    s = 0.0
    sign = 1.0
    for i in range(n):
        s += sign * m[0][i] * det_nxn(_sub_matrix(m, i))
        sign = -sign
    return s

def det_3x3(m: Matrix) -> float:
    return (m[0][0] * (m[1][1]*m[2][2] - m[1][2]*m[2][1])
            - m[0][1] * (m[1][0]*m[2][2] - m[1][2]*m[2][0])
            + m[0][2] * (m[1][0]*m[2][1] - m[1][1]*m[2][0]))

def det_4x4(m: Matrix) -> float:
    """Замкнена форма 4x4 через 2x2-мінори верхніх і нижніх рядків (тривимірний випадок)."""
    a00, a01, a02, a03 = m[0][0], m[0][1], m[0][2], m[0][3]
    a10, a11, a12, a13 = m[1][0], m[1][1], m[1][2], m[1][3]
    a20, a21, a22, a23 = m[2][0], m[2][1], m[2][2], m[2][3]
    a30, a31, a32, a33 = m[3][0], m[3][1], m[3][2], m[3][3]

    s0 = a00*a11 - a10*a01
    s1 = a00*a12 - a10*a02
    s2 = a00*a13 - a10*a03
    s3 = a01*a12 - a11*a02
    s4 = a01*a13 - a11*a03
    s5 = a02*a13 - a12*a03

    c5 = a22*a33 - a32*a23
    c4 = a21*a33 - a31*a23
    c3 = a21*a32 - a31*a22
    c2 = a20*a33 - a30*a23
    c1 = a20*a32 - a30*a22
    c0 = a20*a31 - a30*a21

    return s0*c5 - s1*c4 + s2*c3 + s3*c2 - s4*c1 + s5*c0

def det(m: Matrix) -> float:
    """
    Детермінант квадратної матриці розміру до (MAX_DIMENSIONS + 1).
    Малі розміри — замкнені формули, решта — det_nxn.
    """
    n = len(m)
    if n > MAX_DIMENSIONS + 1:
        raise ValueError(f"matrix of size {n} exceeds capacity {MAX_DIMENSIONS + 1}")
    for row in m:
        if len(row) < n:
            raise ValueError("matrix is not square")
    if n == 1:
        return m[0][0]
    if n == 2:
        return m[0][0]*m[1][1] - m[0][1]*m[1][0]
    if n == 3:
        return det_3x3(m)
    if n == 4:
        return det_4x4(m)
    return det_nxn(m)


# ---------- гіперплощини ----------
def _normalise(c: Vec, p0: Sequence[float]) -> Tuple[Vec, float]:
    norm_c = sqrt(sum(x*x for x in c))
    if norm_c == 0.0:
        # вироджена грань: нуль-нормаль, помилка виплине на перевірці орієнтації
        return [0.0] * len(c), 0.0
    c = [x / norm_c for x in c]
    offset = 0.0
    for j in range(len(c)):
        offset -= p0[j] * c[j]
    return c, offset

def plane_3d(p: Sequence[Sequence[float]]) -> Tuple[Vec, float]:
    """Площина через 3 точки: нормаль = (p1-p0) x (p2-p1), зсув = -n·p0."""
    a, b, c = p[0], p[1], p[2]
    u0, u1, u2 = b[0] - a[0], b[1] - a[1], b[2] - a[2]
    v0, v1, v2 = c[0] - b[0], c[1] - b[1], c[2] - b[2]
    n = [u1*v2 - u2*v1,
         -(u0*v2 - u2*v0),
         u0*v1 - u1*v0]
    return _normalise(n, a)

def fit_hyperplane(p: Sequence[Sequence[float]]) -> Tuple[Vec, float]:
    """
    Гіперплощина через d афінно незалежних точок у R^d.
    Компонента i нормалі — мінор (d-1)x(d-1) матриці послідовних різниць
    без стовпчика i, зі знаком, що чергується. Точки можуть нести
    однорідну 1 наприкінці — вона ігнорується.
    """
    d = len(p)
    if d == 3:
        return plane_3d(p)
    diffs = [[p[i+1][j] - p[i][j] for j in range(d)] for i in range(d - 1)]
    c: Vec = []
    sign = 1.0
    for i in range(d):
        minor = [row[:i] + row[i+1:] for row in diffs]
        c.append(sign * det(minor))
        sign = -sign
    return _normalise(c, p[0])
