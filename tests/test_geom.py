from __future__ import annotations

import random

import pytest

from cgnd.geom import NOISE, augment, centroid, make_rng, spans
from cgnd.predicates import orientation, signed_distance, signed_distances, visible


def test_augment_adds_bounded_noise_and_homogeneous_one() -> None:
    pts = [(0.0, 0.0, 0.0), (1.0, 2.0, 3.0)]
    aug = augment(pts, 3, NOISE, random.Random(7))
    for p, a in zip(pts, aug):
        assert len(a) == 4
        assert a[3] == 1.0
        for x, y in zip(p, a):
            assert 0.0 <= y - x < NOISE


def test_make_rng_is_deterministic_per_seed() -> None:
    a = make_rng(seed=11)
    b = make_rng(seed=11)
    assert [a.random() for _ in range(3)] == [b.random() for _ in range(3)]
    own = random.Random(1)
    assert make_rng(own) is own


def test_spans_and_centroid() -> None:
    pts = [(0.0, 1.0), (2.0, -1.0), (1.0, 0.0)]
    assert spans(pts, 2) == [2.0, 2.0]
    assert centroid(pts, 2) == pytest.approx([1.0, 0.0])
    with pytest.raises(ValueError):
        centroid([], 2)


def test_signed_distance_and_visibility() -> None:
    normal, offset = [0.0, 0.0, 1.0], -1.0
    assert signed_distance(normal, offset, (0.0, 0.0, 3.0, 1.0)) == pytest.approx(2.0)
    assert visible(signed_distance(normal, offset, (5.0, 5.0, 1.5)))
    assert not visible(signed_distance(normal, offset, (0.0, 0.0, 1.0)))
    assert not visible(-1e-300)
    assert signed_distances([normal, [1.0, 0.0, 0.0]], [offset, 0.0], (2.0, 0.0, 0.0)) == pytest.approx([-1.0, 2.0])


def test_signed_distances_numpy_backend() -> None:
    pytest.importorskip("numpy")
    normals = [[0.0, 0.0, 1.0], [0.6, 0.8, 0.0]]
    offsets = [-1.0, 0.5]
    x = (1.0, 2.0, 3.0, 1.0)
    assert signed_distances(normals, offsets, x, "numpy") == pytest.approx(signed_distances(normals, offsets, x))
    assert signed_distances([], [], x, "numpy") == []


def test_signed_distances_unknown_backend() -> None:
    with pytest.raises(ValueError):
        signed_distances([[1.0, 0.0]], [0.0], (0.0, 0.0), "cblas")


def test_orientation_sign_tracks_witness_side() -> None:
    pts = [
        [0.0, 0.0, 0.0, 1.0],
        [1.0, 0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0, 1.0],
        [0.0, 0.0, 1.0, 1.0],
        [0.0, 0.0, -1.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
    ]
    up = orientation(pts, (0, 1, 2), 3)
    down = orientation(pts, (0, 1, 2), 4)
    assert up * down < 0
    assert orientation(pts, (0, 1, 2), 5) == 0.0
