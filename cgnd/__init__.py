"""
cgnd — мінімальна бібліотека для N-вимірної комп'ютерної геометрії.
Зараз: інкрементальний (quickhull) convex hull у R^d (d <= 5)
+ Делоне-тріангуляція через ліфтинг на параболоїд.
"""

__version__ = "0.1.0"

from cgnd.errors import (
    FailureKind,
    HullError,
    InsufficientInputError,
    DegenerateInputError,
    FacetLimitExceededError,
    OrientationError,
)
from cgnd.geom import EPS, NOISE
from cgnd.linalg import MAX_DIMENSIONS, det, fit_hyperplane
from cgnd.hull import MAX_NUM_FACES, ConvexHullND, Facet, HullResult, HullState, convex_hull_3d, convex_hull_nd
from cgnd.mesh import DelaunayMesh, delaunay_mesh
from cgnd.pipeline import triangulate

__all__ = [
    "FailureKind", "HullError", "InsufficientInputError", "DegenerateInputError",
    "FacetLimitExceededError", "OrientationError",
    "EPS", "NOISE", "MAX_DIMENSIONS", "MAX_NUM_FACES",
    "det", "fit_hyperplane",
    "ConvexHullND", "Facet", "HullResult", "HullState", "convex_hull_3d", "convex_hull_nd",
    "DelaunayMesh", "delaunay_mesh", "triangulate",
    "__version__",
]
