# cgnd/mesh.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import FailureKind, HullError, InsufficientInputError
from .geom import EPS, NOISE, Vec, make_rng
from .hull import ConvexHullND
from .linalg import MAX_DIMENSIONS, det
from .predicates import homogeneous, lift_coordinate, signed_distances, visible

logger = logging.getLogger(__name__)

PROBE_PUSH = 1000.0  # наскільки далі вниз по осі w штовхаємо точку огляду

FaceKey = Tuple[int, ...]  # відсортовані вершини підграні симплекса


@dataclass(frozen=True)
class DelaunayMesh:
    """
    Делоне-сітка в R^nd: симплекси з nd+1 вершин (індекси у вхідних точках).
    Похідне представлення нижньої оболонки — перераховується на кожен виклик.
    При відмові simplices порожній, а failure/message пояснюють причину.
    Якщо вхідні точки співсферні чи колінеарні на межі (грань куба, край сітки), їхня
    грань оболонки майже вертикальна, і шум вирішує, чи бачить її точка огляду:
    тоді в сітці з'являються пласкі симплекси нульового об'єму. validate() їх
    перелічує в degenerate_simplices; фільтр нижньої оболонки їх не відкидає.
    """
    simplices: List[Tuple[int, ...]] = field(default_factory=list)
    dimension: int = 0
    failure: Optional[FailureKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __len__(self) -> int:
        return len(self.simplices)

    @classmethod
    def failed(cls, error: HullError, dimension: int = 0) -> DelaunayMesh:
        return cls(dimension=dimension, failure=error.kind, message=str(error))

    def facemap(self) -> Dict[FaceKey, List[Tuple[int, int]]]:
        """sorted(підграні) -> [(simplex_id, local_idx), ...]; local_idx — протилежна вершина."""
        out: Dict[FaceKey, List[Tuple[int, int]]] = {}
        for sid, s in enumerate(self.simplices):
            for i in range(len(s)):
                key = tuple(sorted(s[:i] + s[i+1:]))
                out.setdefault(key, []).append((sid, i))
        return out

    def boundary_faces(self) -> List[FaceKey]:
        """Граничні підграні — ті, що належать рівно одному симплексу."""
        return [key for key, lst in self.facemap().items() if len(lst) == 1]

    def validate(self, points: Sequence[Sequence[float]], eps: float = EPS) -> dict:
        """
        Швидка перевірка сітки:
          - кожна підграня має 1 (межа) або 2 (всередині) інцидентні симплекси;
          - жоден симплекс не вироджений (|об'єм| > eps).
        Повертає словник з діагностикою.
        """
        bad_face_multiplicity = [
            (key, len(lst)) for key, lst in self.facemap().items() if len(lst) not in (1, 2)
        ]
        degenerate: List[int] = []
        for sid, s in enumerate(self.simplices):
            rows = [homogeneous(points[i], self.dimension) for i in s]
            if abs(det(rows)) <= eps:
                degenerate.append(sid)
        return {
            "simplices": len(self.simplices),
            "bad_face_multiplicity": bad_face_multiplicity,
            "degenerate_simplices": degenerate,
        }


# ---------- ліфтинг ----------
def lift_to_paraboloid(
    points: Sequence[Sequence[float]],
    nd: int,
    noise: float = NOISE,
    rng: Optional[random.Random] = None,
) -> List[Vec]:
    """Збурені координати + w = сума їх квадратів (точка на параболоїді)."""
    rng = make_rng(rng)
    lifted: List[Vec] = []
    for p in points:
        row = [p[j] + noise * rng.random() for j in range(nd)]
        row.append(lift_coordinate(row, nd))
        lifted.append(row)
    return lifted

def lower_hull_probe(lifted: Sequence[Sequence[float]], nd: int) -> Vec:
    """
    Точка на осі w, з якої видно всю нижню оболонку.
    Дотична площина до параболоїда в найвищій точці (p0, w0) перетинає вісь w
    у w0 - 2|p0|^2; далі зсуваємо ще на PROBE_PUSH*|w| вниз проти похибок округлення.
    """
    top = max(range(len(lifted)), key=lambda i: lifted[i][nd])
    w0 = lifted[top][nd]
    w_opt = w0
    for j in range(nd):
        w_opt -= 2.0 * lifted[top][j] ** 2
    probe = [0.0] * nd
    probe.append(w_opt - PROBE_PUSH * abs(w_opt))
    return probe


def delaunay_mesh(
    points: Optional[Sequence[Sequence[float]]],
    nd: Optional[int] = None,
    *,
    noise: float = NOISE,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    **options,
) -> DelaunayMesh:
    """
    Делоне-тріангуляція через опуклу оболонку точок, піднятих на параболоїд:
    симплекси — грані нижньої оболонки (видимі з точки lower_hull_probe).
    Порожній результат без помилки, якщо таких граней немає.
    """
    if points is None or len(points) == 0:
        return DelaunayMesh.failed(InsufficientInputError("No points given"), nd or 0)
    if nd is None:
        nd = len(points[0])
    if not 1 <= nd <= MAX_DIMENSIONS - 1:
        raise ValueError(f"Dimension must be in [1, {MAX_DIMENSIONS - 1}], got {nd}")
    for i, p in enumerate(points):
        if len(p) != nd:
            raise ValueError(f"Point {i} has {len(p)} coordinates, expected {nd}")

    rng = make_rng(rng, seed)
    lifted = lift_to_paraboloid(points, nd, noise, rng)

    try:
        hull = ConvexHullND(lifted, nd + 1, noise=noise, rng=rng, **options)
    except HullError as e:
        logger.warning("Delaunay failed (%s): %s", e.kind.value, e)
        return DelaunayMesh.failed(e, nd)

    probe = lower_hull_probe(lifted, nd)
    normals, offsets = hull.planes()
    vals = signed_distances(normals, offsets, probe, options.get("backend", "python"))
    simplices = [f for f, s in zip(hull.faces(), vals) if visible(s)]

    logger.debug("Delaunay: %d of %d hull facets on the lower hull", len(simplices), len(vals))
    return DelaunayMesh(simplices=simplices, dimension=nd)
