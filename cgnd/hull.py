from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import (
    ERRORS,
    DegenerateInputError,
    FacetLimitExceededError,
    FailureKind,
    HullError,
    InsufficientInputError,
    OrientationError,
)
from .geom import NOISE, SPAN_EPS, Vec, augment, centroid, make_rng, spans
from .linalg import MAX_DIMENSIONS, fit_hyperplane
from .ordering import shared_ridge, sort_with_index
from .predicates import orientation, signed_distance, signed_distances, visible

logger = logging.getLogger(__name__)

MAX_NUM_FACES = 50_000  # жорстка стеля кількості живих граней

Ridge = Tuple[int, ...]     # d-1 індексів: спільна підгрань двох граней


class HullState(Enum):
    INITIALIZING = "initializing"
    SCANNING = "scanning"
    REBUILDING = "rebuilding"
    DONE = "done"
    FAILED = "failed"


@dataclass
class Facet:
    """
    Грань оболонки — симплекс з d вершин.
    v: індекси вершин; порядок задає орієнтацію (нормаль назовні).
    normal, offset: гіперплощина normal·x + offset = 0; з додатного боку — «зовні».
    """
    v: Tuple[int, ...]
    normal: Vec
    offset: float

    def distance(self, x: Sequence[float]) -> float:
        return signed_distance(self.normal, self.offset, x)

    def flip(self) -> None:
        """Поміняти місцями дві останні вершини і розвернути гіперплощину."""
        v = list(self.v)
        v[-2], v[-1] = v[-1], v[-2]
        self.v = tuple(v)
        self.normal = [-c for c in self.normal]
        self.offset = -self.offset

    def ridges(self) -> List[Ridge]:
        """Усі d підграней (відсортовані, без однієї вершини кожна)."""
        vs = sorted(self.v)
        return [tuple(vs[:i] + vs[i+1:]) for i in range(len(vs))]


class ConvexHullND:
    """
    Інкрементальний (quickhull) convex hull у R^d, 2 <= d <= MAX_DIMENSIONS.

    Вхід: точки однакової розмірності (мінімум d+1, що охоплюють усі d осей).
    Будова відбувається в конструкторі; faces()/planes() повертають свіжі копії.
    Точки перед побудовою злегка збурюються шумом (noise), тож вихідна оболонка
    симпліціальна навіть для кубів і дублікатів.
    """

    def __init__(
        self,
        points: Optional[Sequence[Sequence[float]]],
        d: Optional[int] = None,
        *,
        noise: float = NOISE,
        max_faces: int = MAX_NUM_FACES,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        backend: str = "python",
        check_orientation: bool = True,
    ):
        self.state = HullState.INITIALIZING
        self.max_faces = max_faces
        self.backend = backend
        self.check_orientation = check_orientation

        self.faces_list: List[Facet] = []   # живі грані поточної оболонки
        self.interior: List[int] = []       # точки, що опинились всередині (відкинуті)
        self._known: List[int] = []         # симплекс + уже оброблені точки — кандидати у свідки

        try:
            self.d = self._check_input(points, d)
            self.points: List[Tuple[float, ...]] = [tuple(float(c) for c in p) for p in points]
            self.P: List[Vec] = augment(self.points, self.d, noise, make_rng(rng, seed))
            self.span: Vec = self._check_span()

            # 1) стартовий симплекс
            self._build_initial_simplex()

            # 2) основний цикл по решті точок
            self._expand_until_done()
        except (HullError, OrientationError):
            self.state = HullState.FAILED
            raise

        self.state = HullState.DONE
        logger.info(
            "Hull built: d=%d, %d points, %d facets, %d interior points",
            self.d, len(self.P), len(self.faces_list), len(self.interior),
        )

    # ---------------- Публічний API ----------------
    def faces(self) -> List[Tuple[int, ...]]:
        """Грані як кортежі індексів вершин (індекси — у вхідному масиві точок)."""
        return [f.v for f in self.faces_list]

    def planes(self) -> Tuple[List[Tuple[float, ...]], List[float]]:
        """Нормалі та зсуви гіперплощин граней (у порядку faces())."""
        return [tuple(f.normal) for f in self.faces_list], [f.offset for f in self.faces_list]

    # ---------------- Внутрішні методи ----------------
    @staticmethod
    def _check_input(points: Optional[Sequence[Sequence[float]]], d: Optional[int]) -> int:
        if points is None or len(points) == 0:
            raise InsufficientInputError("No points given")
        if d is None:
            d = len(points[0])
        if not 2 <= d <= MAX_DIMENSIONS:
            raise ValueError(f"Dimension must be in [2, {MAX_DIMENSIONS}], got {d}")
        for i, p in enumerate(points):
            if len(p) != d:
                raise ValueError(f"Point {i} has {len(p)} coordinates, expected {d}")
        if len(points) <= d:
            raise InsufficientInputError(f"Need at least {d + 1} points in {d}D, got {len(points)}")
        return d

    def _check_span(self) -> Vec:
        """
        Розмах по кожній осі (за вхідними координатами, до шуму). Якщо якась
        вісь «плоска», оболонку в R^d не побудувати — треба знизити розмірність точок.
        """
        span = spans(self.points, self.d)
        for j, s in enumerate(span):
            if s < SPAN_EPS:
                raise DegenerateInputError(
                    f"Input does not span all {self.d} dimensions (axis {j} span {s:.3g})"
                )
        return span

    def _build_initial_simplex(self) -> None:
        """
        Симплекс з перших d+1 точок: грань i — усі, крім точки i.
        Точка i і є свідком орієнтації: вона не повинна бачити свою протилежну грань.
        """
        simplex = list(range(self.d + 1))
        for i in simplex:
            v = tuple(j for j in simplex if j != i)
            normal, offset = fit_hyperplane([self.P[j] for j in v])
            face = Facet(v, normal, offset)
            if orientation(self.P, face.v, i) < 0:
                face.flip()
            self.faces_list.append(face)
        self._known = simplex[:]

    def _scan_order(self) -> List[int]:
        """
        Порядок обходу решти точок: від найдальших (відносно центроїда,
        з нормуванням по розмаху осей) до найближчих. Далекі точки швидше
        «з'їдають» внутрішні, і живих граней менше.
        """
        d = self.d
        rest = range(d + 1, len(self.P))
        if not rest:
            return []
        meanp = centroid((self.P[i] for i in rest), d)
        reldist: List[float] = []
        for i in rest:
            p = self.P[i]
            s = 0.0
            for j in range(d):
                t = (p[j] - meanp[j]) / self.span[j]
                s += t*t
            reldist.append(s)
        _, order = sort_with_index(reldist, descending=True)
        return [k + d + 1 for k in order]

    def _expand_until_done(self) -> None:
        """Головний цикл: кожна точка або всередині, або перебудовує оболонку."""
        for p_idx in self._scan_order():
            self.state = HullState.SCANNING
            dist = signed_distances(
                [f.normal for f in self.faces_list],
                [f.offset for f in self.faces_list],
                self.P[p_idx],
                self.backend,
            )
            mask = [visible(s) for s in dist]
            if any(mask):
                self.state = HullState.REBUILDING
                self._add_point_and_update(p_idx, mask)
            else:
                self.interior.append(p_idx)
            self._known.append(p_idx)

    def _add_point_and_update(self, p_idx: int, mask: List[bool]) -> None:
        """
        Додати точку p_idx до оболонки:
          1) поділити грані на видимі/невидимі й знайти горизонт,
          2) знести видимі грані,
          3) пришити нові грані горизонт + p_idx,
          4) зорієнтувати нові грані назовні.
        """
        visible = [f for f, m in zip(self.faces_list, mask) if m]
        hidden = [f for f, m in zip(self.faces_list, mask) if not m]

        # 1) горизонт: спільні підграні видимої та невидимої граней
        horizon: List[Ridge] = []
        for vf in visible:
            for hf in hidden:
                ridge = shared_ridge(vf.v, hf.v)
                if ridge is not None:
                    horizon.append(ridge)

        n_faces = len(hidden) + len(horizon)
        if n_faces > self.max_faces:
            raise FacetLimitExceededError(
                f"Facet count {n_faces} exceeds the limit of {self.max_faces}"
            )

        # 2) видимі грані просто не потрапляють у новий список
        self.faces_list = hidden

        # 3-4) нові грані
        for ridge in horizon:
            v = ridge + (p_idx,)
            normal, offset = fit_hyperplane([self.P[i] for i in v])
            face = Facet(v, normal, offset)
            self._orient(face)
            self.faces_list.append(face)

        logger.debug(
            "Point %d: %d visible, %d horizon ridges, %d live facets",
            p_idx, len(visible), len(horizon), len(self.faces_list),
        )

    def _orient(self, face: Facet) -> None:
        """
        Шукаємо свідка серед відомих точок (не вершин грані): поки детермінант
        рівно 0 — точка компланарна, беремо наступну. Від'ємний — перевертаємо.
        """
        members = set(face.v)
        witness = None
        det_a = 0.0
        for w in self._known:
            if w in members:
                continue
            det_a = orientation(self.P, face.v, w)
            if det_a != 0.0:
                witness = w
                break
        if witness is None:
            raise OrientationError(f"No non-coplanar witness for face {face.v}")

        if det_a < 0.0:
            face.flip()
            if self.check_orientation and orientation(self.P, face.v, witness) <= 0.0:
                raise OrientationError(f"Face {face.v} cannot be properly oriented")

    # ---------------- Діагностика ----------------
    def validate(self, points: Optional[Sequence[Sequence[float]]] = None, tol: float = 1e-6) -> dict:
        """
        Перевірка коректності:
          - кожна підгрань (d-1 вершин) зустрічається рівно у 2 гранях;
          - кожна грань орієнтована назовні відносно першого некомпланарного свідка;
          - жодна точка (за замовчуванням — вхідні, без шуму) не лежить
            зовні жодної грані далі ніж tol.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        faces = self.faces_list

        # 1) кратність підграней
        ridge_count: Dict[Ridge, int] = {}
        for f in faces:
            for r in f.ridges():
                ridge_count[r] = ridge_count.get(r, 0) + 1
        bad_ridges = [(r, k) for r, k in ridge_count.items() if k != 2]

        # 2) орієнтації
        bad_orient: List[int] = []
        for fid, f in enumerate(faces):
            members = set(f.v)
            for w in self._known:
                if w in members:
                    continue
                val = orientation(self.P, f.v, w)
                if val != 0.0:
                    if val < 0.0:
                        bad_orient.append(fid)
                    break
            else:
                bad_orient.append(fid)

        # 3) опуклість
        pts = self.points if points is None else points
        outside: List[Tuple[int, int]] = []
        for fid, f in enumerate(faces):
            for pi, x in enumerate(pts):
                if f.distance(x) > tol:
                    outside.append((fid, pi))

        return {
            "faces": len(faces),
            "unique_vertices": len({i for f in faces for i in f.v}),
            "bad_ridges": bad_ridges,
            "bad_orient_faces": bad_orient,
            "outside_points": outside,
        }


@dataclass(frozen=True)
class HullResult:
    """
    Результат побудови: або грані (+ гіперплощини), або причина відмови.
    Часткової оболонки при відмові немає.
    """
    faces: List[Tuple[int, ...]] = field(default_factory=list)
    normals: Optional[List[Tuple[float, ...]]] = None
    offsets: Optional[List[float]] = None
    failure: Optional[FailureKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __len__(self) -> int:
        return len(self.faces)

    def unwrap(self) -> HullResult:
        """Повернути себе або підняти типізовану помилку відмови."""
        if self.failure is not None:
            raise ERRORS[self.failure](self.message)
        return self

    @classmethod
    def failed(cls, error: HullError) -> HullResult:
        return cls(failure=error.kind, message=str(error))

    @classmethod
    def from_hull(cls, hull: ConvexHullND, with_planes: bool = True) -> HullResult:
        if not with_planes:
            return cls(faces=hull.faces())
        normals, offsets = hull.planes()
        return cls(faces=hull.faces(), normals=normals, offsets=offsets)


def convex_hull_nd(
    points: Optional[Sequence[Sequence[float]]],
    d: Optional[int] = None,
    *,
    with_planes: bool = True,
    **options,
) -> HullResult:
    """Оболонка в R^d. Відмови через дані повертаються як HullResult.failed."""
    try:
        hull = ConvexHullND(points, d, **options)
    except HullError as e:
        logger.warning("Hull build failed (%s): %s", e.kind.value, e)
        return HullResult.failed(e)
    return HullResult.from_hull(hull, with_planes)

def convex_hull_3d(
    points: Optional[Sequence[Sequence[float]]],
    *,
    with_planes: bool = False,
    **options,
) -> HullResult:
    """3D-оболонка: трикутні грані (замкнені формули площини та 4x4 детермінанта)."""
    return convex_hull_nd(points, 3, with_planes=with_planes, **options)
