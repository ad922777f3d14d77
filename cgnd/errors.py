from __future__ import annotations
from enum import Enum


class FailureKind(Enum):
    """Чому побудова не вдалась (для HullResult / DelaunayMesh)."""
    INSUFFICIENT_INPUT = "insufficient_input"
    DEGENERATE_INPUT = "degenerate_input"
    FACET_LIMIT = "facet_limit"


class HullError(ValueError):
    """Відмова побудови через вхідні дані; часткової оболонки немає."""
    kind: FailureKind


class InsufficientInputError(HullError):
    kind = FailureKind.INSUFFICIENT_INPUT


class DegenerateInputError(HullError):
    kind = FailureKind.DEGENERATE_INPUT


class FacetLimitExceededError(HullError):
    kind = FailureKind.FACET_LIMIT


class OrientationError(RuntimeError):
    """Порушено інваріант орієнтації граней — логічна помилка, а не погані дані."""


ERRORS = {
    FailureKind.INSUFFICIENT_INPUT: InsufficientInputError,
    FailureKind.DEGENERATE_INPUT: DegenerateInputError,
    FailureKind.FACET_LIMIT: FacetLimitExceededError,
}
