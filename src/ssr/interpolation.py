"""Exact Lagrange interpolation at x = 0 over the integers.

For points (x_i, y_i), the Lagrange basis polynomial at x=0 is:
    L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)
           = prod_{j != i} (-x_j) / (x_i - x_j)

and the secret is P(0) = sum_i y_i * L_i(0). Numerators and denominators
are accumulated as Python ints; no floating point is involved.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from fractions import Fraction

from ssr.codec import format_decimal
from ssr.errors import DuplicateXCoordinate, InsufficientPoints
from ssr.models import Point

logger = logging.getLogger(__name__)


class DivisionMode(Enum):
    """How each Lagrange term is divided by its denominator.

    EXACT sums the terms as rationals and reduces once at the end.
    TERMWISE truncates every y_i * num_i / den_i toward zero before
    summing; it matches the legacy tool bit for bit but rounds silently
    when a term does not divide evenly.
    """

    EXACT = "exact"
    TERMWISE = "termwise"


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero (``//`` floors)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _check_distinct(xs: Sequence[int]) -> None:
    seen: set[int] = set()
    for x in xs:
        if x in seen:
            raise DuplicateXCoordinate(x)
        seen.add(x)


def _basis_terms(xs: Sequence[int]) -> list[tuple[int, int]]:
    """(numerator, denominator) of L_i(0) for every i, unreduced."""
    k = len(xs)
    terms = []
    for i in range(k):
        xi = xs[i]
        numerator = 1
        denominator = 1
        for j in range(k):
            if i == j:
                continue
            xj = xs[j]
            numerator *= -xj
            denominator *= xi - xj
        terms.append((numerator, denominator))
    return terms


def lagrange_weights_at_zero(xs: Sequence[int]) -> list[Fraction]:
    """Exact basis values L_i(0) for distinct evaluation points ``xs``."""
    _check_distinct(xs)
    return [Fraction(num, den) for num, den in _basis_terms(xs)]


def interpolate_at_zero(
    points: Sequence[Point],
    k: int | None = None,
    mode: DivisionMode = DivisionMode.EXACT,
) -> int:
    """Reconstruct P(0) from the first k points.

    Args:
        points: Decoded shares; only the first ``k`` are used.
        k: Threshold (degree + 1). Defaults to ``len(points)``.
        mode: Division strategy, see DivisionMode.

    Returns:
        The secret as an exact integer. If the points do not lie on an
        integer-valued polynomial at 0, EXACT truncates the rational sum
        toward zero and logs a warning; TERMWISE rounds each term silently.

    Raises:
        ValueError: k < 1.
        InsufficientPoints: fewer than k points.
        DuplicateXCoordinate: two of the selected points share an x.
    """
    if k is None:
        k = len(points)
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")
    if len(points) < k:
        raise InsufficientPoints(needed=k, got=len(points))

    selected = list(points[:k])
    xs = [p.x for p in selected]
    _check_distinct(xs)
    terms = _basis_terms(xs)

    if mode is DivisionMode.TERMWISE:
        secret = 0
        for point, (numerator, denominator) in zip(selected, terms, strict=True):
            term = trunc_div(point.y * numerator, denominator)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("x=%d term=%s", point.x, format_decimal(term))
            secret += term
        return secret

    total = Fraction(0)
    for point, (numerator, denominator) in zip(selected, terms, strict=True):
        total += Fraction(point.y * numerator, denominator)

    if total.denominator != 1:
        logger.warning(
            "Points do not interpolate to an integer at x=0 (got %s/%s); "
            "truncating toward zero",
            format_decimal(total.numerator),
            format_decimal(total.denominator),
        )
    return trunc_div(total.numerator, total.denominator)
