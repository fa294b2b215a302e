"""Polynomial helpers for building shares with a known secret."""

from __future__ import annotations

import random

from ssr.codec import encode
from ssr.models import Point, Share


def eval_poly(coeffs: list[int], x: int) -> int:
    """Horner evaluation; coeffs[0] is the constant term."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def random_polynomial(
    rng: random.Random, degree: int, bits: int = 256, signed: bool = True
) -> list[int]:
    """Integer coefficients with a non-negative constant term."""
    coeffs = [rng.getrandbits(bits)]
    for _ in range(degree):
        c = rng.getrandbits(bits)
        coeffs.append(c * rng.choice((1, -1)) if signed else c)
    return coeffs


def points_on(coeffs: list[int], xs: list[int]) -> list[Point]:
    return [Point(x=x, y=eval_poly(coeffs, x)) for x in xs]


def shares_on(coeffs: list[int], xs: list[int], bases: list[int]) -> list[Share]:
    """Shares at x in xs; values must be non-negative to be encodable."""
    return [
        Share(index=x, base=b, value=encode(eval_poly(coeffs, x), b))
        for x, b in zip(xs, bases, strict=True)
    ]
