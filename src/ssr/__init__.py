"""Shamir Secret Recovery (SSR).

Reconstructs the constant term of a secret-sharing polynomial from
base-encoded shares using exact Lagrange interpolation at x = 0.
"""

from ssr.codec import decode, encode
from ssr.errors import (
    DuplicateXCoordinate,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    ReconstructionError,
)
from ssr.interpolation import DivisionMode, interpolate_at_zero
from ssr.models import Point, Share

__version__ = "0.1.0"

__all__ = [
    "DivisionMode",
    "DuplicateXCoordinate",
    "InsufficientPoints",
    "InvalidBase",
    "InvalidDigit",
    "Point",
    "ReconstructionError",
    "Share",
    "decode",
    "encode",
    "interpolate_at_zero",
]
