"""Data models for shares, decoded points, and reconstruction cases."""

from __future__ import annotations

from dataclasses import dataclass, field

from ssr.errors import InvalidBase

MIN_BASE = 2
MAX_BASE = 36


def check_base(base: int) -> None:
    """Raise InvalidBase unless ``base`` is an int radix in [MIN_BASE, MAX_BASE]."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base, MIN_BASE, MAX_BASE)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base, MIN_BASE, MAX_BASE)


@dataclass(frozen=True)
class Share:
    """A raw share: the polynomial value at x=index, written in ``base``."""

    index: int
    base: int
    value: str

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise ValueError(f"Share index must be an integer, got {self.index!r}")
        if self.index < 1:
            raise ValueError(f"Share index must be >= 1, got {self.index}")
        check_base(self.base)


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y) with y = f(x)."""

    x: int
    y: int


@dataclass
class ShareSet:
    """One reconstruction case: the {n, k} descriptor plus its shares.

    Attributes:
        n: Total number of shares the case claims to provide.
        k: Threshold -- shares needed to reconstruct (polynomial degree k-1).
        shares: Shares ordered by ascending index.
        name: Label used in reports and result files.
    """

    n: int
    k: int
    shares: list[Share] = field(default_factory=list)
    name: str = "case"

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")
        if self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")

    @property
    def degree(self) -> int:
        return self.k - 1


@dataclass(frozen=True)
class RecoveryResult:
    """Outcome of reconstructing one share set.

    Attributes:
        name: Case label.
        n: Declared share count.
        k: Threshold used.
        points: Every decoded point, in share order.
        shares: The raw shares the points were decoded from.
        secret: The polynomial's value at x = 0.
    """

    name: str
    n: int
    k: int
    points: list[Point]
    shares: list[Share]
    secret: int

    @property
    def used(self) -> list[Point]:
        """The first k points, the ones the secret was interpolated from."""
        return self.points[: self.k]
