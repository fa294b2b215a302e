"""Plain-text progress report for recovered share sets."""

from __future__ import annotations

from collections.abc import Sequence

from ssr.codec import format_decimal
from ssr.models import RecoveryResult

RULE_WIDTH = 50

BANNER = [
    "╔════════════════════════════════════════════════╗",
    "║   SHAMIR'S SECRET SHARING - RECOVERY           ║",
    "║   Polynomial Reconstruction using Lagrange     ║",
    "╚════════════════════════════════════════════════╝",
]


def _block(title: str, char: str = "=") -> list[str]:
    return [char * RULE_WIDTH, title, char * RULE_WIDTH]


def format_points(result: RecoveryResult) -> str:
    """Points as "(x,y), (x,y), ..."."""
    return ", ".join(f"({p.x},{format_decimal(p.y)})" for p in result.points)


def format_case(result: RecoveryResult) -> list[str]:
    """Per-case report: parameters, every decoded point, then the secret."""
    lines = [""]
    lines += _block(result.name.upper())
    lines += [
        f"n (total roots provided): {result.n}",
        f"k (minimum roots required): {result.k}",
        f"Polynomial degree: {result.k - 1}",
        "",
    ]
    for share, point in zip(result.shares, result.points, strict=True):
        y = format_decimal(point.y)
        lines.append(f"Point {share.index}: x = {point.x}, y = {y}")
        lines.append(f'  (Original: base {share.base}, value "{share.value}")')

    lines += ["", "Final points:", "", format_points(result), ""]
    lines.append("*" * RULE_WIDTH)
    lines.append(f"SECRET (Constant term c): {format_decimal(result.secret)}")
    lines.append("*" * RULE_WIDTH)
    return lines


def format_summary(results: Sequence[RecoveryResult]) -> list[str]:
    """Closing block listing each case's secret."""
    title = "RESULT" if len(results) == 1 else "SUMMARY OF RESULTS"
    lines = [""] + _block(title)
    lines += [f"{r.name} Secret: {format_decimal(r.secret)}" for r in results]
    lines.append("=" * RULE_WIDTH)
    return lines
