"""Share-set reconstruction: decode every share, interpolate the first k."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ssr.codec import decode_share
from ssr.interpolation import DivisionMode, interpolate_at_zero
from ssr.models import Point, RecoveryResult, Share, ShareSet

logger = logging.getLogger(__name__)


def decode_shares(shares: Sequence[Share]) -> list[Point]:
    """Decode shares in order. The first bad share aborts with its index."""
    return [decode_share(s) for s in shares]


def recover(
    share_set: ShareSet,
    mode: DivisionMode = DivisionMode.EXACT,
) -> RecoveryResult:
    """Reconstruct the secret of one share set.

    All shares are decoded (so a malformed share is reported even if it
    would not be among the k used), then the first k points are
    interpolated at zero.

    Raises:
        InvalidDigit: a share value is not valid in its base.
        InsufficientPoints: fewer than k shares are present.
        DuplicateXCoordinate: two of the first k shares share an index.
    """
    if len(share_set.shares) != share_set.n:
        logger.info(
            "%s: declares n=%d but carries %d shares",
            share_set.name,
            share_set.n,
            len(share_set.shares),
        )
    if share_set.k > share_set.n:
        logger.warning(
            "%s: threshold k=%d exceeds n=%d", share_set.name, share_set.k, share_set.n
        )

    points = decode_shares(share_set.shares)
    secret = interpolate_at_zero(points, share_set.k, mode=mode)
    logger.info(
        "%s: recovered secret from %d of %d shares (%s)",
        share_set.name,
        share_set.k,
        len(points),
        mode.value,
    )

    return RecoveryResult(
        name=share_set.name,
        n=share_set.n,
        k=share_set.k,
        points=points,
        shares=list(share_set.shares),
        secret=secret,
    )


def recover_all(
    share_sets: Iterable[ShareSet],
    mode: DivisionMode = DivisionMode.EXACT,
) -> list[RecoveryResult]:
    """Reconstruct several independent share sets, in order."""
    return [recover(s, mode=mode) for s in share_sets]
