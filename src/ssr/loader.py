"""Read share-set JSON documents and write result files.

Input layout::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Keys "1" .. "n" are share indices. Missing indices are skipped, and
shares numbered above n are ignored without being decoded.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ssr.codec import format_decimal, parse_base
from ssr.errors import InvalidBase, ShareFileError
from ssr.models import RecoveryResult, Share, ShareSet

logger = logging.getLogger(__name__)


def _positive_int(raw: Any, what: str, source: str) -> int:
    if isinstance(raw, bool):
        raise ShareFileError(source, f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        value = int(raw.strip())
    else:
        raise ShareFileError(source, f"{what} must be an integer, got {raw!r}")
    if value < 1:
        raise ShareFileError(source, f"{what} must be >= 1, got {value}")
    return value


def parse_share_set(data: Mapping[str, Any], name: str = "case") -> ShareSet:
    """Build a ShareSet from an already-parsed share document."""
    if not isinstance(data, Mapping):
        raise ShareFileError(name, "document must be a JSON object")

    keys = data.get("keys")
    if not isinstance(keys, Mapping) or "n" not in keys or "k" not in keys:
        raise ShareFileError(name, 'missing "keys" object with "n" and "k"')
    n = _positive_int(keys["n"], "keys.n", name)
    k = _positive_int(keys["k"], "keys.k", name)

    shares: list[Share] = []
    for key, entry in data.items():
        if key == "keys":
            continue
        if not (key.isascii() and key.isdigit()) or int(key) < 1:
            logger.debug("%s: ignoring non-share key %r", name, key)
            continue
        index = int(key)
        if index > n:
            logger.info("%s: ignoring share %d beyond n=%d", name, index, n)
            continue
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise ShareFileError(name, f'share {index} needs "base" and "value"')
        value = entry["value"]
        if not isinstance(value, str):
            raise ShareFileError(name, f"share {index} value must be a string")
        try:
            base = parse_base(entry["base"])
        except InvalidBase as exc:
            raise ShareFileError(name, f"share {index}: {exc}") from exc
        shares.append(Share(index=index, base=base, value=value))

    shares.sort(key=lambda s: s.index)
    return ShareSet(n=n, k=k, shares=shares, name=name)


def load_share_set(path: str | Path) -> ShareSet:
    """Load a share document; the case is named after the file stem."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ShareFileError(str(path), f"invalid JSON: {exc}") from exc

    share_set = parse_share_set(data, name=path.stem)
    logger.debug(
        "%s: loaded %d shares (n=%d, k=%d)",
        path,
        len(share_set.shares),
        share_set.n,
        share_set.k,
    )
    return share_set


def results_document(results: Iterable[RecoveryResult]) -> dict[str, dict[str, Any]]:
    """Result mapping keyed by case name; secrets as decimal strings."""
    return {
        r.name: {"secret": format_decimal(r.secret), "n": r.n, "k": r.k}
        for r in results
    }


def dump_results(results: Iterable[RecoveryResult], path: str | Path) -> Path:
    """Write the results document as indented JSON and return its path."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(results_document(results), f, indent=2)
        f.write("\n")
    logger.info("results written to %s", path)
    return path
