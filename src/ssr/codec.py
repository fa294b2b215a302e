"""Arbitrary-base digit strings <-> arbitrary-precision integers.

Bases 2..36; digits 0-9 then a-z (case-insensitive on input).
"""

from __future__ import annotations

import logging

from ssr.errors import InvalidBase, InvalidDigit
from ssr.models import MAX_BASE, MIN_BASE, Point, Share, check_base

logger = logging.getLogger(__name__)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}

# Largest power of ten handled per divmod step when rendering decimals.
_DECIMAL_CHUNK = 10**18
_DECIMAL_CHUNK_DIGITS = 18


def parse_base(raw: int | str) -> int:
    """Base as found in share documents: an int or a decimal string like "16"."""
    if isinstance(raw, str):
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidBase(raw, MIN_BASE, MAX_BASE)
        raw = int(text)
    check_base(raw)
    return raw


def decode(value: str, base: int) -> int:
    """Decode a non-negative digit string in ``base`` into an exact integer.

    Digits are folded most-significant first (result = result * base + d)
    entirely in Python ints, so there is no precision limit.

    Args:
        value: Digit string. Surrounding whitespace is ignored; signs,
            prefixes and separators are not accepted.
        base: Radix in [2, 36].

    Returns:
        The integer value.

    Raises:
        InvalidBase: base outside [2, 36].
        InvalidDigit: non-string or empty value, or a character that is not
            a digit of base.
    """
    check_base(base)
    if not isinstance(value, str):
        raise InvalidDigit(value, base, "", -1)
    digits = value.strip()
    if not digits:
        raise InvalidDigit(value, base, "", -1)

    offset = len(value) - len(value.lstrip())
    result = 0
    for pos, char in enumerate(digits):
        d = _DIGIT_VALUES.get(char.lower()) if char.isascii() else None
        if d is None or d >= base:
            raise InvalidDigit(value, base, char, pos + offset)
        result = result * base + d
    return result


def encode(n: int, base: int) -> str:
    """Render a non-negative integer in ``base`` (lowercase digits)."""
    check_base(base)
    if n < 0:
        raise ValueError(
            f"Only non-negative integers can be encoded, got {format_decimal(n)}"
        )
    if n == 0:
        return "0"

    out = []
    while n:
        n, d = divmod(n, base)
        out.append(DIGITS[d])
    return "".join(reversed(out))


def decode_share(share: Share) -> Point:
    """Decode one share into the point (index, value)."""
    try:
        y = decode(share.value, share.base)
    except InvalidDigit as exc:
        raise exc.with_index(share.index) from None
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "share %d: base %d -> %s", share.index, share.base, format_decimal(y)
        )
    return Point(x=share.index, y=y)


def format_decimal(n: int) -> str:
    """Decimal string of any integer, including negatives.

    ``str(int)`` refuses values past the interpreter's digit limit
    (``sys.set_int_max_str_digits``); this peels off fixed-size chunks
    with divmod instead, so secrets of any length render.
    """
    if -_DECIMAL_CHUNK < n < _DECIMAL_CHUNK:
        return str(n)

    sign = "-" if n < 0 else ""
    n = abs(n)
    chunks = []
    while n >= _DECIMAL_CHUNK:
        n, chunk = divmod(n, _DECIMAL_CHUNK)
        chunks.append(f"{chunk:0{_DECIMAL_CHUNK_DIGITS}d}")
    chunks.append(str(n))
    return sign + "".join(reversed(chunks))
