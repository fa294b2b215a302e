"""Exceptions raised while decoding shares and interpolating the secret."""

from __future__ import annotations


class ReconstructionError(ValueError):
    """Base class for malformed share or interpolation input."""


class InvalidBase(ReconstructionError):
    """Radix outside the supported range, or not an integer at all."""

    def __init__(self, base: object, min_base: int = 2, max_base: int = 36) -> None:
        self.base = base
        super().__init__(f"base must be an integer in [{min_base}, {max_base}], got {base!r}")


class InvalidDigit(ReconstructionError):
    """A character in a share value is not a digit of its base.

    Attributes:
        value: The offending value (normally a string).
        base: Radix the value was decoded in.
        char: The bad character ('' for an empty or non-string value).
        position: Index of ``char`` in ``value`` (-1 when there is none).
        index: Share index the value belongs to, if known.
    """

    def __init__(
        self,
        value: object,
        base: int,
        char: str,
        position: int,
        index: int | None = None,
    ) -> None:
        self.value = value
        self.base = base
        self.char = char
        self.position = position
        self.index = index
        super().__init__(self._message())

    def _message(self) -> str:
        where = f"share {self.index}: " if self.index is not None else ""
        if not isinstance(self.value, str):
            return (
                f"{where}value must be a string of base-{self.base} digits, "
                f"got {type(self.value).__name__}"
            )
        if self.position < 0:
            return f"{where}empty value is not a base-{self.base} number"
        return (
            f"{where}invalid digit {self.char!r} at position {self.position} "
            f"of {self.value!r} for base {self.base}"
        )

    def with_index(self, index: int) -> InvalidDigit:
        """Copy of this error attributed to share ``index``."""
        return InvalidDigit(self.value, self.base, self.char, self.position, index)


class InsufficientPoints(ReconstructionError):
    """Fewer points were supplied than the threshold requires."""

    def __init__(self, needed: int, got: int) -> None:
        self.needed = needed
        self.got = got
        super().__init__(f"Need at least {needed} points to reconstruct, got {got}")


class DuplicateXCoordinate(ReconstructionError):
    """Two selected points share an x-coordinate (zero Lagrange denominator)."""

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate evaluation point x={x}")


class ShareFileError(ValueError):
    """A share-set document is missing fields or has the wrong shape."""

    def __init__(self, source: str, problem: str) -> None:
        self.source = source
        self.problem = problem
        super().__init__(f"{source}: {problem}")
