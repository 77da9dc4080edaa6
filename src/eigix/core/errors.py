"""Exceptions raised by the fixed-shape containers.

Each error also derives from the closest builtin exception so callers can
catch ``IndexError``, ``ValueError`` and friends without importing eigix.
"""

from __future__ import annotations

from typing import Sequence


class EigixError(Exception):
    """Base class for every error raised by eigix."""


class OutOfRangeError(EigixError, IndexError):
    def __init__(self, kind: str, index: Sequence[int], shape: Sequence[int]) -> None:
        self.index = tuple(index)
        self.shape = tuple(shape)
        super().__init__(
            f"{kind} access out of bounds: index {self.index} for shape {_dims(self.shape)}"
        )


class ShapeMismatchError(EigixError, ValueError):
    def __init__(self, operation: str, left: Sequence[int], right: Sequence[int]) -> None:
        self.operation = operation
        self.left = tuple(left)
        self.right = tuple(right)
        super().__init__(
            f"{operation} dimension mismatch: {_dims(self.left)} and {_dims(self.right)}"
        )


class DivideByZeroError(EigixError, ZeroDivisionError):
    pass


class ArgumentCountMismatchError(EigixError, ValueError):
    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Incorrect number of arguments for populate: expected {expected}, got {received}"
        )


class InvalidShapeError(EigixError, ValueError):
    pass


class UnsupportedElementTypeError(EigixError, TypeError):
    pass


class ElementTypeMismatchError(EigixError, TypeError):
    pass


class ElementOverflowError(EigixError, OverflowError):
    """A value cannot be represented at all in the element type.

    Raised only where wraparound is impossible, e.g. an integer too large to
    become a float.
    """


def _dims(shape: Sequence[int]) -> str:
    return "x".join(str(n) for n in shape)


__all__ = [
    "ArgumentCountMismatchError",
    "DivideByZeroError",
    "EigixError",
    "ElementOverflowError",
    "ElementTypeMismatchError",
    "InvalidShapeError",
    "OutOfRangeError",
    "ShapeMismatchError",
    "UnsupportedElementTypeError",
]
