"""Fixed-shape numeric containers.

This package provides dense matrices and rank-3 tensors whose shape and
element type are fixed at construction, with shape-checked arithmetic and a
deterministic text rendering.
"""

from .errors import (
    ArgumentCountMismatchError,
    DivideByZeroError,
    EigixError,
    ElementOverflowError,
    ElementTypeMismatchError,
    InvalidShapeError,
    OutOfRangeError,
    ShapeMismatchError,
    UnsupportedElementTypeError,
)
from .formatting import RenderOptions
from .matrix import FixedMatrix
from .tensor import FixedTensor3

__all__ = [
    "ArgumentCountMismatchError",
    "DivideByZeroError",
    "EigixError",
    "ElementOverflowError",
    "ElementTypeMismatchError",
    "FixedMatrix",
    "FixedTensor3",
    "InvalidShapeError",
    "OutOfRangeError",
    "RenderOptions",
    "ShapeMismatchError",
    "UnsupportedElementTypeError",
]
