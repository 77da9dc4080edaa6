"""Core package for the eigix project.

This top-level module re-exports the fixed-shape containers and their
errors from :mod:`eigix.core`.
"""

from .core import (
    ArgumentCountMismatchError,
    DivideByZeroError,
    EigixError,
    ElementOverflowError,
    ElementTypeMismatchError,
    FixedMatrix,
    FixedTensor3,
    InvalidShapeError,
    OutOfRangeError,
    RenderOptions,
    ShapeMismatchError,
    UnsupportedElementTypeError,
)

__version__ = "0.1.0"

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
