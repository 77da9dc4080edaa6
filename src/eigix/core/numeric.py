"""Element-type, index and divisor checks shared by the containers."""

from __future__ import annotations

import numbers
import operator
from typing import Any, Iterable, Sequence

import numpy as np

from eigix.core.errors import (
    ArgumentCountMismatchError,
    DivideByZeroError,
    ElementOverflowError,
    InvalidShapeError,
    OutOfRangeError,
    UnsupportedElementTypeError,
)
from eigix.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DTYPE = np.dtype(np.float64)


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """Return the numpy dtype for ``dtype``.

    Only integer (signed or unsigned) and floating types are accepted. ``None``
    selects ``float64``.
    """

    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise UnsupportedElementTypeError(f"Unsupported element type: {dtype!r}") from exc
    if resolved.kind not in "iuf":
        raise UnsupportedElementTypeError(
            f"Unsupported element type: {resolved.name} (expected an integer or floating type)"
        )
    return resolved


def resolve_shape(dims: Sequence[Any]) -> tuple[int, ...]:
    shape = []
    for n in dims:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidShapeError(f"Dimensions must be integers, got {n!r}")
        if n < 1:
            raise InvalidShapeError(f"Dimensions must be positive, got {int(n)}")
        shape.append(int(n))
    return tuple(shape)


def is_real_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) or isinstance(value, np.bool_)


def coerce_scalar(value: Any, dtype: np.dtype) -> np.generic:
    """Convert ``value`` to a scalar of ``dtype`` the way a C static cast does.

    Integers outside an integer type's range wrap modulo ``2**bits``
    (``300`` becomes ``44`` for int8, ``-1`` becomes ``255`` for uint8);
    floats truncate toward zero for integer types.

    Raises
    ------
    ElementOverflowError
        If the value has no representation at all, such as an integer too
        large for a floating type.
    """

    if not is_real_scalar(value):
        raise TypeError(f"Expected a real scalar, got {type(value).__name__}")
    try:
        if dtype.kind in "iu" and isinstance(value, numbers.Integral):
            wrapped = int(value) % (1 << (8 * dtype.itemsize))
            return np.array(wrapped, dtype=f"u{dtype.itemsize}").view(dtype)[()]
        return np.array(value).astype(dtype, casting="unsafe")[()]
    except OverflowError as exc:
        logger.debug("Rejected %r for element type %s", value, dtype.name)
        raise ElementOverflowError(f"{value!r} cannot be represented as {dtype.name}") from exc


def check_index(kind: str, index: Sequence[Any], shape: tuple[int, ...]) -> tuple[int, ...]:
    """Validate ``index`` against ``shape`` and return it as plain integers.

    Negative indices are rejected, not wrapped.
    """

    if len(index) != len(shape):
        raise TypeError(f"{kind} index needs {len(shape)} coordinates, got {len(index)}")
    coords = tuple(operator.index(i) for i in index)
    for i, n in zip(coords, shape):
        if i < 0 or i >= n:
            logger.debug("Rejected %s index %s for shape %s", kind, coords, shape)
            raise OutOfRangeError(kind, coords, shape)
    return coords


def ensure_nonzero_divisor(kind: str, divisor: np.generic, dtype: np.dtype) -> None:
    """Reject divisors that are zero, or below machine epsilon for floating types."""

    if dtype.kind == "f":
        if abs(divisor) < np.finfo(dtype).eps:
            logger.debug("Rejected %s division by %r", kind, divisor)
            raise DivideByZeroError(f"{kind} division by zero or near-zero scalar")
    elif divisor == 0:
        logger.debug("Rejected %s division by %r", kind, divisor)
        raise DivideByZeroError(f"{kind} division by zero scalar")


def divide_elements(values: np.ndarray, divisor: np.generic) -> np.ndarray:
    """Divide every element by ``divisor`` keeping the element type.

    Integer quotients truncate toward zero.
    """

    if values.dtype.kind == "f":
        return values / divisor
    quotient = values // divisor
    remainder = values - quotient * divisor
    adjust = (remainder != 0) & ((values < 0) != (divisor < 0))
    return (quotient + adjust).astype(values.dtype, copy=False)


def fill_values(values: Iterable[Any], count: int, dtype: np.dtype) -> np.ndarray:
    """Return a flat array of exactly ``count`` elements converted to ``dtype``.

    The whole sequence is validated before anything is returned so callers can
    assign the result without risking a partial fill.
    """

    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise TypeError("populate expects a sequence of scalars")
    items = list(values)
    if len(items) != count:
        logger.debug("Rejected populate with %d values, expected %d", len(items), count)
        raise ArgumentCountMismatchError(count, len(items))
    return np.array([coerce_scalar(v, dtype) for v in items], dtype=dtype)
