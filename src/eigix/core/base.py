"""Storage and element-wise behaviour shared by FixedMatrix and FixedTensor3."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, TextIO

import numpy as np

from eigix.core.errors import ElementTypeMismatchError, ShapeMismatchError
from eigix.core.formatting import DEFAULT_OPTIONS, RenderOptions
from eigix.core.numeric import (
    check_index,
    coerce_scalar,
    divide_elements,
    ensure_nonzero_divisor,
    fill_values,
    is_real_scalar,
    resolve_dtype,
    resolve_shape,
)
from eigix.logging import get_logger

logger = get_logger(__name__)


class FixedArray(ABC):
    """Dense container whose shape and element type never change.

    Subclasses fix the number of axes and supply ``_kind`` (the name used in
    messages and rendering headers), ``_axes`` (the constructor argument
    names) and :meth:`format`.
    """

    _kind = "FixedArray"
    _axes: tuple[str, ...] = ()

    # Let Python fall back to our reflected operators instead of numpy
    # broadcasting numpy scalars over the container.
    __array_ufunc__ = None
    __hash__ = None
    __iter__ = None

    def __init__(self, dims: Iterable[Any], dtype: Any = None) -> None:
        self._data = np.zeros(resolve_shape(tuple(dims)), dtype=resolve_dtype(dtype))

    @classmethod
    def _wrap(cls, data: np.ndarray):
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # --- Shape ---
    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def size(self) -> int:
        return int(self._data.size)

    # --- Element access ---
    def _get(self, index: tuple[Any, ...]) -> np.generic:
        return self._data[check_index(self._kind, index, self.shape)]

    def _set(self, index: tuple[Any, ...], value: Any) -> None:
        coords = check_index(self._kind, index, self.shape)
        self._data[coords] = coerce_scalar(value, self.dtype)

    def __getitem__(self, key):
        return self._get(key if isinstance(key, tuple) else (key,))

    def __setitem__(self, key, value) -> None:
        self._set(key if isinstance(key, tuple) else (key,), value)

    # --- Population ---
    def populate(self, values: Iterable[Any]) -> None:
        """Overwrite every element from a flat sequence in row-major order.

        Raises
        ------
        ArgumentCountMismatchError
            If ``values`` does not hold exactly ``size`` elements. Nothing is
            written in that case.
        """

        flat = fill_values(values, self.size, self.dtype)
        self._data[...] = flat.reshape(self.shape)

    # --- Value semantics ---
    def copy(self):
        return self._wrap(self._data.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.dtype == other.dtype
            and bool(np.array_equal(self._data, other._data))
        )

    def allclose(self, other: "FixedArray", rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        self._require_compatible(other, f"{self._kind} comparison")
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def tolist(self) -> list:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    # --- Element-wise arithmetic ---
    def _require_compatible(self, other: Any, operation: str) -> None:
        if not isinstance(other, type(self)):
            raise TypeError(
                f"{operation} requires a {type(self).__name__}, got {type(other).__name__}"
            )
        self._require_same_dtype(other, operation)
        if self.shape != other.shape:
            logger.debug("Rejected %s of %s and %s", operation, self.shape, other.shape)
            raise ShapeMismatchError(operation, self.shape, other.shape)

    def _require_same_dtype(self, other: "FixedArray", operation: str) -> None:
        if self.dtype != other.dtype:
            raise ElementTypeMismatchError(
                f"{operation} element type mismatch: {self.dtype.name} and {other.dtype.name}"
            )

    def add(self, other):
        self._require_compatible(other, f"{self._kind} addition")
        return self._wrap(self._data + other._data)

    def subtract(self, other):
        self._require_compatible(other, f"{self._kind} subtraction")
        return self._wrap(self._data - other._data)

    def divide_by_scalar(self, scalar: Any):
        """Divide every element by ``scalar``.

        The divisor is converted to the element type and checked once before
        any element is divided.

        Raises
        ------
        DivideByZeroError
            If the divisor is zero, or smaller in magnitude than machine
            epsilon for floating element types.
        """

        divisor = coerce_scalar(scalar, self.dtype)
        ensure_nonzero_divisor(self._kind, divisor, self.dtype)
        return self._wrap(divide_elements(self._data, divisor))

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __truediv__(self, scalar):
        if not is_real_scalar(scalar):
            return NotImplemented
        return self.divide_by_scalar(scalar)

    # --- Rendering ---
    @abstractmethod
    def format(self, options: Optional[RenderOptions] = None) -> str:
        """Return the text rendering, one newline-terminated line per row."""

    def write(self, stream: Optional[TextIO] = None, options: Optional[RenderOptions] = None) -> None:
        """Write the rendering of this container to ``stream`` (stdout by default)."""

        text = self.format(options or DEFAULT_OPTIONS)
        (stream if stream is not None else sys.stdout).write(text)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        dims = ", ".join(f"{name}={n}" for name, n in zip(self._axes, self.shape))
        return f"{type(self).__name__}({dims}, dtype={self.dtype.name})"
