"""Fixed-shape dense 2-D matrix."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from eigix.core.base import FixedArray
from eigix.core.errors import ShapeMismatchError
from eigix.core.formatting import DEFAULT_OPTIONS, RenderOptions, format_row, join_lines, shape_label
from eigix.logging import get_logger

logger = get_logger(__name__)


class FixedMatrix(FixedArray):
    """A ``rows x cols`` matrix of a single numeric element type.

    Construction zero-fills every element. Elements are addressed by
    ``(row, col)`` and every access is bounds-checked.

    Examples
    --------
    >>> m = FixedMatrix.from_values(2, 2, [1, 2, 3, 4], dtype="int64")
    >>> m[1, 0]
    np.int64(3)
    >>> (m * FixedMatrix.identity(2, dtype="int64")) == m
    True
    """

    _kind = "Matrix"
    _axes = ("rows", "cols")

    def __init__(self, rows: int, cols: int, dtype: Any = None) -> None:
        super().__init__((rows, cols), dtype)

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Iterable[Any], dtype: Any = None) -> "FixedMatrix":
        matrix = cls(rows, cols, dtype=dtype)
        matrix.populate(values)
        return matrix

    @classmethod
    def identity(cls, size: int, dtype: Any = None) -> "FixedMatrix":
        matrix = cls(size, size, dtype=dtype)
        for i in range(size):
            matrix.set(i, i, 1)
        return matrix

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def get(self, row: int, col: int):
        return self._get((row, col))

    def set(self, row: int, col: int, value: Any) -> None:
        self._set((row, col), value)

    def multiply(self, other: "FixedMatrix") -> "FixedMatrix":
        """Return the matrix product ``self x other``.

        ``self.cols`` must equal ``other.rows``; the check happens before any
        element is read. The product is accumulated in the element type with
        the plain triple loop.
        """

        if not isinstance(other, FixedMatrix):
            raise TypeError(f"Matrix multiplication requires a FixedMatrix, got {type(other).__name__}")
        self._require_same_dtype(other, "Matrix multiplication")
        if self.cols != other.rows:
            logger.debug("Rejected multiplication of %s by %s", self.shape, other.shape)
            raise ShapeMismatchError("Matrix multiplication", self.shape, other.shape)

        result = FixedMatrix(self.rows, other.cols, dtype=self.dtype)
        zero = self.dtype.type(0)
        for i in range(self.rows):
            for j in range(other.cols):
                total = zero
                for k in range(self.cols):
                    total = total + self.get(i, k) * other.get(k, j)
                result.set(i, j, total)
        return result

    def __mul__(self, other):
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return self.multiply(other)

    def __matmul__(self, other):
        if not isinstance(other, FixedMatrix):
            return NotImplemented
        return self.multiply(other)

    def transpose(self) -> "FixedMatrix":
        return self._wrap(self._data.T.copy())

    @property
    def T(self) -> "FixedMatrix":
        return self.transpose()

    def format(self, options: Optional[RenderOptions] = None) -> str:
        options = options or DEFAULT_OPTIONS
        lines = [f"Matrix ({shape_label(self.shape)}):"]
        for r in range(self.rows):
            lines.append(format_row((self.get(r, c) for c in range(self.cols)), options))
        return join_lines(lines)
