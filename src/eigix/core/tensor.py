"""Fixed-shape dense 3-D tensor made of ``depth`` stacked ``rows x cols`` slices."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from eigix.core.base import FixedArray
from eigix.core.formatting import DEFAULT_OPTIONS, RenderOptions, format_row, join_lines, shape_label
from eigix.core.numeric import coerce_scalar, is_real_scalar


class FixedTensor3(FixedArray):
    """A ``depth x rows x cols`` tensor of a single numeric element type.

    Supports element-wise addition and subtraction with tensors of the same
    shape, and multiplication or division by a scalar. There is no
    tensor-by-tensor product.
    """

    _kind = "Tensor3D"
    _axes = ("depth", "rows", "cols")

    def __init__(self, depth: int, rows: int, cols: int, dtype: Any = None) -> None:
        super().__init__((depth, rows, cols), dtype)

    @classmethod
    def from_values(
        cls,
        depth: int,
        rows: int,
        cols: int,
        values: Iterable[Any],
        dtype: Any = None,
    ) -> "FixedTensor3":
        """Build a tensor filled depth-first, then by row, column varying fastest."""

        tensor = cls(depth, rows, cols, dtype=dtype)
        tensor.populate(values)
        return tensor

    @property
    def depth(self) -> int:
        return self.shape[0]

    @property
    def rows(self) -> int:
        return self.shape[1]

    @property
    def cols(self) -> int:
        return self.shape[2]

    def get(self, depth: int, row: int, col: int):
        return self._get((depth, row, col))

    def set(self, depth: int, row: int, col: int, value: Any) -> None:
        self._set((depth, row, col), value)

    def scale(self, scalar: Any) -> "FixedTensor3":
        factor = coerce_scalar(scalar, self.dtype)
        return self._wrap(self._data * factor)

    def __mul__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        return self.scale(other)

    def __rmul__(self, other):
        if not is_real_scalar(other):
            return NotImplemented
        return self.scale(other)

    def format(self, options: Optional[RenderOptions] = None) -> str:
        options = options or DEFAULT_OPTIONS
        lines = [f"Tensor3D ({shape_label(self.shape)}):"]
        for d in range(self.depth):
            if d > 0:
                lines.append("")
            lines.append(f"Depth Slice [{d}]:")
            for r in range(self.rows):
                row = (self.get(d, r, c) for c in range(self.cols))
                lines.append(format_row(row, options, indent="  "))
        return join_lines(lines)
