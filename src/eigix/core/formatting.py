"""Text rendering for matrices and tensors."""

from __future__ import annotations

from typing import Iterable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Per-element layout used when rendering a container.

    Elements are written fixed-point with ``precision`` decimals and
    right-aligned in a field at least ``width`` characters wide.
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(2, ge=0)
    width: int = Field(8, ge=0)
    separator: str = ", "


DEFAULT_OPTIONS = RenderOptions()


def format_element(value: np.generic, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    return f"{value.item():>{options.width}.{options.precision}f}"


def format_row(
    values: Iterable[np.generic],
    options: RenderOptions = DEFAULT_OPTIONS,
    indent: str = "",
) -> str:
    """Render one row as ``[ e0, e1, ... ]``."""

    body = options.separator.join(format_element(v, options) for v in values)
    return f"{indent}[{body} ]"


def shape_label(shape: tuple[int, ...]) -> str:
    return "x".join(str(n) for n in shape)


def join_lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
