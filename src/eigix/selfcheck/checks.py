"""Built-in smoke checks for the containers."""

from __future__ import annotations

from eigix.core import FixedMatrix, FixedTensor3
from eigix.selfcheck.registry import CheckRegistry


def check_tensor_scaling() -> bool:
    point = FixedTensor3.from_values(1, 1, 1, [5], dtype="int64")
    scaled = point * 5
    return scaled.shape == (1, 1, 1) and bool(scaled.get(0, 0, 0) == 25)


def check_identity_product() -> bool:
    vec = FixedMatrix.from_values(4, 1, [1, 2, 3, 4], dtype="int64")
    mat = FixedMatrix.from_values(
        4,
        4,
        [1, 0, 0, 0,
         0, 1, 0, 0,
         0, 0, 1, 0,
         0, 0, 0, 1],
        dtype="int64",
    )
    return mat * vec == vec


def default_registry() -> CheckRegistry:
    registry = CheckRegistry()
    registry.register("3D", check_tensor_scaling)
    registry.register("2D", check_identity_product)
    return registry
