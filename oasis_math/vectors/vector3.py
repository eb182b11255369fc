################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Three-component vector.

Axis conventions are right-handed with RIGHT = +x, UP = +y and
FORWARD = +z.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

import numpy as np

from oasis_math.math_utils.storage import FLOAT_DTYPE
from oasis_math.math_utils.storage import ieee_math
from oasis_math.math_utils.storage import to_storage
from oasis_math.vectors.vector_base import VectorBase
from oasis_math.vectors.vector_base import component


if TYPE_CHECKING:
    from oasis_math.vectors.vector4 import Vector4


class Vector3(VectorBase):
    """Vector with x, y and z components."""

    __slots__ = ()

    DIMENSION: ClassVar[int] = 3
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    FORWARD: ClassVar[Vector3]
    BACK: ClassVar[Vector3]
    UP: ClassVar[Vector3]
    DOWN: ClassVar[Vector3]
    RIGHT: ClassVar[Vector3]
    LEFT: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    ZERO: ClassVar[Vector3]

    x = component(0, "The x component.")
    y = component(1, "The y component.")
    z = component(2, "The z component.")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._data = to_storage((x, y, z), 3, "Vector3")

    @classmethod
    def from_vector4(cls, v: Vector4) -> Vector3:
        """Create a vector from the x, y and z components of a Vector4."""
        return cls._from_storage(v._data[:3].copy())

    @staticmethod
    def cross(lhs: Vector3, rhs: Vector3) -> Vector3:
        """Return the right-handed cross product.

        The result is the zero vector when the inputs are parallel,
        antiparallel or either of them is zero.
        """
        a: np.ndarray = lhs._data
        b: np.ndarray = rhs._data
        with ieee_math():
            return Vector3._from_storage(
                np.array(
                    [
                        a[1] * b[2] - a[2] * b[1],
                        a[2] * b[0] - a[0] * b[2],
                        a[0] * b[1] - a[1] * b[0],
                    ],
                    dtype=FLOAT_DTYPE,
                )
            )

    @staticmethod
    def lerp(from_vector: Vector3, to_vector: Vector3, factor: float) -> Vector3:
        """Linearly interpolate; factor is not clamped, so it extrapolates."""
        return from_vector + factor * (to_vector - from_vector)

    @staticmethod
    def angle(from_vector: Vector3, to_vector: Vector3) -> float:
        """Return the unsigned angle in radians, in [0, pi]."""
        return VectorBase._angle_between(from_vector, to_vector)


Vector3.FORWARD = VectorBase._freeze(Vector3(0.0, 0.0, 1.0))
Vector3.BACK = VectorBase._freeze(Vector3(0.0, 0.0, -1.0))
Vector3.UP = VectorBase._freeze(Vector3(0.0, 1.0, 0.0))
Vector3.DOWN = VectorBase._freeze(Vector3(0.0, -1.0, 0.0))
Vector3.RIGHT = VectorBase._freeze(Vector3(1.0, 0.0, 0.0))
Vector3.LEFT = VectorBase._freeze(Vector3(-1.0, 0.0, 0.0))
Vector3.ONE = VectorBase._freeze(Vector3(1.0, 1.0, 1.0))
Vector3.ZERO = VectorBase._freeze(Vector3(0.0, 0.0, 0.0))
