################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Four-component vector, typically a homogeneous coordinate."""

from __future__ import annotations

from typing import ClassVar

from oasis_math.math_utils.storage import to_storage
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector_base import VectorBase
from oasis_math.vectors.vector_base import component


class Vector4(VectorBase):
    """Vector with x, y, z and w components.

    Direction constants have w = 0. Points are usually built with
    Vector4.from_vector3(p, 1.0).
    """

    __slots__ = ()

    DIMENSION: ClassVar[int] = 4
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    FORWARD: ClassVar[Vector4]
    BACK: ClassVar[Vector4]
    UP: ClassVar[Vector4]
    DOWN: ClassVar[Vector4]
    RIGHT: ClassVar[Vector4]
    LEFT: ClassVar[Vector4]
    ONE: ClassVar[Vector4]
    ZERO: ClassVar[Vector4]

    x = component(0, "The x component.")
    y = component(1, "The y component.")
    z = component(2, "The z component.")
    w = component(3, "The w component.")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self._data = to_storage((x, y, z, w), 4, "Vector4")

    @classmethod
    def from_vector3(cls, v: Vector3, w: float = 0.0) -> Vector4:
        """Create a vector from a Vector3 and a w component."""
        return cls(v.x, v.y, v.z, w)


Vector4.FORWARD = VectorBase._freeze(Vector4(0.0, 0.0, 1.0, 0.0))
Vector4.BACK = VectorBase._freeze(Vector4(0.0, 0.0, -1.0, 0.0))
Vector4.UP = VectorBase._freeze(Vector4(0.0, 1.0, 0.0, 0.0))
Vector4.DOWN = VectorBase._freeze(Vector4(0.0, -1.0, 0.0, 0.0))
Vector4.RIGHT = VectorBase._freeze(Vector4(1.0, 0.0, 0.0, 0.0))
Vector4.LEFT = VectorBase._freeze(Vector4(-1.0, 0.0, 0.0, 0.0))
Vector4.ONE = VectorBase._freeze(Vector4(1.0, 1.0, 1.0, 1.0))
Vector4.ZERO = VectorBase._freeze(Vector4(0.0, 0.0, 0.0, 0.0))
