################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Two-component vector."""

from __future__ import annotations

from typing import ClassVar

from oasis_math.math_utils.storage import to_storage
from oasis_math.vectors.vector_base import VectorBase
from oasis_math.vectors.vector_base import component


class Vector2(VectorBase):
    """Vector with x and y components."""

    __slots__ = ()

    DIMENSION: ClassVar[int] = 2
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")

    UP: ClassVar[Vector2]
    DOWN: ClassVar[Vector2]
    RIGHT: ClassVar[Vector2]
    LEFT: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    ZERO: ClassVar[Vector2]

    x = component(0, "The x component.")
    y = component(1, "The y component.")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._data = to_storage((x, y), 2, "Vector2")

    @staticmethod
    def angle(from_vector: Vector2, to_vector: Vector2) -> float:
        """Return the unsigned angle in radians, in [0, pi]."""
        return VectorBase._angle_between(from_vector, to_vector)


Vector2.UP = VectorBase._freeze(Vector2(0.0, 1.0))
Vector2.DOWN = VectorBase._freeze(Vector2(0.0, -1.0))
Vector2.RIGHT = VectorBase._freeze(Vector2(1.0, 0.0))
Vector2.LEFT = VectorBase._freeze(Vector2(-1.0, 0.0))
Vector2.ONE = VectorBase._freeze(Vector2(1.0, 1.0))
Vector2.ZERO = VectorBase._freeze(Vector2(0.0, 0.0))
