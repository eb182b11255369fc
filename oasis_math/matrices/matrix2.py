################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""2x2 matrices and planar rotations."""

from __future__ import annotations

import math
from typing import ClassVar

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.matrices.matrix_base import MatrixBase
from oasis_math.vectors.vector2 import Vector2
from oasis_math.vectors.vector_base import VectorBase


class Matrix2(MatrixBase):
    """Row-major 2x2 matrix acting on Vector2."""

    __slots__ = ()

    SIZE: ClassVar[int] = 2
    VECTOR_TYPE: ClassVar[type[VectorBase]] = Vector2

    IDENTITY: ClassVar[Matrix2]
    ZERO: ClassVar[Matrix2]

    def determinant(self) -> float:
        a, b, c, d = self._entries()
        return a * d - b * c

    def inverse(self) -> Matrix2:
        a, b, c, d = self._entries()
        return Matrix2._from_adjugate([d, -b, -c, a], a * d - b * c)

    @staticmethod
    def scaling(factors: Vector2 | float) -> Matrix2:
        """Return a diagonal scaling matrix, per axis or uniform."""
        if isinstance(factors, Vector2):
            return Matrix2._diagonal([factors.x, factors.y])
        return Matrix2._diagonal([factors, factors])

    @staticmethod
    def angle_rotation(angle: float) -> Matrix2:
        """Return the counter-clockwise rotation by angle radians."""
        cos_angle: float = math.cos(angle)
        sin_angle: float = math.sin(angle)
        return Matrix2(cos_angle, -sin_angle, sin_angle, cos_angle)

    @staticmethod
    def from_to_rotation(
        from_direction: Vector2,
        to_direction: Vector2,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix2:
        """Return the rotation taking from_direction onto to_direction.

        Parallel directions give the identity and antiparallel directions a
        half turn.
        """
        f: Vector2 = from_direction.normalized()
        t: Vector2 = to_direction.normalized()
        cos_angle: float = Vector2.dot(f, t)
        if cos_angle >= 1.0 - eps:
            return Matrix2()

        sin_angle: float = f.x * t.y - f.y * t.x
        return Matrix2.angle_rotation(math.atan2(sin_angle, cos_angle))


Matrix2.IDENTITY = MatrixBase._freeze(Matrix2())
Matrix2.ZERO = MatrixBase._freeze(Matrix2(0.0, 0.0, 0.0, 0.0))
