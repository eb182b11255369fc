################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""3x3 matrices and rotation matrix factories."""

from __future__ import annotations

from typing import ClassVar
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.matrices.matrix_base import MatrixBase
from oasis_math.rotations.quaternion import Quaternion
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector_base import VectorBase


class Matrix3(MatrixBase):
    """Row-major 3x3 matrix acting on Vector3.

    The rotation factories produce the matrix form of the equivalent
    Quaternion factories.
    """

    __slots__ = ()

    SIZE: ClassVar[int] = 3
    VECTOR_TYPE: ClassVar[type[VectorBase]] = Vector3

    IDENTITY: ClassVar[Matrix3]
    ZERO: ClassVar[Matrix3]

    def determinant(self) -> float:
        a, b, c, d, e, f, g, h, i = self._entries()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def inverse(self) -> Matrix3:
        a, b, c, d, e, f, g, h, i = self._entries()

        # Cofactors of the first row
        c00: float = e * i - f * h
        c01: float = f * g - d * i
        c02: float = d * h - e * g

        det: float = a * c00 + b * c01 + c * c02

        # Adjugate is the transposed cofactor matrix
        adjugate: list[float] = [
            c00,
            c * h - b * i,
            b * f - c * e,
            c01,
            a * i - c * g,
            c * d - a * f,
            c02,
            b * g - a * h,
            a * e - b * d,
        ]
        return Matrix3._from_adjugate(adjugate, det)

    @staticmethod
    def from_quaternion(q: Quaternion) -> Matrix3:
        """Return the rotation matrix of a unit quaternion."""
        w: float = q.w
        x: float = q.x
        y: float = q.y
        z: float = q.z
        return Matrix3(
            1.0 - 2.0 * (y * y + z * z),
            2.0 * (x * y - z * w),
            2.0 * (x * z + y * w),
            2.0 * (x * y + z * w),
            1.0 - 2.0 * (x * x + z * z),
            2.0 * (y * z - x * w),
            2.0 * (x * z - y * w),
            2.0 * (y * z + x * w),
            1.0 - 2.0 * (x * x + y * y),
        )

    @staticmethod
    def scaling(factors: Vector3 | float) -> Matrix3:
        """Return a diagonal scaling matrix, per axis or uniform."""
        if isinstance(factors, Vector3):
            return Matrix3._diagonal([factors.x, factors.y, factors.z])
        return Matrix3._diagonal([factors, factors, factors])

    @staticmethod
    def angle_axis(angle: float, axis: Vector3) -> Matrix3:
        """Return the rotation of angle radians about a unit-length axis."""
        return Matrix3.from_quaternion(Quaternion.angle_axis(angle, axis))

    @staticmethod
    def euler(euler_angles: Vector3) -> Matrix3:
        """Return the rotation about z, then y, then x by the given radians."""
        return Matrix3.from_quaternion(Quaternion.euler(euler_angles))

    @staticmethod
    def from_to_rotation(
        from_direction: Vector3,
        to_direction: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix3:
        """Return the shortest-arc rotation taking from_direction to to_direction."""
        return Matrix3.from_quaternion(
            Quaternion.from_to_rotation(from_direction, to_direction, eps=eps)
        )

    @staticmethod
    def look_rotation(
        forward: Vector3,
        upwards: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix3:
        """Return the rotation turning FORWARD to forward with UP near upwards.

        The columns are the rotated RIGHT, UP and FORWARD axes.
        """
        basis: Optional[NDArray[np.float64]] = Quaternion.look_basis(
            forward, upwards, eps=eps
        )
        if basis is None:
            return Matrix3.from_to_rotation(Vector3.FORWARD, forward, eps=eps)
        return Matrix3.from_array(basis)


Matrix3.IDENTITY = MatrixBase._freeze(Matrix3())
Matrix3.ZERO = MatrixBase._freeze(Matrix3(*([0.0] * 9)))
