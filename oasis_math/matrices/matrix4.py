################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
4x4 homogeneous transformation matrices

Conventions:
    * Transforms act on column vectors, points carry w = 1 and directions
      carry w = 0
    * Translation lives in rows 0..2 of column 3
    * Rotation factories embed the equivalent Matrix3 in the upper-left block
"""

from __future__ import annotations

from typing import ClassVar

import numpy as np

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.math_utils.storage import FLOAT_DTYPE
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix_base import MatrixBase
from oasis_math.rotations.quaternion import Quaternion
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector4 import Vector4
from oasis_math.vectors.vector_base import VectorBase


class Matrix4(MatrixBase):
    """Row-major 4x4 matrix acting on Vector4."""

    __slots__ = ()

    SIZE: ClassVar[int] = 4
    VECTOR_TYPE: ClassVar[type[VectorBase]] = Vector4

    IDENTITY: ClassVar[Matrix4]
    ZERO: ClassVar[Matrix4]

    @staticmethod
    def from_matrix3(A: Matrix3) -> Matrix4:
        """Embed A in the upper-left block of the identity."""
        data: np.ndarray = np.eye(4, dtype=FLOAT_DTYPE)
        data[:3, :3] = A.to_array()
        return Matrix4._from_storage(data.reshape(-1))

    @staticmethod
    def from_quaternion(q: Quaternion) -> Matrix4:
        """Return the rotation matrix of a unit quaternion."""
        return Matrix4.from_matrix3(Matrix3.from_quaternion(q))

    def determinant(self) -> float:
        s0, s1, s2, s3, s4, s5, c0, c1, c2, c3, c4, c5 = self._minors()
        return s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0

    def inverse(self) -> Matrix4:
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = self._entries()  # fmt: skip
        s0, s1, s2, s3, s4, s5, c0, c1, c2, c3, c4, c5 = self._minors()
        det: float = s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0

        adjugate: list[float] = [
            a11 * c5 - a12 * c4 + a13 * c3,
            -a01 * c5 + a02 * c4 - a03 * c3,
            a31 * s5 - a32 * s4 + a33 * s3,
            -a21 * s5 + a22 * s4 - a23 * s3,
            -a10 * c5 + a12 * c2 - a13 * c1,
            a00 * c5 - a02 * c2 + a03 * c1,
            -a30 * s5 + a32 * s2 - a33 * s1,
            a20 * s5 - a22 * s2 + a23 * s1,
            a10 * c4 - a11 * c2 + a13 * c0,
            -a00 * c4 + a01 * c2 - a03 * c0,
            a30 * s4 - a31 * s2 + a33 * s0,
            -a20 * s4 + a21 * s2 - a23 * s0,
            -a10 * c3 + a11 * c1 - a12 * c0,
            a00 * c3 - a01 * c1 + a02 * c0,
            -a30 * s3 + a31 * s1 - a32 * s0,
            a20 * s3 - a21 * s1 + a22 * s0,
        ]
        return Matrix4._from_adjugate(adjugate, det)

    def _minors(self) -> tuple[float, ...]:
        """Return the 2x2 minors used by the Laplace expansion.

        s0..s5 are the minors of the top two rows and c0..c5 those of the
        bottom two rows, so that det = sum of +/- s_k * c_(5-k).
        """
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = self._entries()  # fmt: skip
        return (
            a00 * a11 - a10 * a01,
            a00 * a12 - a10 * a02,
            a00 * a13 - a10 * a03,
            a01 * a12 - a11 * a02,
            a01 * a13 - a11 * a03,
            a02 * a13 - a12 * a03,
            a20 * a31 - a30 * a21,
            a20 * a32 - a30 * a22,
            a20 * a33 - a30 * a23,
            a21 * a32 - a31 * a22,
            a21 * a33 - a31 * a23,
            a22 * a33 - a32 * a23,
        )

    @staticmethod
    def scaling(factors: Vector3 | float) -> Matrix4:
        """Return a diagonal scaling matrix without translation."""
        if isinstance(factors, Vector3):
            return Matrix4._diagonal([factors.x, factors.y, factors.z, 1.0])
        return Matrix4._diagonal([factors, factors, factors, 1.0])

    @staticmethod
    def translation(translation: Vector3) -> Matrix4:
        """Return the translation of homogeneous points by a vector."""
        return Matrix4(
            1.0, 0.0, 0.0, translation.x,
            0.0, 1.0, 0.0, translation.y,
            0.0, 0.0, 1.0, translation.z,
            0.0, 0.0, 0.0, 1.0,
        )  # fmt: skip

    @staticmethod
    def angle_axis(angle: float, axis: Vector3) -> Matrix4:
        """Return the rotation of angle radians about a unit-length axis."""
        return Matrix4.from_matrix3(Matrix3.angle_axis(angle, axis))

    @staticmethod
    def euler(euler_angles: Vector3) -> Matrix4:
        """Return the rotation about z, then y, then x by the given radians."""
        return Matrix4.from_matrix3(Matrix3.euler(euler_angles))

    @staticmethod
    def from_to_rotation(
        from_direction: Vector3,
        to_direction: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix4:
        """Return the shortest-arc rotation taking from_direction to to_direction."""
        return Matrix4.from_matrix3(
            Matrix3.from_to_rotation(from_direction, to_direction, eps=eps)
        )

    @staticmethod
    def look_rotation(
        forward: Vector3,
        upwards: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix4:
        """Return the rotation turning FORWARD to forward with UP near upwards."""
        return Matrix4.from_matrix3(Matrix3.look_rotation(forward, upwards, eps=eps))

    @staticmethod
    def look_at(
        target: Vector3,
        eye: Vector3,
        upwards: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Matrix4:
        """Return the rotation looking from eye towards target.

        Identical to look_rotation(target - eye, upwards).
        """
        return Matrix4.look_rotation(target - eye, upwards, eps=eps)


Matrix4.IDENTITY = MatrixBase._freeze(Matrix4())
Matrix4.ZERO = MatrixBase._freeze(Matrix4(*([0.0] * 16)))
