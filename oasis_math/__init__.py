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
Small fixed-size linear algebra for 3D graphics and robotics

Vectors, quaternions and square matrices with single-precision storage,
value semantics and a right-handed RIGHT = +x, UP = +y, FORWARD = +z frame.
"""

from __future__ import annotations

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.config.math_params import MathParams
from oasis_math.matrices.matrix2 import Matrix2
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix4 import Matrix4
from oasis_math.rotations.quaternion import Quaternion
from oasis_math.vectors.vector2 import Vector2
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector4 import Vector4


__all__ = [
    "DEFAULT_MATH_PARAMS",
    "MathParams",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Quaternion",
    "Vector2",
    "Vector3",
    "Vector4",
]
