################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for 3x3 matrices."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.rotations.quaternion import Quaternion
from oasis_math.vectors.vector3 import Vector3


def test_constants() -> None:
    """Checks identity and zero constants."""
    assert Matrix3() == Matrix3.IDENTITY
    assert np.array_equal(Matrix3.IDENTITY.to_array(), np.eye(3))
    assert np.array_equal(Matrix3.ZERO.to_array(), np.zeros((3, 3)))


def test_determinant_and_inverse() -> None:
    """Checks the cofactor determinant and adjugate inverse."""
    m: Matrix3 = Matrix3(2.0, 0.0, 1.0, 1.0, 3.0, 2.0, 1.0, 1.0, 2.0)
    assert m.determinant() == 6.0
    assert (m * m.inverse()).almost_equal(Matrix3.IDENTITY)
    assert (m.inverse() * m).almost_equal(Matrix3.IDENTITY)

    expected: NDArray[np.float64] = np.linalg.inv(m.to_array())
    assert np.allclose(m.inverse().to_array(), expected, atol=1e-6)


def test_singular_inverse_is_not_finite() -> None:
    """Checks a rank-deficient matrix inverts to non-finite entries."""
    m: Matrix3 = Matrix3(1.0, 2.0, 3.0, 2.0, 4.0, 6.0, 0.0, 1.0, 1.0)
    assert m.determinant() == 0.0
    assert not np.isfinite(m.inverse().to_array()).all()


def test_from_quaternion_matches_rotation() -> None:
    """Checks matrix rotation agrees with quaternion rotation."""
    q: Quaternion = Quaternion.euler(Vector3(0.4, -1.1, 2.3))
    m: Matrix3 = Matrix3.from_quaternion(q)
    v: Vector3 = Vector3(1.0, -2.0, 0.5)
    assert (m * v).almost_equal(q * v)  # type: ignore[arg-type]
    assert math.isclose(m.determinant(), 1.0, abs_tol=1e-5)
    assert m.inverse().almost_equal(m.transposed())


def test_angle_axis() -> None:
    """Checks a quarter turn about FORWARD."""
    m: Matrix3 = Matrix3.angle_axis(math.pi / 2.0, Vector3.FORWARD)
    assert (m * Vector3.UP).almost_equal(Vector3.LEFT)
    assert (m * Vector3.RIGHT).almost_equal(Vector3.UP)


def test_euler_matches_quaternion() -> None:
    """Checks euler matrices match euler quaternions."""
    angles: Vector3 = Vector3(0.2, 0.5, -0.9)
    expected: Matrix3 = Matrix3.from_quaternion(Quaternion.euler(angles))
    assert Matrix3.euler(angles).almost_equal(expected)


def test_from_to_rotation() -> None:
    """Checks shortest-arc rotation matrices."""
    m: Matrix3 = Matrix3.from_to_rotation(Vector3.RIGHT, Vector3(0.0, 1.0, 1.0))
    assert (m * Vector3.RIGHT).almost_equal(Vector3(0.0, 1.0, 1.0).normalized())
    assert Matrix3.from_to_rotation(Vector3.UP, Vector3.UP) == Matrix3.IDENTITY

    half_turn: Matrix3 = Matrix3.from_to_rotation(Vector3.RIGHT, Vector3.LEFT)
    assert (half_turn * Vector3.RIGHT).almost_equal(Vector3.LEFT)


def test_look_rotation_basis() -> None:
    """Checks the columns are the rotated RIGHT, UP and FORWARD axes."""
    m: Matrix3 = Matrix3.look_rotation(Vector3.RIGHT, Vector3.UP)
    assert m.column(0).almost_equal(Vector3.BACK)
    assert m.column(1).almost_equal(Vector3.UP)
    assert m.column(2).almost_equal(Vector3.RIGHT)

    q: Quaternion = Quaternion.look_rotation(Vector3.RIGHT, Vector3.UP)
    assert m.almost_equal(Matrix3.from_quaternion(q))


def test_look_rotation_straight_down() -> None:
    """Checks looking parallel to upwards falls back to the shortest arc."""
    m: Matrix3 = Matrix3.look_rotation(Vector3.DOWN, Vector3.UP)
    assert (m * Vector3.FORWARD).almost_equal(Vector3.DOWN)
    assert (m * Vector3.UP).almost_equal(Vector3.FORWARD)


def test_scaling() -> None:
    """Checks per-axis and uniform scaling."""
    m: Matrix3 = Matrix3.scaling(Vector3(2.0, 3.0, 4.0))
    assert m * Vector3.ONE == Vector3(2.0, 3.0, 4.0)
    assert m.determinant() == 24.0
    assert Matrix3.scaling(0.5) * Vector3(2.0, 4.0, 6.0) == Vector3(1.0, 2.0, 3.0)


def test_row_vector_product() -> None:
    """Checks v * M equals transpose(M) * v."""
    m: Matrix3 = Matrix3(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0)
    v: Vector3 = Vector3(1.0, 0.0, -1.0)
    assert v * m == m.transposed() * v
    assert v * m == Vector3(-6.0, -6.0, -6.0)
    assert m.row(2) == Vector3(7.0, 8.0, 9.0)
    assert m.entry(0, 2) == 3.0
