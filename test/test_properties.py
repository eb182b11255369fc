################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Randomized checks of algebraic identities across the math types."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix4 import Matrix4
from oasis_math.rotations.quaternion import Quaternion
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector4 import Vector4


SEED: int = 20260301
TRIALS: int = 50


def _random_vector(rng: np.random.Generator, scale: float = 1.0) -> Vector3:
    return Vector3.from_array(rng.uniform(-scale, scale, size=3))


def _random_rotation(rng: np.random.Generator) -> Quaternion:
    # Normalized gaussian samples are uniform on the unit 3-sphere
    return Quaternion.from_array(rng.normal(size=4)).normalized()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)


def test_cross_is_orthogonal(rng: np.random.Generator) -> None:
    """Checks a x b is orthogonal to a and b and anticommutative."""
    for _ in range(TRIALS):
        a: Vector3 = _random_vector(rng)
        b: Vector3 = _random_vector(rng)
        c: Vector3 = Vector3.cross(a, b)
        assert math.isclose(Vector3.dot(c, a), 0.0, abs_tol=1e-5)
        assert math.isclose(Vector3.dot(c, b), 0.0, abs_tol=1e-5)
        assert Vector3.cross(b, a) == -c


def test_rotation_preserves_norm_and_matches_matrix(rng: np.random.Generator) -> None:
    """Checks q * v keeps |v| and equals Matrix3.from_quaternion(q) * v."""
    for _ in range(TRIALS):
        q: Quaternion = _random_rotation(rng)
        v: Vector3 = _random_vector(rng, scale=10.0)
        rotated: Vector3 = q * v  # type: ignore[assignment]
        assert math.isclose(rotated.magnitude(), v.magnitude(), abs_tol=1e-4)
        assert rotated.almost_equal(Matrix3.from_quaternion(q) * v, atol=1e-4)


def test_composition_is_associative(rng: np.random.Generator) -> None:
    """Checks (a * b) * v equals a * (b * v)."""
    for _ in range(TRIALS):
        a: Quaternion = _random_rotation(rng)
        b: Quaternion = _random_rotation(rng)
        v: Vector3 = _random_vector(rng)
        composed: Vector3 = (a * b) * v  # type: ignore[operator,assignment]
        sequential: Vector3 = a * (b * v)  # type: ignore[operator,assignment]
        assert composed.almost_equal(sequential)


def test_inverse_undoes_rotation(rng: np.random.Generator) -> None:
    """Checks q^-1 * (q * v) recovers v."""
    for _ in range(TRIALS):
        q: Quaternion = _random_rotation(rng)
        v: Vector3 = _random_vector(rng)
        rotated: Vector3 = q * v  # type: ignore[assignment]
        restored: Vector3 = q.inverse() * rotated  # type: ignore[assignment]
        assert restored.almost_equal(v)


def test_from_to_rotation_maps_directions(rng: np.random.Generator) -> None:
    """Checks from_to_rotation(a, b) * a is parallel to b."""
    for _ in range(TRIALS):
        a: Vector3 = _random_vector(rng)
        b: Vector3 = _random_vector(rng)
        q: Quaternion = Quaternion.from_to_rotation(a, b)
        rotated: Vector3 = q * a.normalized()  # type: ignore[assignment]
        assert rotated.almost_equal(b.normalized(), atol=1e-4)


def test_rotate_towards_never_overshoots(rng: np.random.Generator) -> None:
    """Checks each step shrinks the remaining angle by the step size."""
    step: float = 0.2
    for _ in range(10):
        q: Quaternion = _random_rotation(rng)
        target: Quaternion = _random_rotation(rng)
        remaining: float = Quaternion.angle(q, target)
        while remaining > 0.0:
            q.rotate_towards(target, step)
            updated: float = Quaternion.angle(q, target)
            assert updated <= remaining + 1e-4
            assert math.isclose(updated, max(remaining - step, 0.0), abs_tol=2e-3)
            if q == target:
                break
            remaining = updated
        assert q == target


def test_matrix_inverse(rng: np.random.Generator) -> None:
    """Checks M * M^-1 is the identity for well-conditioned matrices."""
    for _ in range(TRIALS):
        entries: np.ndarray = rng.uniform(-1.0, 1.0, size=(4, 4)) + 4.0 * np.eye(4)
        m: Matrix4 = Matrix4.from_array(entries)
        assert (m * m.inverse()).almost_equal(Matrix4.IDENTITY, atol=1e-4)
        assert math.isclose(
            m.determinant(), float(np.linalg.det(m.to_array())), rel_tol=1e-5
        )

        m3: Matrix3 = Matrix3.from_array(entries[:3, :3])
        assert (m3.inverse() * m3).almost_equal(Matrix3.IDENTITY, atol=1e-4)


def test_transposed_product(rng: np.random.Generator) -> None:
    """Checks v * M equals M^T * v."""
    for _ in range(TRIALS):
        m: Matrix4 = Matrix4.from_array(rng.uniform(-2.0, 2.0, size=16))
        v: Vector4 = Vector4.from_array(rng.uniform(-2.0, 2.0, size=4))
        assert (v * m).almost_equal(m.transposed() * v)


def test_look_rotation_forward(rng: np.random.Generator) -> None:
    """Checks look_rotation turns FORWARD onto the requested direction."""
    for _ in range(TRIALS):
        forward: Vector3 = _random_vector(rng)
        q: Quaternion = Quaternion.look_rotation(forward, Vector3.UP)
        rotated: Vector3 = q * Vector3.FORWARD  # type: ignore[assignment]
        assert rotated.almost_equal(forward.normalized(), atol=1e-4)

        m: Matrix4 = Matrix4.look_rotation(forward, Vector3.UP)
        assert (m * Vector4.FORWARD).almost_equal(
            Vector4.from_vector3(forward.normalized()), atol=1e-4
        )


def test_normalization(rng: np.random.Generator) -> None:
    """Checks normalized vectors have unit length and normalizing is stable."""
    for _ in range(TRIALS):
        v: Vector3 = _random_vector(rng, scale=100.0)
        unit: Vector3 = v.normalized()
        assert math.isclose(unit.magnitude(), 1.0, abs_tol=1e-6)
        assert unit.normalized().almost_equal(unit, atol=1e-6)
        assert Vector3.cross(v, v) == Vector3.ZERO
        assert Vector3.dot(v, unit) == pytest.approx(Vector3.dot(unit, v))


def test_rotation_fixes_its_axis(rng: np.random.Generator) -> None:
    """Checks angle_axis leaves vectors along the axis unchanged."""
    for _ in range(TRIALS):
        axis: Vector3 = _random_vector(rng).normalized()
        angle: float = float(rng.uniform(-math.pi, math.pi))
        q: Quaternion = Quaternion.angle_axis(angle, axis)
        along: Vector3 = axis * 3.0
        rotated: Vector3 = q * along  # type: ignore[assignment]
        assert rotated.almost_equal(along, atol=1e-4)

        product: Quaternion = q.inverse() * q  # type: ignore[assignment]
        assert product.almost_equal(Quaternion.IDENTITY)


def test_double_transpose(rng: np.random.Generator) -> None:
    """Checks transposing twice restores the matrix exactly."""
    for _ in range(TRIALS):
        m: Matrix4 = Matrix4.from_array(rng.uniform(-5.0, 5.0, size=(4, 4)))
        assert m.transposed().transposed() == m
