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
Quaternion rotations using the wxyz convention

Conventions:
    * Components are stored in wxyz order, w being the scalar part
    * lhs * rhs composes rotations so that rhs is applied first
    * Factories that build rotations return unit quaternions
    * Euler angles are applied about z, then y, then x, so that
      euler(e) == Rx(e.x) * Ry(e.y) * Rz(e.z)
    * The canonical frame is RIGHT = +x, UP = +y, FORWARD = +z
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING
from typing import ClassVar
from typing import Iterator
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.math_utils.storage import FLOAT_DTYPE
from oasis_math.math_utils.storage import ieee_math
from oasis_math.math_utils.storage import is_scalar
from oasis_math.math_utils.storage import to_storage
from oasis_math.vectors.vector3 import Vector3
from oasis_math.vectors.vector_base import component


if TYPE_CHECKING:
    from oasis_math.matrices.matrix3 import Matrix3


_LOG: logging.Logger = logging.getLogger(__name__)


class Quaternion:
    """Quaternion stored in wxyz order."""

    __slots__ = ("_data",)

    IDENTITY: ClassVar[Quaternion]

    _data: NDArray[np.float32]

    w = component(0, "The real (scalar) component.")
    x = component(1, "The x component of the vector part.")
    y = component(2, "The y component of the vector part.")
    z = component(3, "The z component of the vector part.")

    def __init__(
        self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0
    ) -> None:
        self._data = to_storage((w, x, y, z), 4, "Quaternion")

    @classmethod
    def from_scalar_vector(cls, s: float, v: Vector3) -> Quaternion:
        """Create a quaternion from a scalar part and a vector part."""
        return cls(s, v.x, v.y, v.z)

    @classmethod
    def from_array(cls, wxyz: Sequence[float] | NDArray[np.generic]) -> Quaternion:
        """Create a quaternion from components in wxyz order."""
        return cls._from_storage(to_storage(wxyz, 4, "wxyz"))

    @classmethod
    def _from_storage(cls, data: NDArray[np.generic]) -> Quaternion:
        instance: Quaternion = cls.__new__(cls)
        instance._data = np.asarray(data, dtype=FLOAT_DTYPE)
        return instance

    def vector_part(self) -> Vector3:
        """Return the (x, y, z) part."""
        return Vector3(self.x, self.y, self.z)

    #
    # Operators
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return not bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    # numpy scalars defer to __rmul__ instead of treating self as a sequence
    __array_ufunc__ = None

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        with ieee_math():
            return Quaternion._from_storage(self._data + other._data)

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        with ieee_math():
            return Quaternion._from_storage(self._data - other._data)

    def __neg__(self) -> Quaternion:
        return Quaternion._from_storage(-self._data)

    def __mul__(self, other: object) -> Quaternion | Vector3:
        """Hamilton product, vector rotation or scalar multiplication."""
        if isinstance(other, Quaternion):
            return self._hamilton(other)
        if isinstance(other, Vector3):
            return self._rotate(other)
        if is_scalar(other):
            with ieee_math():
                return Quaternion._from_storage(self._data * FLOAT_DTYPE(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Quaternion:
        if not is_scalar(other):
            return NotImplemented
        with ieee_math():
            return Quaternion._from_storage(FLOAT_DTYPE(other) * self._data)

    def __truediv__(self, other: object) -> Quaternion:
        if not is_scalar(other):
            return NotImplemented
        with ieee_math():
            return Quaternion._from_storage(self._data / FLOAT_DTYPE(other))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        for value in self._data:
            yield float(value)

    def __len__(self) -> int:
        return 4

    def __copy__(self) -> Quaternion:
        return Quaternion._from_storage(self._data.copy())

    def __deepcopy__(self, memo: dict[int, object]) -> Quaternion:
        return Quaternion._from_storage(self._data.copy())

    def __repr__(self) -> str:
        return f"Quaternion(w={self.w!r}, x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __str__(self) -> str:
        precision: int = DEFAULT_MATH_PARAMS.format_precision
        entries: str = ", ".join(f"{value:.{precision}g}" for value in self)
        return f"({entries})"

    def _hamilton(self, other: Quaternion) -> Quaternion:
        w1: float = self.w
        x1: float = self.x
        y1: float = self.y
        z1: float = self.z
        w2: float = other.w
        x2: float = other.x
        y2: float = other.y
        z2: float = other.z
        w: float = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x: float = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y: float = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z: float = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
        with ieee_math():
            return Quaternion(w, x, y, z)

    def _rotate(self, v: Vector3) -> Vector3:
        # v' = v + 2 u x (u x v + w v), valid for unit quaternions
        w: float = self.w
        ux: float = self.x
        uy: float = self.y
        uz: float = self.z
        vx: float = v.x
        vy: float = v.y
        vz: float = v.z
        tx: float = uy * vz - uz * vy + w * vx
        ty: float = uz * vx - ux * vz + w * vy
        tz: float = ux * vy - uy * vx + w * vz
        with ieee_math():
            return Vector3(
                vx + 2.0 * (uy * tz - uz * ty),
                vy + 2.0 * (uz * tx - ux * tz),
                vz + 2.0 * (ux * ty - uy * tx),
            )

    #
    # Magnitude, normalization and inversion
    #

    def sqr_magnitude(self) -> float:
        """Return w^2 + x^2 + y^2 + z^2."""
        with ieee_math():
            return float(np.dot(self._data, self._data))

    def magnitude(self) -> float:
        """Return the quaternion norm."""
        with ieee_math():
            return float(np.sqrt(np.dot(self._data, self._data)))

    def normalized(self) -> Quaternion:
        """Return a unit-norm copy; a zero quaternion yields NaN components."""
        with ieee_math():
            return Quaternion._from_storage(self._data / FLOAT_DTYPE(self.magnitude()))

    def normalize(self) -> None:
        """Normalize this quaternion in place."""
        self._data[:] = self.normalized()._data

    def conjugate(self) -> Quaternion:
        """Return (w, -x, -y, -z)."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """Return the multiplicative inverse.

        For unit quaternions this equals conjugate(), which is cheaper and
        should be preferred.
        """
        with ieee_math():
            return Quaternion._from_storage(
                self.conjugate()._data / FLOAT_DTYPE(self.sqr_magnitude())
            )

    def rotate_towards(self, target: Quaternion, max_radians_delta: float) -> None:
        """Rotate in place towards target by at most max_radians_delta.

        The step follows the shortest great-circle path and never overshoots.
        When the remaining angle is within the step this quaternion becomes
        equal to target. A negative step rotates away from target, except
        when the two rotations coincide and no direction is defined; then
        this quaternion becomes equal to target as well.
        """
        remaining: float = Quaternion.angle(self, target)
        if remaining <= max_radians_delta or remaining == 0.0:
            self._data[:] = target._data
            return

        step: Quaternion = Quaternion._slerp(
            self, target, max_radians_delta / remaining
        )
        self._data[:] = step._data

    @staticmethod
    def _slerp(start: Quaternion, end: Quaternion, t: float) -> Quaternion:
        q0: Quaternion = start.normalized()
        q1: Quaternion = end.normalized()
        cos_theta: float = Quaternion.dot(q0, q1)

        # q and -q are the same rotation, interpolate towards the nearer one
        if cos_theta < 0.0:
            q1 = -q1
            cos_theta = -cos_theta

        theta: float = math.acos(min(cos_theta, 1.0))
        sin_theta: float = math.sin(theta)
        if sin_theta <= 0.0:
            return q1

        w0: float = math.sin((1.0 - t) * theta) / sin_theta
        w1: float = math.sin(t * theta) / sin_theta
        result: Quaternion = w0 * q0 + w1 * q1
        return result.normalized()

    def almost_equal(
        self, other: Quaternion, atol: float = DEFAULT_MATH_PARAMS.almost_equal_atol
    ) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        q1: NDArray[np.float32] = self._data
        q2: NDArray[np.float32] = other._data
        if np.allclose(q1, q2, rtol=0.0, atol=atol):
            return True
        return bool(np.allclose(q1, -q2, rtol=0.0, atol=atol))

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the quaternion components in wxyz order."""
        return np.array(self._data, dtype=float)

    #
    # Factories
    #

    @staticmethod
    def angle_axis(angle: float, axis: Vector3) -> Quaternion:
        """Return the rotation of angle radians about a unit-length axis.

        The axis is not validated; a non-unit axis gives a non-unit result.
        """
        half_angle: float = 0.5 * angle
        sin_half: float = math.sin(half_angle)
        return Quaternion(
            math.cos(half_angle),
            sin_half * axis.x,
            sin_half * axis.y,
            sin_half * axis.z,
        )

    @staticmethod
    def euler(euler_angles: Vector3) -> Quaternion:
        """Return the rotation about z, then y, then x by the given radians."""
        qx: Quaternion = Quaternion.angle_axis(euler_angles.x, Vector3.RIGHT)
        qy: Quaternion = Quaternion.angle_axis(euler_angles.y, Vector3.UP)
        qz: Quaternion = Quaternion.angle_axis(euler_angles.z, Vector3.FORWARD)
        return qx._hamilton(qy)._hamilton(qz)

    @staticmethod
    def from_to_rotation(
        from_direction: Vector3,
        to_direction: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Quaternion:
        """Return the shortest-arc rotation taking from_direction to to_direction.

        Parallel directions give the identity. Antiparallel directions give a
        half turn about an axis orthogonal to from_direction, chosen by
        orthogonal_axis().
        """
        f: Vector3 = from_direction.normalized()
        t: Vector3 = to_direction.normalized()
        cos_angle: float = Vector3.dot(f, t)

        if cos_angle >= 1.0 - eps:
            return Quaternion()

        if cos_angle <= -1.0 + eps:
            axis: Vector3 = Quaternion.orthogonal_axis(f)
            _LOG.debug("Antiparallel from-to rotation, turning about %s", axis)
            return Quaternion.angle_axis(math.pi, axis)

        # (1 + cos, f x t) normalizes to the half-angle rotation about f x t
        c: Vector3 = Vector3.cross(f, t)
        return Quaternion(1.0 + cos_angle, c.x, c.y, c.z).normalized()

    @staticmethod
    def orthogonal_axis(direction: Vector3) -> Vector3:
        """Return a unit axis orthogonal to direction.

        The axis is the cross product of direction with the world axis
        (RIGHT, UP, FORWARD) along which direction has the smallest absolute
        component, ties going to the earlier axis.
        """
        magnitudes: NDArray[np.float64] = np.abs(direction.to_array())
        index: int = int(np.argmin(magnitudes))
        world_axis: Vector3 = (Vector3.RIGHT, Vector3.UP, Vector3.FORWARD)[index]
        return Vector3.cross(direction, world_axis).normalized()

    @staticmethod
    def look_rotation(
        forward: Vector3,
        upwards: Optional[Vector3] = None,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Quaternion:
        """Return a rotation that turns FORWARD to point along forward.

        Without upwards this is the shortest rotation and the resulting up
        direction is arbitrary. With upwards, the rotated UP is upwards made
        orthogonal to forward. If upwards is parallel to forward the shortest
        rotation is used instead, so looking straight up or down is well
        defined.
        """
        if upwards is None:
            return Quaternion.from_to_rotation(Vector3.FORWARD, forward, eps=eps)

        basis: Optional[NDArray[np.float64]] = Quaternion.look_basis(
            forward, upwards, eps=eps
        )
        if basis is None:
            _LOG.debug("Look rotation with upwards parallel to forward")
            return Quaternion.from_to_rotation(Vector3.FORWARD, forward, eps=eps)

        return Quaternion._from_rotation_array(basis)

    @staticmethod
    def look_basis(
        forward: Vector3,
        upwards: Vector3,
        eps: float = DEFAULT_MATH_PARAMS.parallel_epsilon,
    ) -> Optional[NDArray[np.float64]]:
        """Return the look-rotation matrix whose columns are right, up, forward.

        Returns None when upwards is parallel to forward.
        """
        f: Vector3 = forward.normalized()
        up: Vector3 = upwards.normalized()
        if abs(Vector3.dot(f, up)) >= 1.0 - eps:
            return None

        r: Vector3 = Vector3.cross(up, f).normalized()
        u: Vector3 = Vector3.cross(f, r)
        return np.column_stack([r.to_array(), u.to_array(), f.to_array()])

    @staticmethod
    def from_matrix3(R: Matrix3) -> Quaternion:
        """Create a quaternion from a rotation matrix."""
        return Quaternion._from_rotation_array(R.to_array())

    @staticmethod
    def _from_rotation_array(mat: NDArray[np.float64]) -> Quaternion:
        trace: float = float(np.trace(mat))
        if trace > 0.0:
            s: float = float(np.sqrt(trace + 1.0) * 2.0)
            w: float = 0.25 * s
            x: float = float((mat[2, 1] - mat[1, 2]) / s)
            y: float = float((mat[0, 2] - mat[2, 0]) / s)
            z: float = float((mat[1, 0] - mat[0, 1]) / s)
        else:
            diag: NDArray[np.float64] = np.diag(mat)
            idx: int = int(np.argmax(diag))
            if idx == 0:
                s = float(np.sqrt(1.0 + mat[0, 0] - mat[1, 1] - mat[2, 2]) * 2.0)
                w = float((mat[2, 1] - mat[1, 2]) / s)
                x = 0.25 * s
                y = float((mat[0, 1] + mat[1, 0]) / s)
                z = float((mat[0, 2] + mat[2, 0]) / s)
            elif idx == 1:
                s = float(np.sqrt(1.0 + mat[1, 1] - mat[0, 0] - mat[2, 2]) * 2.0)
                w = float((mat[0, 2] - mat[2, 0]) / s)
                x = float((mat[0, 1] + mat[1, 0]) / s)
                y = 0.25 * s
                z = float((mat[1, 2] + mat[2, 1]) / s)
            else:
                s = float(np.sqrt(1.0 + mat[2, 2] - mat[0, 0] - mat[1, 1]) * 2.0)
                w = float((mat[1, 0] - mat[0, 1]) / s)
                x = float((mat[0, 2] + mat[2, 0]) / s)
                y = float((mat[1, 2] + mat[2, 1]) / s)
                z = 0.25 * s
        return Quaternion(w, x, y, z).normalized()

    #
    # Free functions
    #

    @staticmethod
    def dot(lhs: Quaternion, rhs: Quaternion) -> float:
        """Return the 4-vector dot product, which is commutative."""
        with ieee_math():
            return float(np.dot(lhs._data, rhs._data))

    @staticmethod
    def angle(from_rotation: Quaternion, to_rotation: Quaternion) -> float:
        """Return the angle in radians, in [0, pi], between two rotations."""
        cos_half: float = abs(
            Quaternion.dot(from_rotation.normalized(), to_rotation.normalized())
        )
        return 2.0 * math.acos(min(cos_half, 1.0))


Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
Quaternion.IDENTITY._data.flags.writeable = False
