################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Shared behavior of the fixed-size vector types."""

from __future__ import annotations

import math
from typing import Any
from typing import ClassVar
from typing import Iterator
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.math_utils.storage import FLOAT_DTYPE
from oasis_math.math_utils.storage import ieee_math
from oasis_math.math_utils.storage import is_scalar
from oasis_math.math_utils.storage import to_storage


VectorT = TypeVar("VectorT", bound="VectorBase")


def component(index: int, doc: str) -> property:
    """Create a read/write property bound to one storage slot."""

    def getter(self: Any) -> float:
        return float(self._data[index])

    def setter(self: Any, value: float) -> None:
        self._data[index] = value

    return property(getter, setter, doc=doc)


class VectorBase:
    """Fixed-size single-precision vector with value semantics.

    Subclasses set DIMENSION and FIELDS and expose named component
    properties. Equality is exact per component; use almost_equal() for
    tolerance comparisons.
    """

    __slots__ = ("_data",)

    DIMENSION: ClassVar[int] = 0
    FIELDS: ClassVar[tuple[str, ...]] = ()

    _data: NDArray[np.float32]

    @classmethod
    def from_array(
        cls: type[VectorT], values: Sequence[float] | NDArray[np.generic]
    ) -> VectorT:
        """Create a vector from a flat sequence of components."""
        return cls._from_storage(to_storage(values, cls.DIMENSION, "values"))

    @classmethod
    def _from_storage(cls: type[VectorT], data: NDArray[Any]) -> VectorT:
        # Takes ownership of data, callers pass a fresh array
        instance: VectorT = cls.__new__(cls)
        instance._data = np.asarray(data, dtype=FLOAT_DTYPE)
        return instance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return not bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    # numpy scalars defer to __rmul__ instead of treating self as a sequence
    __array_ufunc__ = None

    def __add__(self: VectorT, other: object) -> VectorT:
        if not isinstance(other, type(self)):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data + other._data)

    def __sub__(self: VectorT, other: object) -> VectorT:
        if not isinstance(other, type(self)):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data - other._data)

    def __neg__(self: VectorT) -> VectorT:
        return self._from_storage(-self._data)

    def __mul__(self: VectorT, other: object) -> VectorT:
        if not is_scalar(other):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data * FLOAT_DTYPE(other))

    def __rmul__(self: VectorT, other: object) -> VectorT:
        if not is_scalar(other):
            return NotImplemented
        with ieee_math():
            return self._from_storage(FLOAT_DTYPE(other) * self._data)

    def __truediv__(self: VectorT, other: object) -> VectorT:
        if not is_scalar(other):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data / FLOAT_DTYPE(other))

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self) -> Iterator[float]:
        for value in self._data:
            yield float(value)

    def __len__(self) -> int:
        return self.DIMENSION

    def __copy__(self: VectorT) -> VectorT:
        return self._from_storage(self._data.copy())

    def __deepcopy__(self: VectorT, memo: dict[int, object]) -> VectorT:
        return self._from_storage(self._data.copy())

    def __repr__(self) -> str:
        fields: str = ", ".join(
            f"{name}={float(value)!r}" for name, value in zip(self.FIELDS, self._data)
        )
        return f"{type(self).__name__}({fields})"

    def __str__(self) -> str:
        precision: int = DEFAULT_MATH_PARAMS.format_precision
        entries: str = ", ".join(
            f"{float(value):.{precision}g}" for value in self._data
        )
        return f"({entries})"

    def sqr_magnitude(self) -> float:
        """Return the sum of squared components."""
        with ieee_math():
            return float(np.dot(self._data, self._data))

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        with ieee_math():
            return float(np.sqrt(np.dot(self._data, self._data)))

    def normalized(self: VectorT) -> VectorT:
        """Return a unit-length copy; a zero vector yields NaN components."""
        with ieee_math():
            return self._from_storage(self._data / FLOAT_DTYPE(self.magnitude()))

    def normalize(self) -> None:
        """Scale this vector to unit length in place."""
        self._data[:] = self.normalized()._data

    def almost_equal(
        self: VectorT,
        other: VectorT,
        atol: float = DEFAULT_MATH_PARAMS.almost_equal_atol,
    ) -> bool:
        """Check approximate equality using an absolute tolerance."""
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the components."""
        return np.array(self._data, dtype=float)

    @staticmethod
    def scale(lhs: VectorT, rhs: VectorT) -> VectorT:
        """Return the component-wise product."""
        with ieee_math():
            return lhs._from_storage(lhs._data * rhs._data)

    @staticmethod
    def dot(lhs: VectorBase, rhs: VectorBase) -> float:
        """Return the dot product, which is commutative."""
        with ieee_math():
            return float(np.dot(lhs._data, rhs._data))

    @staticmethod
    def sqr_distance(p1: VectorBase, p2: VectorBase) -> float:
        """Return the squared Euclidean distance between two points."""
        with ieee_math():
            delta: NDArray[np.float32] = p1._data - p2._data
            return float(np.dot(delta, delta))

    @staticmethod
    def distance(p1: VectorBase, p2: VectorBase) -> float:
        """Return the Euclidean distance between two points."""
        return math.sqrt(VectorBase.sqr_distance(p1, p2))

    @staticmethod
    def _angle_between(from_vector: VectorBase, to_vector: VectorBase) -> float:
        # Clamped so rounding never pushes acos outside its domain
        cos_angle: float = VectorBase.dot(
            from_vector.normalized(), to_vector.normalized()
        )
        cos_angle = float(np.clip(cos_angle, -1.0, 1.0))
        return math.acos(cos_angle)

    @staticmethod
    def _freeze(value: VectorT) -> VectorT:
        # Constants reject in-place mutation
        value._data.flags.writeable = False
        return value
