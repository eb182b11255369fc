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
Shared behavior of the fixed-size square matrix types

Conventions:
    * Entries are stored row-major, flat index = row * N + col
    * M * v treats v as a column vector, v * M treats v as a row vector
    * Determinants and inverses use closed-form expansions implemented per
      size; a singular matrix inverts to inf/NaN entries
"""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.math_utils.storage import FLOAT_DTYPE
from oasis_math.math_utils.storage import ieee_math
from oasis_math.math_utils.storage import is_scalar
from oasis_math.math_utils.storage import to_storage
from oasis_math.vectors.vector_base import VectorBase


MatrixT = TypeVar("MatrixT", bound="MatrixBase")


class MatrixBase:
    """Square single-precision matrix with value semantics."""

    __slots__ = ("_data",)

    SIZE: ClassVar[int] = 0
    VECTOR_TYPE: ClassVar[type[VectorBase]] = VectorBase

    _data: NDArray[np.float32]

    def __init__(self, *entries: float) -> None:
        """Create the identity, or a matrix from N * N row-major entries."""
        if not entries:
            self._data = np.eye(self.SIZE, dtype=FLOAT_DTYPE).reshape(-1)
        else:
            self._data = to_storage(entries, self.SIZE * self.SIZE, type(self).__name__)

    @classmethod
    def from_array(
        cls: type[MatrixT], values: Sequence[float] | NDArray[np.generic]
    ) -> MatrixT:
        """Create a matrix from N * N row-major values or an N x N array."""
        return cls._from_storage(to_storage(values, cls.SIZE * cls.SIZE, "values"))

    @classmethod
    def _from_storage(cls: type[MatrixT], data: NDArray[Any]) -> MatrixT:
        # Takes ownership of data, callers pass a fresh array
        instance: MatrixT = cls.__new__(cls)
        instance._data = np.asarray(data, dtype=FLOAT_DTYPE)
        return instance

    @classmethod
    def _diagonal(cls: type[MatrixT], values: Sequence[float]) -> MatrixT:
        diagonal: NDArray[np.float32] = np.asarray(values, dtype=FLOAT_DTYPE)
        return cls._from_storage(np.diag(diagonal).reshape(-1))

    @classmethod
    def _from_adjugate(
        cls: type[MatrixT], adjugate: Sequence[float], det: float
    ) -> MatrixT:
        with ieee_math():
            return cls._from_storage(np.asarray(adjugate, dtype=float) / det)

    def _matrix(self) -> NDArray[np.float32]:
        return self._data.reshape(self.SIZE, self.SIZE)

    #
    # Element access
    #

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def entry(self, row: int, col: int) -> float:
        """Return the entry at (row, col)."""
        return float(self._data[row * self.SIZE + col])

    def row(self, index: int) -> VectorBase:
        """Return a row as a vector."""
        return self.VECTOR_TYPE.from_array(self._matrix()[index, :])

    def column(self, index: int) -> VectorBase:
        """Return a column as a vector."""
        return self.VECTOR_TYPE.from_array(self._matrix()[:, index])

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the entries as an N x N array."""
        return np.array(self._matrix(), dtype=float)

    #
    # Operators
    #

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

    def __add__(self: MatrixT, other: object) -> MatrixT:
        if not isinstance(other, type(self)):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data + other._data)

    def __sub__(self: MatrixT, other: object) -> MatrixT:
        if not isinstance(other, type(self)):
            return NotImplemented
        with ieee_math():
            return self._from_storage(self._data - other._data)

    def __neg__(self: MatrixT) -> MatrixT:
        return self._from_storage(-self._data)

    def __mul__(self, other: object) -> Any:
        """Scalar product, column-vector product or matrix product."""
        if is_scalar(other):
            with ieee_math():
                return self._from_storage(self._data * FLOAT_DTYPE(other))
        if isinstance(other, self.VECTOR_TYPE):
            with ieee_math():
                return self.VECTOR_TYPE._from_storage(self._matrix() @ other._data)
        if isinstance(other, type(self)):
            with ieee_math():
                product: NDArray[np.float32] = self._matrix() @ other._matrix()
                return self._from_storage(product.reshape(-1))
        return NotImplemented

    def __rmul__(self, other: object) -> Any:
        """Scalar product or row-vector product."""
        if is_scalar(other):
            with ieee_math():
                return self._from_storage(FLOAT_DTYPE(other) * self._data)
        if isinstance(other, self.VECTOR_TYPE):
            with ieee_math():
                return self.VECTOR_TYPE._from_storage(other._data @ self._matrix())
        return NotImplemented

    def __copy__(self: MatrixT) -> MatrixT:
        return self._from_storage(self._data.copy())

    def __deepcopy__(self: MatrixT, memo: dict[int, object]) -> MatrixT:
        return self._from_storage(self._data.copy())

    def __repr__(self) -> str:
        entries: str = ", ".join(repr(float(value)) for value in self._data)
        return f"{type(self).__name__}({entries})"

    def __str__(self) -> str:
        return np.array2string(
            self._matrix(),
            precision=DEFAULT_MATH_PARAMS.format_precision,
            suppress_small=True,
        )

    #
    # Algebra
    #

    def transposed(self: MatrixT) -> MatrixT:
        """Return the transpose."""
        return self._from_storage(self._matrix().T.flatten())

    def transpose(self) -> None:
        """Transpose this matrix in place."""
        self._data[:] = self._matrix().T.flatten()

    def determinant(self) -> float:
        """Return the determinant; the matrix is invertible iff it is non-zero."""
        raise NotImplementedError()

    def inverse(self: MatrixT) -> MatrixT:
        """Return the inverse; a singular matrix yields inf/NaN entries."""
        raise NotImplementedError()

    def almost_equal(
        self: MatrixT,
        other: MatrixT,
        atol: float = DEFAULT_MATH_PARAMS.almost_equal_atol,
    ) -> bool:
        """Check approximate equality using an absolute tolerance."""
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def _entries(self) -> list[float]:
        return [float(value) for value in self._data]

    @staticmethod
    def _freeze(value: MatrixT) -> MatrixT:
        # Constants reject in-place mutation
        value._data.flags.writeable = False
        return value
