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
Single-precision storage helpers shared by the vector, quaternion and
matrix types

Conventions:
    * Components are stored as a flat numpy float32 array
    * Accessors hand out Python floats
    * Degenerate arithmetic such as division by zero follows IEEE-754 and
      yields inf or NaN without raising or warning
"""

from __future__ import annotations

import numbers
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


# Component storage type for every value type in the package
FLOAT_DTYPE: type[np.float32] = np.float32


def to_storage(
    values: Sequence[float] | NDArray[np.generic], size: int, name: str
) -> NDArray[np.float32]:
    """
    Return a flat float32 copy of the values, validating the element count
    """

    array: NDArray[np.float32] = np.array(values, dtype=FLOAT_DTYPE).reshape(-1)
    if array.size != size:
        raise ValueError(f"{name} must have {size} elements")

    return array


def is_scalar(value: object) -> bool:
    """
    Return True for real numbers usable as a scalar operand
    """

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def ieee_math() -> np.errstate:
    """
    Return a context in which numpy propagates inf and NaN silently
    """

    return np.errstate(divide="ignore", invalid="ignore", over="ignore")
