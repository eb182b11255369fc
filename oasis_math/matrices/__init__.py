################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Square matrices of sizes 2, 3 and 4."""

from __future__ import annotations

from oasis_math.matrices.matrix2 import Matrix2
from oasis_math.matrices.matrix3 import Matrix3
from oasis_math.matrices.matrix4 import Matrix4
from oasis_math.matrices.matrix_base import MatrixBase


__all__ = [
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixBase",
]
