################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Parameters shared by the math types."""

from __future__ import annotations

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.config.math_params import MathParams


__all__ = ["DEFAULT_MATH_PARAMS", "MathParams"]
