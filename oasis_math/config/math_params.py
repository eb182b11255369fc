################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MathParams:
    """Tolerance and formatting parameters for the math types.

    Responsibility:
        Collect the few numeric knobs used by the rotation factories, the
        approximate comparison helpers and diagnostic formatting.

    Data contract:
        - parallel_epsilon: tolerance on 1 - |dot(a, b)| below which two unit
          directions are treated as parallel or antiparallel.
        - almost_equal_atol: default absolute tolerance of almost_equal().
        - format_precision: number of digits rendered by str().

    Determinism and edge cases:
        - Parameters are immutable once constructed.
        - validate() rejects non-finite or non-positive tolerances and
          negative precision.
        - Equality operators never consult these values; == stays exact.
    """

    parallel_epsilon: float
    almost_equal_atol: float
    format_precision: int

    @staticmethod
    def defaults() -> MathParams:
        """Return a stable default parameter set."""
        params: MathParams = MathParams(
            parallel_epsilon=1e-6,
            almost_equal_atol=1e-5,
            format_precision=6,
        )
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        self._validate_positive("parallel_epsilon", self.parallel_epsilon)
        if self.parallel_epsilon >= 1.0:
            raise ValueError("parallel_epsilon must be < 1")
        self._validate_positive("almost_equal_atol", self.almost_equal_atol)
        if self.format_precision < 0:
            raise ValueError("format_precision must be >= 0")

    @staticmethod
    def _validate_positive(name: str, value: float) -> None:
        if not math.isfinite(value) or value <= 0.0:
            raise ValueError(f"{name} must be finite and > 0")


DEFAULT_MATH_PARAMS: MathParams = MathParams.defaults()
