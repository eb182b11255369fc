################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the math parameter container."""

from __future__ import annotations

import dataclasses
import unittest

from oasis_math.config.math_params import DEFAULT_MATH_PARAMS
from oasis_math.config.math_params import MathParams


class TestMathParams(unittest.TestCase):
    """Tests for MathParams."""

    def test_defaults(self) -> None:
        """Defaults are valid and shared by the module constant."""
        params: MathParams = MathParams.defaults()
        params.validate()
        self.assertEqual(params, DEFAULT_MATH_PARAMS)
        self.assertEqual(params.parallel_epsilon, 1e-6)
        self.assertEqual(params.almost_equal_atol, 1e-5)
        self.assertEqual(params.format_precision, 6)

    def test_validate_accepts_custom_values(self) -> None:
        """Validate accepts tightened tolerances."""
        params: MathParams = dataclasses.replace(
            DEFAULT_MATH_PARAMS, parallel_epsilon=1e-4, format_precision=3
        )
        params.validate()
        self.assertEqual(params.parallel_epsilon, 1e-4)
        self.assertEqual(params.almost_equal_atol, 1e-5)

    def test_validate_rejects_out_of_range(self) -> None:
        """Validate rejects non-positive, non-finite and oversized values."""
        for key, value in (
            ("parallel_epsilon", 0.0),
            ("parallel_epsilon", 1.0),
            ("parallel_epsilon", float("nan")),
            ("almost_equal_atol", -1e-5),
            ("almost_equal_atol", float("inf")),
            ("format_precision", -1),
        ):
            with self.subTest(key=key, value=value):
                params: MathParams = dataclasses.replace(
                    DEFAULT_MATH_PARAMS, **{key: value}
                )
                with self.assertRaises(ValueError):
                    params.validate()

    def test_validate_error_message(self) -> None:
        """Validate names the offending parameter."""
        params: MathParams = dataclasses.replace(
            DEFAULT_MATH_PARAMS, almost_equal_atol=0.0
        )
        with self.assertRaises(ValueError) as context:
            params.validate()
        self.assertEqual(
            str(context.exception),
            "almost_equal_atol must be finite and > 0",
        )

    def test_params_are_frozen(self) -> None:
        """Parameters cannot be reassigned after construction."""
        params: MathParams = MathParams.defaults()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            params.parallel_epsilon = 0.5  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
