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
Rotation representations
"""

from __future__ import annotations

from oasis_math.rotations.quaternion import Quaternion


__all__ = ["Quaternion"]
