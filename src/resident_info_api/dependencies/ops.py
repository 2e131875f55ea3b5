# Copyright (c)
# SPDX-License-Identifier: MIT
"""Dependency wiring for operational endpoints.

Layer:
    dependencies
"""

from __future__ import annotations

from resident_info_api.application.use_cases.ops.throw_ops_error import ThrowOpsError


def get_throw_ops_error_uc() -> ThrowOpsError:
    """Provide the ops error use case (overridable in tests)."""
    return ThrowOpsError()
