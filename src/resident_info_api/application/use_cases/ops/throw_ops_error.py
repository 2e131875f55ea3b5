# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Use Case: Throw Ops Error

Purpose:
    Fail on demand so operators can confirm that unhandled errors are logged
    with their traceback and rendered as the canonical 500 envelope.

Layer: application/use_cases
"""

from __future__ import annotations

from typing import NoReturn

from resident_info_api.domain.exceptions.ops import OpsCheckError
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


class ThrowOpsError:
    """Use case that always raises :class:`OpsCheckError`."""

    async def execute(self) -> NoReturn:
        """Raise the operational check error.

        Raises:
            OpsCheckError: Always.
        """
        logger.info("usecase.throw_ops_error.requested")
        raise OpsCheckError()
