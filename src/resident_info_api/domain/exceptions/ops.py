# Copyright (c)
# SPDX-License-Identifier: MIT
"""Operational check exceptions.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Final

OPS_CHECK_MESSAGE: Final[str] = "This is a test exception to test our integrations"


class OpsCheckError(Exception):
    """Raised on purpose to verify that error reporting reaches its sinks.

    Not a :class:`DomainError`, so it takes the unhandled exception path: a 500
    envelope and an ``unhandled_exception`` log record carrying the traceback.
    """

    def __init__(self, message: str = OPS_CHECK_MESSAGE) -> None:
        super().__init__(message)
