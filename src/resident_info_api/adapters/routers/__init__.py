"""Routers Package Export (Adapters Layer).

Purpose:
    Re-export the application router aggregator so ``main.py`` does not depend
    on the router file layout.

Layer:
    adapters/routers
"""

from __future__ import annotations

from .api_router import router as api_router

__all__ = ["api_router"]
