# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident information enums.

Summary:
    Source system identifiers and phone number classifications shared by the
    wire schemas, the canonical DTOs and the HTTP surface.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class SourceSystem(str, Enum):
    """External line-of-business systems queried for resident data.

    Declaration order is the aggregation order of results.
    """

    HOUSING = "housing"
    MOSAIC = "mosaic"
    ACADEMY = "academy"
    ELECTORAL_REGISTER = "electoral_register"

    @classmethod
    def ordered(cls) -> list[SourceSystem]:
        """Return all systems in aggregation order."""
        return list(cls)

    @classmethod
    def parse_csv(cls, raw: str | None) -> list[SourceSystem]:
        """Parse a comma-separated list of source names.

        Blank input selects every source. Duplicates collapse and the result is
        always returned in aggregation order, whatever the input order.

        Args:
            raw: Comma-separated source names (case-insensitive).

        Returns:
            Selected systems in aggregation order.

        Raises:
            ValueError: If a name does not match any source system.
        """
        if raw is None or not raw.strip():
            return cls.ordered()
        wanted = {cls(part.strip().lower()) for part in raw.split(",") if part.strip()}
        return [s for s in cls.ordered() if s in wanted]


class PhoneType(str, Enum):
    """Phone number classification as reported by the source systems."""

    FAX = "Fax"
    MOBILE = "Mobile"
    LANDLINE = "Landline"
    WORK = "Work"
    HOME = "Home"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value: object) -> PhoneType | None:
        # Sources disagree on casing ("fax", "FAX", "Fax"); some send the
        # integer ordinal instead of the label. Anything unrecognised is Other.
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            return members[value] if 0 <= value < len(members) else cls.OTHER
        if isinstance(value, str):
            folded = value.strip().lower()
            for member in cls:
                if member.value.lower() == folded:
                    return member
        return cls.OTHER
