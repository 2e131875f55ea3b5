# Copyright (c)
# SPDX-License-Identifier: MIT
"""Outbound query serialization for resident sources.

The shared base encoding keeps only populated fields of
:class:`ResidentQueryParam` under their snake_case names; a source may rename
keys on top of it.
"""

from __future__ import annotations

from collections.abc import Mapping

from resident_info_api.application.schemas.dto.residents import ResidentQueryParam


def serialize_query(
    query: ResidentQueryParam | None,
    key_map: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Encode a resident query as source query parameters.

    Args:
        query: Uniform search filter; ``None`` encodes as no parameters.
        key_map: Optional ``field name -> source key`` renames.

    Returns:
        One entry per non-null, non-blank field, in model field order.
    """
    if query is None:
        return {}
    renames = key_map or {}
    params: dict[str, str] = {}
    for name in type(query).model_fields:
        value = getattr(query, name)
        if value is None:
            continue
        text = str(value).strip()
        if not text:
            continue
        params[renames.get(name, name)] = text
    return params
