# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Helpers for the positional entries found in scan report sections."""

from __future__ import annotations

from collections.abc import Mapping

from sitecheck.core.exceptions import MalformedEntryError


def entry_fields(entry: object, minimum: int = 0) -> list[str]:
    """Return the fields of a positional entry as strings.

    Entries normally arrive as JSON arrays; objects with positional keys
    are accepted too.  Raises :class:`MalformedEntryError` when *entry* is
    not a sequence of scalars or has fewer than *minimum* fields.
    """
    if isinstance(entry, Mapping):
        entry = list(entry.values())
    if not isinstance(entry, (list, tuple)):
        raise MalformedEntryError(f"expected a list entry, got {type(entry).__name__}")

    fields: list[str] = []
    for item in entry:
        if item is None:
            fields.append("")
            continue
        if isinstance(item, bool) or not isinstance(item, (str, int, float)):
            raise MalformedEntryError(f"unexpected field type {type(item).__name__}")
        fields.append(str(item))

    if len(fields) < minimum:
        raise MalformedEntryError(f"expected at least {minimum} fields, got {len(fields)}")
    return fields
