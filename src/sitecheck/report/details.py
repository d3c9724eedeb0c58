# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Site details: identity of the scanned site and scanner notes."""

from __future__ import annotations

import platform

from sitecheck.core.constants import UNKNOWN
from sitecheck.core.exceptions import MalformedEntryError
from sitecheck.models.document import ScanDocument
from sitecheck.report.entries import entry_fields
from sitecheck.report.views import AdditionalNote, DetailsView


def _first(values: list[str]) -> str:
    return values[0] if values else UNKNOWN


def collect_notes(document: ScanDocument) -> list[str]:
    """Gather the ``label: value`` lines shown under "additional information"."""
    scan = document.scan
    system = document.system
    webapp = document.webapp

    notes: list[str] = []
    if scan.hosting:
        notes.append(f"Hosting: {scan.hosting[0]}")
    if scan.cms:
        notes.append(f"CMS: {scan.cms[0]}")
    notes.extend(system.notice)
    notes.extend(system.info)
    notes.extend(webapp.version)
    notes.extend(webapp.warn)

    for entry in document.outdated:
        try:
            fields = entry_fields(entry, minimum=3)
        except MalformedEntryError:
            continue
        notes.append(f"{fields[0]}:{fields[2]}")
    return notes


def split_note(text: str) -> AdditionalNote | None:
    title, sep, value = text.partition(":")
    if not sep:
        return None
    return AdditionalNote(title=title.strip(), value=value.strip())


def build_details(
    document: ScanDocument | None,
    platform_version: str = UNKNOWN,
) -> DetailsView:
    view = DetailsView(
        platform_version=platform_version or UNKNOWN,
        runtime_version=platform.python_version(),
    )
    if document is None:
        return view

    scan = document.scan
    view.website = _first(scan.site)
    view.domain = _first(scan.domain)
    view.server_address = _first(scan.ip)

    for text in collect_notes(document):
        if (note := split_note(text)) is not None:
            view.additional.append(note)
    return view
