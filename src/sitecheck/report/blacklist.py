# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Blacklist status across the services the scanner consulted."""

from __future__ import annotations

import re

from sitecheck.core.constants import StatusColor
from sitecheck.core.exceptions import MalformedEntryError
from sitecheck.models.document import ScanDocument
from sitecheck.report.entries import entry_fields
from sitecheck.report.views import BlacklistEntry, BlacklistView

_STATUS_PHRASE = re.compile(r"Domain (clean|blacklisted) (on|by) (the )?")

WARN_STATUS = "WARN"


def service_name(text: str) -> str:
    """Reduce ``"Domain clean by Google Safe Browsing: example.com"`` to the service name."""
    head, sep, _ = text.rpartition(":")
    if not sep:
        head = text
    return _STATUS_PHRASE.sub("", head).strip()


def build_blacklist_status(document: ScanDocument | None) -> BlacklistView:
    view = BlacklistView()
    if document is None:
        return view

    blacklist = document.blacklist
    for status, entries in blacklist.items():
        for entry in entries:
            try:
                text, url = entry_fields(entry, minimum=2)[:2]
            except MalformedEntryError:
                continue
            view.entries.append(BlacklistEntry(service=service_name(text), url=url, status=status))

    if WARN_STATUS in blacklist:
        view.blacklisted = True
        view.color = StatusColor.ALERT
        view.title = "Blacklisted"
    return view
