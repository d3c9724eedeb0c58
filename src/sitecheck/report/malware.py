# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Malware findings reported by the scan service."""

from __future__ import annotations

import logging
import re

from sitecheck.core.constants import StatusColor
from sitecheck.core.exceptions import MalformedEntryError
from sitecheck.models.document import ScanDocument
from sitecheck.report.entries import entry_fields
from sitecheck.report.views import MalwareFinding, MalwareView

logger = logging.getLogger("sitecheck.report.malware")

# First line of the details part: "<type>. Details: <docs url>"
_DETAILS_RE = re.compile(r"(.+)\. Details: (.+)")


def parse_malware_entry(entry: object) -> MalwareFinding:
    """Split a ``[alert, details]`` malware entry into its fields.

    The alert part reads ``"<message>: <infected url>"``; the details part
    reads ``"<type>. Details: <docs url>\\n<payload>"``.  Sub-parts that are
    missing leave their fields empty.

    Raises:
        MalformedEntryError: *entry* does not have two parts.
    """
    alert, details = entry_fields(entry, minimum=2)[:2]
    finding = MalwareFinding()

    message, sep, url = alert.partition(":")
    if sep:
        finding.alert_message = message
        finding.infected_url = url.strip()

    lines = details.split("\n")
    if len(lines) > 1:
        if match := _DETAILS_RE.search(lines[0]):
            finding.malware_type = match.group(1)
            finding.malware_docs = match.group(2)
        finding.malware_payload = lines[1].strip()

    return finding


def build_malware_findings(document: ScanDocument | None) -> MalwareView:
    view = MalwareView()
    if document is None:
        return view

    warnings = document.malware.warn
    if not warnings:
        return view

    view.infected = True
    view.color = StatusColor.ALERT
    view.title = "Site is not Clean"

    for entry in warnings:
        try:
            view.findings.append(parse_malware_entry(entry))
        except MalformedEntryError as exc:
            logger.debug("Skipping malware entry: %s", exc)
    return view
