# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Hardening recommendations suggested by the scan service."""

from __future__ import annotations

from sitecheck.core.exceptions import MalformedEntryError
from sitecheck.models.document import ScanDocument
from sitecheck.report.entries import entry_fields
from sitecheck.report.views import Recommendation, RecommendationsView


def build_recommendations(document: ScanDocument | None) -> RecommendationsView:
    view = RecommendationsView()
    if document is None:
        return view

    for entry in document.recommendations:
        # title, value, url; anything shorter is unusable
        try:
            title, value, url = entry_fields(entry, minimum=3)[:3]
        except MalformedEntryError:
            continue
        view.items.append(Recommendation(title=title, value=value, url=url))
    return view
