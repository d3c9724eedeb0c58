# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Inventories of iframes, links, and scripts found on the scanned pages."""

from __future__ import annotations

from sitecheck.models.document import ScanDocument
from sitecheck.report.views import ResourceInventory, ResourceKind


def build_iframes(document: ScanDocument | None) -> ResourceInventory:
    urls = document.links.iframe if document is not None else []
    return ResourceInventory(kind=ResourceKind.IFRAMES, urls=list(urls))


def build_links(document: ScanDocument | None) -> ResourceInventory:
    urls = document.links.url if document is not None else []
    return ResourceInventory(kind=ResourceKind.LINKS, urls=list(urls))


def build_scripts(document: ScanDocument | None) -> ResourceInventory:
    if document is None:
        return ResourceInventory(kind=ResourceKind.SCRIPTS)
    links = document.links
    return ResourceInventory(kind=ResourceKind.SCRIPTS, urls=[*links.js_local, *links.js_external])


BUILDERS = {
    ResourceKind.IFRAMES: build_iframes,
    ResourceKind.LINKS: build_links,
    ResourceKind.SCRIPTS: build_scripts,
}
