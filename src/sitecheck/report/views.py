# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Render-ready report views derived from a scan document."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

from sitecheck.core.constants import UNKNOWN, StatusColor


class ResourceKind(StrEnum):
    IFRAMES = "iframes"
    LINKS = "links"
    SCRIPTS = "scripts"


RESOURCE_LABELS: dict[ResourceKind, str] = {
    ResourceKind.IFRAMES: "iFrames",
    ResourceKind.LINKS: "Links",
    ResourceKind.SCRIPTS: "Scripts",
}


class AdditionalNote(BaseModel):
    title: str
    value: str


class DetailsView(BaseModel):
    """Identity of the scanned site plus free-form notes from the scanner."""

    website: str = UNKNOWN
    domain: str = UNKNOWN
    server_address: str = UNKNOWN
    platform_version: str = UNKNOWN
    runtime_version: str = UNKNOWN
    additional: list[AdditionalNote] = Field(default_factory=list)


class MalwareFinding(BaseModel):
    alert_message: str = ""
    infected_url: str = ""
    malware_type: str = ""
    malware_docs: str = ""
    malware_payload: str = ""


class MalwareView(BaseModel):
    infected: bool = False
    color: StatusColor = StatusColor.CLEAN
    title: str = "Site is Clean"
    findings: list[MalwareFinding] = Field(default_factory=list)


class BlacklistEntry(BaseModel):
    service: str
    url: str
    status: str


class BlacklistView(BaseModel):
    blacklisted: bool = False
    color: StatusColor = StatusColor.CLEAN
    title: str = "Not Blacklisted"
    entries: list[BlacklistEntry] = Field(default_factory=list)


class Recommendation(BaseModel):
    title: str
    value: str
    url: str


class RecommendationsView(BaseModel):
    items: list[Recommendation] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def visible(self) -> bool:
        return bool(self.items)


class ResourceInventory(BaseModel):
    kind: ResourceKind
    urls: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.urls)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        return f"{RESOURCE_LABELS[self.kind]}: {self.count}"


class SiteCheckReport(BaseModel):
    """Every report view of one render, plus the errors raised while building it."""

    target: str
    scanned: bool
    details: DetailsView
    malware: MalwareView
    blacklist: BlacklistView
    recommendations: RecommendationsView
    iframes: ResourceInventory
    links: ResourceInventory
    scripts: ResourceInventory
    errors: list[str] = Field(default_factory=list)
