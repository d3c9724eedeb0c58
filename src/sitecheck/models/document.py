# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typed views over the loosely-typed scan-service response document.

The scan service answers with a mapping of uppercase section names to
lists or nested mappings, any of which may be missing.  The raw mapping
is kept as-is (it is what gets cached); each section is validated into
its payload model on first access.  A missing or misshapen section
yields an empty model instead of an error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, field_validator

from sitecheck.core.constants import Section

logger = logging.getLogger("sitecheck.models.document")


def _as_str_list(v: object) -> list[str]:
    if v is None:
        return []
    if isinstance(v, (str, int, float)):
        return [str(v)]
    if isinstance(v, Mapping):
        v = list(v.values())
    if isinstance(v, list):
        return [str(item) for item in v if isinstance(item, (str, int, float))]
    return []


def _as_entry_list(v: object) -> list[Any]:
    if v is None:
        return []
    if isinstance(v, Mapping):
        return list(v.values())
    return v if isinstance(v, list) else []


class _SectionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ScanSection(_SectionModel):
    """``SCAN``: identity of the scanned site."""

    site: list[str] = Field(default_factory=list, alias="SITE")
    domain: list[str] = Field(default_factory=list, alias="DOMAIN")
    ip: list[str] = Field(default_factory=list, alias="IP")
    hosting: list[str] = Field(default_factory=list, alias="HOSTING")
    cms: list[str] = Field(default_factory=list, alias="CMS")

    @field_validator("site", "domain", "ip", "hosting", "cms", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_str_list(v)


class SystemSection(_SectionModel):
    """``SYSTEM``: notices, informational messages, and service errors."""

    notice: list[str] = Field(default_factory=list, alias="NOTICE")
    info: list[str] = Field(default_factory=list, alias="INFO")
    error: list[str] = Field(default_factory=list, alias="ERROR")

    @field_validator("notice", "info", "error", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_str_list(v)


class WebAppSection(_SectionModel):
    """``WEBAPP``: detected application versions and warnings."""

    version: list[str] = Field(default_factory=list, alias="VERSION")
    warn: list[str] = Field(default_factory=list, alias="WARN")

    @field_validator("version", "warn", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_str_list(v)


class MalwareSection(_SectionModel):
    """``MALWARE``: each ``WARN`` entry is a two-part ``[alert, details]`` payload."""

    warn: list[Any] = Field(default_factory=list, alias="WARN")

    @field_validator("warn", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_entry_list(v)


class LinksSection(_SectionModel):
    """``LINKS``: resources referenced by the scanned pages."""

    url: list[str] = Field(default_factory=list, alias="URL")
    iframe: list[str] = Field(default_factory=list, alias="IFRAME")
    js_local: list[str] = Field(default_factory=list, alias="JSLOCAL")
    js_external: list[str] = Field(default_factory=list, alias="JSEXTERNAL")

    @field_validator("url", "iframe", "js_local", "js_external", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_str_list(v)


class BlacklistSection(RootModel[dict[str, list[Any]]]):
    """``BLACKLIST``: status key (``INFO``, ``WARN``) to ``[text, url]`` entries."""

    root: dict[str, list[Any]] = Field(default_factory=dict)

    @field_validator("root", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> dict[str, list[Any]]:
        if not isinstance(v, Mapping):
            return {}
        return {str(k): _as_entry_list(entries) for k, entries in v.items()}


class EntryListSection(RootModel[list[Any]]):
    """A bare list of positional entries (``RECOMMENDATIONS``, ``OUTDATEDSCAN``)."""

    root: list[Any] = Field(default_factory=list)

    @field_validator("root", mode="before")
    @classmethod
    def _coerce(cls, v: object) -> list[Any]:
        return _as_entry_list(v)


SECTION_MODELS: dict[Section, type[BaseModel]] = {
    Section.SCAN: ScanSection,
    Section.SYSTEM: SystemSection,
    Section.WEBAPP: WebAppSection,
    Section.MALWARE: MalwareSection,
    Section.BLACKLIST: BlacklistSection,
    Section.LINKS: LinksSection,
    Section.RECOMMENDATIONS: EntryListSection,
    Section.OUTDATEDSCAN: EntryListSection,
}


@dataclass(frozen=True)
class ScanDocument:
    """A decoded scan-service response with typed, defaulting section access."""

    raw: Mapping[str, Any] = field(default_factory=dict)
    _sections: dict[Section, BaseModel] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @classmethod
    def from_raw(cls, data: Mapping[str, Any] | None) -> ScanDocument:
        return cls(raw=dict(data) if data else {})

    @property
    def is_empty(self) -> bool:
        return not self.raw

    def has(self, section: Section) -> bool:
        """Return ``True`` if the service sent *section* at all."""
        return section.value in self.raw

    def section(self, section: Section) -> BaseModel:
        """Return the validated payload model for *section*.

        Absent sections and sections with an unexpected shape both yield
        the model's empty default.
        """
        cached = self._sections.get(section)
        if cached is not None:
            return cached

        model = SECTION_MODELS[section]
        payload = self.raw.get(section.value)
        try:
            if issubclass(model, RootModel):
                parsed = model.model_validate(payload)
            else:
                parsed = model.model_validate(payload if isinstance(payload, Mapping) else {})
        except ValidationError:
            logger.debug("Section %s has an unexpected shape; using defaults", section)
            parsed = model() if not issubclass(model, RootModel) else model.model_validate(None)
        self._sections[section] = parsed
        return parsed

    # Typed shortcuts

    @property
    def scan(self) -> ScanSection:
        return self.section(Section.SCAN)  # type: ignore[return-value]

    @property
    def system(self) -> SystemSection:
        return self.section(Section.SYSTEM)  # type: ignore[return-value]

    @property
    def webapp(self) -> WebAppSection:
        return self.section(Section.WEBAPP)  # type: ignore[return-value]

    @property
    def malware(self) -> MalwareSection:
        return self.section(Section.MALWARE)  # type: ignore[return-value]

    @property
    def blacklist(self) -> dict[str, list[Any]]:
        return self.section(Section.BLACKLIST).root  # type: ignore[attr-defined]

    @property
    def links(self) -> LinksSection:
        return self.section(Section.LINKS)  # type: ignore[return-value]

    @property
    def recommendations(self) -> list[Any]:
        return self.section(Section.RECOMMENDATIONS).root  # type: ignore[attr-defined]

    @property
    def outdated(self) -> list[Any]:
        return self.section(Section.OUTDATEDSCAN).root  # type: ignore[attr-defined]
