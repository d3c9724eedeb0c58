# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for per-render scan orchestration."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from sitecheck.core.constants import CACHE_KEY, CACHE_NAMESPACE, ScanState
from sitecheck.core.exceptions import ApplicationError, TransportError
from sitecheck.gateway.client import BASE_URL, SiteCheckClient
from sitecheck.report.normalizer import ReportNormalizer
from sitecheck.scanner.collaborators import (
    CollectingErrorReporter,
    ErrorReporter,
    SettingsSiteIdentity,
    SiteIdentity,
    normalize_domain,
)
from sitecheck.scanner.orchestrator import ScanOrchestrator, scan_cache_key


@pytest.fixture
def reporter() -> CollectingErrorReporter:
    return CollectingErrorReporter()


@pytest.fixture
def build(settings, cache_store, reporter):
    def _build(client, override_domain=None, **kwargs) -> ScanOrchestrator:
        return ScanOrchestrator(
            settings=kwargs.pop("settings", settings),
            cache=cache_store,
            client=client,
            reporter=reporter,
            override_domain=override_domain,
            **kwargs,
        )

    return _build


class TestNormalizeDomain:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("example.com", "example.com"),
            ("https://Example.com/blog?x=1", "example.com"),
            ("  http://shop.example.org#top ", "shop.example.org"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, value, expected) -> None:
        assert normalize_domain(value) == expected

    def test_cache_keys(self) -> None:
        assert scan_cache_key() == CACHE_KEY
        assert scan_cache_key("") == CACHE_KEY
        assert scan_cache_key("https://Other.example/x") == f"{CACHE_KEY}:other.example"

    def test_collaborators_satisfy_protocols(self, settings, reporter) -> None:
        assert isinstance(reporter, ErrorReporter)
        assert isinstance(SettingsSiteIdentity(settings), SiteIdentity)


class TestSingleScanPerRender:
    async def test_cold_cache_many_widgets_one_request(self, build, make_client) -> None:
        client = make_client()
        normalizer = ReportNormalizer(build(client))

        await normalizer.details()
        await normalizer.malware()
        await normalizer.blacklist()
        await normalizer.recommendations()
        await normalizer.iframes()
        await normalizer.links()
        await normalizer.scripts()

        assert client.calls == [("example.com", True)]

    async def test_full_report_issues_one_request(self, build, make_client) -> None:
        client = make_client()
        orch = build(client)
        report = await ReportNormalizer(orch).full_report()
        assert len(client.calls) == 1
        assert report.scanned is True
        assert report.target == "example.com"
        assert report.malware.infected is True
        assert report.details.platform_version == "6.4.2"
        assert orch.state is ScanState.SUCCESS

    async def test_result_written_to_cache(self, build, make_client, cache_store, scan_data) -> None:
        await build(make_client()).scan_and_collect()
        cached = await cache_store.get(CACHE_NAMESPACE, CACHE_KEY, 1200)
        assert cached == scan_data

    async def test_force_fresh_flag_follows_settings(self, build, make_client, settings) -> None:
        client = make_client()
        stale_ok = settings.model_copy(update={"scan_force_fresh": False})
        await build(client, settings=stale_ok).scan_and_collect()
        assert client.calls == [("example.com", False)]


class TestCacheFreshness:
    async def test_hit_within_lifetime(self, build, make_client, clock) -> None:
        first = make_client()
        await build(first).scan_and_collect()

        clock.advance(1199)
        second = make_client()
        orch = build(second)
        doc = await orch.scan_and_collect()

        assert doc is not None
        assert doc.scan.domain == ["example.com"]
        assert second.calls == []
        assert orch.state is ScanState.CACHE_HIT
        assert orch.attempts == 0

    async def test_cache_read_once_per_render(self, build, make_client, cache_store) -> None:
        await build(make_client()).scan_and_collect()
        normalizer = ReportNormalizer(build(make_client()))

        await normalizer.full_report()

        assert cache_store.stats.hits == 1

    async def test_expired_after_lifetime(self, build, make_client, clock) -> None:
        await build(make_client()).scan_and_collect()

        clock.advance(1200)
        client = make_client()
        await build(client).scan_and_collect()
        assert len(client.calls) == 1

    async def test_empty_cached_document_is_a_miss(self, build, make_client, cache_store) -> None:
        await cache_store.set(CACHE_NAMESPACE, CACHE_KEY, {})
        client = make_client()
        await build(client).scan_and_collect()
        assert len(client.calls) == 1

    async def test_cached_value_of_wrong_type_is_a_miss(self, build, make_client, cache_store) -> None:
        await cache_store.set(CACHE_NAMESPACE, CACHE_KEY, ["not", "a", "document"])
        client = make_client()
        doc = await build(client).scan_and_collect()
        assert doc is not None
        assert len(client.calls) == 1

    async def test_cache_backend_failure_falls_through_to_scan(self, build, make_client, cache_store) -> None:
        cache_store.get = AsyncMock(side_effect=OSError("disk gone"))
        cache_store.set = AsyncMock(side_effect=OSError("disk gone"))
        client = make_client()
        orch = build(client)

        doc = await orch.scan_and_collect()

        assert doc is not None
        assert len(client.calls) == 1
        assert orch.state is ScanState.SUCCESS


class TestOverrideDomain:
    async def test_override_skips_cache_read(self, build, make_client, cache_store) -> None:
        await build(make_client()).scan_and_collect()

        client = make_client()
        orch = build(client, override_domain="https://Other.example/")
        await orch.scan_and_collect()

        assert orch.is_override
        assert orch.target == "other.example"
        assert client.calls == [("other.example", True)]

    async def test_override_does_not_replace_default_entry(
        self, build, make_client, cache_store, scan_data
    ) -> None:
        other = dict(scan_data, SCAN={"DOMAIN": ["other.example"]})
        await build(make_client(result=other), override_domain="other.example").scan_and_collect()

        assert await cache_store.get(CACHE_NAMESPACE, CACHE_KEY, 1200) is None
        stored = await cache_store.get(CACHE_NAMESPACE, f"{CACHE_KEY}:other.example", 1200)
        assert stored["SCAN"]["DOMAIN"] == ["other.example"]

    async def test_override_render_is_consistent_across_widgets(self, build, make_client) -> None:
        client = make_client()
        normalizer = ReportNormalizer(build(client, override_domain="other.example"))

        first = await normalizer.links()
        second = await normalizer.links()

        assert first.count == second.count == 2
        assert len(client.calls) == 1


class TestFailureShortCircuit:
    async def test_failure_reported_once(self, build, make_client, reporter) -> None:
        client = make_client(error=TransportError("scan of example.com timed out after 60s"))
        orch = build(client)
        normalizer = ReportNormalizer(orch)

        report = await normalizer.full_report()

        assert len(client.calls) == 1
        assert reporter.messages == ["SiteCheck error: scan of example.com timed out after 60s"]
        assert orch.state is ScanState.FAILED
        assert orch.attempts == 1
        assert orch.last_error == "scan of example.com timed out after 60s"
        assert report.scanned is False
        assert report.malware.infected is False
        assert report.links.count == 0

    async def test_later_calls_return_none_without_request(self, build, make_client) -> None:
        client = make_client(error=ApplicationError("Unable to properly scan your site."))
        orch = build(client)

        assert await orch.scan_and_collect() is None
        assert await orch.scan_and_collect() is None
        assert await orch.scan_and_collect() is None
        assert len(client.calls) == 1

    async def test_failure_writes_nothing_to_cache(self, build, make_client, cache_store) -> None:
        await build(make_client(error=ApplicationError("HTTP 503: down"))).scan_and_collect()
        assert await cache_store.size() == 0

    async def test_new_render_tries_again(self, build, make_client) -> None:
        await build(make_client(error=TransportError("boom"))).scan_and_collect()

        client = make_client()
        doc = await build(client).scan_and_collect()
        assert doc is not None
        assert len(client.calls) == 1

    async def test_attempt_ceiling_is_configurable(self, build, make_client, settings, reporter) -> None:
        retrying = settings.model_copy(update={"max_scan_attempts": 2})
        client = make_client(error=TransportError("boom"))
        orch = build(client, settings=retrying)

        for _ in range(4):
            await orch.scan_and_collect()

        assert len(client.calls) == 2
        assert len(reporter.messages) == 2

    @respx.mock
    async def test_undecodable_response_degrades_to_defaults(self, build, reporter) -> None:
        respx.get(BASE_URL).mock(side_effect=httpx.DecodingError("bad gzip"))
        orch = build(SiteCheckClient())

        report = await ReportNormalizer(orch).full_report()

        assert report.scanned is False
        assert report.malware.title == "Site is Clean"
        assert len(reporter.messages) == 1
        assert "bad gzip" in reporter.messages[0]
        assert orch.state is ScanState.FAILED

    @respx.mock
    async def test_redirected_service_still_scans(self, build, reporter, scan_data) -> None:
        moved = "https://sitecheck.sucuri.net/scan/"
        respx.get(BASE_URL).mock(return_value=httpx.Response(302, headers={"Location": moved}))
        respx.get(moved).mock(return_value=httpx.Response(200, json=scan_data))
        orch = build(SiteCheckClient())

        doc = await orch.scan_and_collect()

        assert doc is not None
        assert reporter.messages == []
        assert orch.attempts == 1
