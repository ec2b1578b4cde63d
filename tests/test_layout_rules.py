"""Tests for the horizontal-overflow layout rules (browser replaced by a fake)."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pagecheck.audit.layout import PlaywrightMeasurer, evaluate_layout_rule, layout_rules_for, run_layout_rules
from pagecheck.audit.types import LayoutMetrics, LayoutRule

URL = "file:///tmp/site/index.html"


class TestLayoutRulesFor:
    def test_ascending_and_unique(self):
        rules = layout_rules_for([1440, 320, 768, 320])
        assert [r.width for r in rules] == [320, 768, 1440]

    def test_label(self):
        assert LayoutRule(320).label("en") == "320px no horizontal scroll"
        assert LayoutRule(768).label("zh") == "768px 無水平捲動"


class TestLayoutMetrics:
    def test_equal_fits(self):
        assert LayoutMetrics(320, 320).fits

    def test_overflow(self):
        m = LayoutMetrics(321, 320)
        assert not m.fits
        assert m.overflow == 1


@pytest.mark.asyncio
async def test_overflow_by_one_pixel_fails_and_logs(fake_measure, caplog):
    measure = fake_measure(scroll={320: 321}, inner={320: 320})
    with caplog.at_level(logging.WARNING, logger="pagecheck.audit"):
        result = await evaluate_layout_rule(LayoutRule(320), URL, measure)
    assert result.passed is False
    assert "overflow=1px" in result.detail
    assert "overflow=1px" in caplog.text


@pytest.mark.asyncio
async def test_scroll_equal_to_inner_passes(fake_measure):
    measure = fake_measure(scroll={320: 320}, inner={320: 320})
    result = await evaluate_layout_rule(LayoutRule(320), URL, measure)
    assert result.passed is True
    assert result.label == "320px no horizontal scroll"


@pytest.mark.asyncio
async def test_render_error_is_isolated_to_its_width(fake_measure, caplog):
    measure = fake_measure(errors={768: RuntimeError("Navigation failed")})
    results = await run_layout_rules(URL, [320, 768, 1440], measure)
    assert [r.passed for r in results] == [True, False, True]
    assert "Navigation failed" in results[1].detail
    assert "768px" in caplog.text
    assert [w for _, w in measure.calls] == [320, 768, 1440]


@pytest.mark.asyncio
async def test_hung_render_times_out_as_failure():
    async def hang(url, width):
        await asyncio.sleep(10)

    result = await evaluate_layout_rule(LayoutRule(320), URL, hang, deadline_s=0.01)
    assert result.passed is False
    assert "TimeoutError" in result.detail


@pytest.mark.asyncio
async def test_concurrent_results_keep_width_order():
    delays = {320: 0.05, 768: 0.0, 1440: 0.02}
    finished = []

    async def measure(url, width):
        await asyncio.sleep(delays[width])
        finished.append(width)
        return LayoutMetrics(width + (1 if width == 768 else 0), width)

    results = await run_layout_rules(URL, [1440, 320, 768], measure, concurrency=3)
    assert finished[0] == 768
    assert [r.label for r in results] == [
        "320px no horizontal scroll",
        "768px no horizontal scroll",
        "1440px no horizontal scroll",
    ]
    assert [r.passed for r in results] == [True, False, True]


@pytest.mark.asyncio
async def test_concurrency_is_bounded():
    active = 0
    peak = 0

    async def measure(url, width):
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0.01)
        active -= 1
        return LayoutMetrics(width, width)

    await run_layout_rules(URL, [320, 480, 768, 1024, 1440], measure, concurrency=2)
    assert peak == 2


# ─── Playwright Measurer ─────────────────────────────────────────────


@pytest.fixture
def browser_stub():
    """Stand-in for async_playwright() -> chromium -> browser -> page."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.evaluate = AsyncMock(return_value={"scrollWidth": 1500, "innerWidth": 1440})

    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    browser.close = AsyncMock()

    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=pw)
    manager.__aexit__ = AsyncMock(return_value=False)

    with patch("pagecheck.audit.layout.async_playwright", return_value=manager):
        yield pw, browser, page


class TestPlaywrightMeasurer:
    @pytest.mark.asyncio
    async def test_renders_with_viewport_and_settle_condition(self, browser_stub):
        pw, browser, page = browser_stub
        measure = PlaywrightMeasurer(height=900, wait_until="load", timeout_ms=5000)

        metrics = await measure(URL, 1440)

        assert metrics == LayoutMetrics(scroll_width=1500, inner_width=1440)
        assert metrics.overflow == 60
        pw.chromium.launch.assert_awaited_once_with(headless=True)
        browser.new_page.assert_awaited_once_with(viewport={"width": 1440, "height": 900})
        page.goto.assert_awaited_once_with(URL, wait_until="load", timeout=5000)
        page.evaluate.assert_awaited_once()
        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_browser_closed_when_navigation_fails(self, browser_stub):
        _, browser, page = browser_stub
        page.goto.side_effect = RuntimeError("net::ERR_FILE_NOT_FOUND")

        with pytest.raises(RuntimeError, match="ERR_FILE_NOT_FOUND"):
            await PlaywrightMeasurer()(URL, 320)

        browser.close.assert_awaited_once()
        page.evaluate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_browser_closed_when_measuring_fails(self, browser_stub):
        _, browser, page = browser_stub
        page.evaluate.side_effect = RuntimeError("Target closed")

        with pytest.raises(RuntimeError, match="Target closed"):
            await PlaywrightMeasurer()(URL, 768)

        browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_navigation_failure_becomes_failed_rule(self, browser_stub):
        _, browser, page = browser_stub
        page.goto.side_effect = RuntimeError("Timeout 30000ms exceeded")

        result = await evaluate_layout_rule(LayoutRule(320), URL, PlaywrightMeasurer())

        assert result.passed is False
        assert "Timeout 30000ms exceeded" in result.detail
        browser.close.assert_awaited_once()
