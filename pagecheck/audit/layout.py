"""Responsive layout rules: no horizontal overflow at each viewport width."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Iterable

from playwright.async_api import async_playwright

from pagecheck.audit.constants import LAUNCH_GRACE_S, MEASURE_SCRIPT
from pagecheck.audit.types import LayoutMetrics, LayoutRule, RuleResult
from pagecheck.config import DEFAULT_HEIGHT
from pagecheck.exceptions import LayoutRenderFailure

logger = logging.getLogger("pagecheck.audit")

# (url, width) -> metrics
Measurer = Callable[[str, int], Awaitable[LayoutMetrics]]


class PlaywrightMeasurer:
    """Renders a page in a fresh headless Chromium per call and reads its geometry."""

    def __init__(
        self,
        height: int = DEFAULT_HEIGHT,
        wait_until: str = "networkidle",
        timeout_ms: float = 30000.0,
    ):
        self.height = height
        self.wait_until = wait_until
        self.timeout_ms = timeout_ms

    async def __call__(self, url: str, width: int) -> LayoutMetrics:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                page = await browser.new_page(viewport={"width": width, "height": self.height})
                await page.goto(url, wait_until=self.wait_until, timeout=self.timeout_ms)
                data = await page.evaluate(MEASURE_SCRIPT)
            finally:
                await browser.close()
        return LayoutMetrics(
            scroll_width=int(data["scrollWidth"]),
            inner_width=int(data["innerWidth"]),
        )


def layout_rules_for(widths: Iterable[int]) -> tuple[LayoutRule, ...]:
    """One rule per distinct width, ascending."""
    return tuple(LayoutRule(width=w) for w in sorted(set(widths)))


async def evaluate_layout_rule(
    rule: LayoutRule,
    url: str,
    measure: Measurer,
    lang: str = "en",
    deadline_s: float | None = None,
) -> RuleResult:
    """Render at one width. Errors and timeouts count as a failure for this width only."""
    label = rule.label(lang)
    try:
        metrics = await asyncio.wait_for(measure(url, rule.width), timeout=deadline_s)
    except Exception as e:
        reason = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
        failure = LayoutRenderFailure(rule.width, reason)
        logger.error("❌ Layout check errored: %s", failure)
        return RuleResult(label=label, passed=False, detail=str(failure))

    if not metrics.fits:
        detail = (
            f"scrollWidth={metrics.scroll_width}, innerWidth={metrics.inner_width}, "
            f"overflow={metrics.overflow}px"
        )
        logger.warning("⚠️  %dpx: %s", rule.width, detail)
        return RuleResult(label=label, passed=False, detail=detail)

    logger.debug("%dpx: scrollWidth=%d fits innerWidth=%d", rule.width, metrics.scroll_width, metrics.inner_width)
    return RuleResult(label=label, passed=True)


async def run_layout_rules(
    url: str,
    widths: Iterable[int],
    measure: Measurer,
    lang: str = "en",
    concurrency: int = 1,
    timeout_ms: float | None = None,
) -> list[RuleResult]:
    """
    Evaluate every width.

    Widths are independent; with ``concurrency`` > 1 up to that many
    browsers run at once. Results always come back in ascending width order.
    """
    rules = layout_rules_for(widths)
    deadline_s = timeout_ms / 1000 + LAUNCH_GRACE_S if timeout_ms else None

    if concurrency <= 1:
        return [await evaluate_layout_rule(r, url, measure, lang, deadline_s) for r in rules]

    sem = asyncio.Semaphore(concurrency)

    async def _bounded(rule: LayoutRule) -> RuleResult:
        async with sem:
            return await evaluate_layout_rule(rule, url, measure, lang, deadline_s)

    return list(await asyncio.gather(*(_bounded(r) for r in rules)))
