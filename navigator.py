"""
LEADSCOUT — Playwright Navigator
Fetches and renders pages, handing the extraction core read-only snapshots.
Timeouts and navigation failures are raised to the caller; nothing is retried.
"""

import logging
import time
from typing import Optional

from playwright.async_api import async_playwright, Browser, Page

from adapters.base import PageSnapshot
from adapters.snapshot import build_snapshot

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Scroll 500px every 200ms, stopping at page end or 5000px
AUTO_SCROLL_JS = """
async () => {
    await new Promise((resolve) => {
        let total = 0;
        const distance = 500;
        const timer = setInterval(() => {
            const height = document.body.scrollHeight;
            window.scrollBy(0, distance);
            total += distance;
            if (total >= height || total >= 5000) {
                clearInterval(timer);
                resolve();
            }
        }, 200);
    });
}
"""


class PlaywrightNavigator:
    """
    One headless Chromium shared by all fetches of a run.

    Usage:
        async with PlaywrightNavigator(timeout_ms=30000) as nav:
            snapshot = await nav.snapshot("https://acme.com")
    """

    def __init__(self, headless: bool = True, timeout_ms: int = 30000, settle_ms: int = 1000):
        self.headless = headless
        self.timeout_ms = timeout_ms
        self.settle_ms = settle_ms
        self._playwright = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self):
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self.headless)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

    async def _open(self, url: str, wait_until: str = "domcontentloaded"):
        if self._browser is None:
            raise RuntimeError("PlaywrightNavigator used outside 'async with'")
        ctx = await self._browser.new_context(user_agent=USER_AGENT)
        page: Page = await ctx.new_page()
        started = time.monotonic()
        try:
            await page.goto(url, wait_until=wait_until, timeout=self.timeout_ms)
        except Exception:
            await ctx.close()
            raise
        load_time_ms = int((time.monotonic() - started) * 1000)
        await page.wait_for_timeout(self.settle_ms)
        return ctx, page, load_time_ms

    async def snapshot(self, url: str) -> PageSnapshot:
        """Render a page and capture it as a PageSnapshot."""
        logger.info(f"  🌐 Visiting {url}")
        ctx, page, load_time_ms = await self._open(url)
        try:
            html = await page.content()
            return build_snapshot(page.url or url, html, load_time_ms)
        finally:
            await ctx.close()

    async def render(self, url: str, scroll: bool = False) -> str:
        """Rendered HTML of a listing page, auto-scrolled to load lazy results."""
        logger.info(f"  🔎 Searching: {url}")
        ctx, page, _ = await self._open(url, wait_until="networkidle")
        try:
            if scroll:
                await page.evaluate(AUTO_SCROLL_JS)
                await page.wait_for_timeout(self.settle_ms)
            return await page.content()
        finally:
            await ctx.close()
