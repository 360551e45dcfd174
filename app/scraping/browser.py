"""
Playwright-backed page fetcher.
"""

from __future__ import annotations

import logging
from types import TracebackType

from playwright.sync_api import Browser, Playwright, sync_playwright

from app.scraping.base import PageFetcher
from app.scraping.config.models import CompetitorScanSettings
from app.scraping.logging_utils import log_event
from app.scraping.parsing import RenderedPage

logger = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class PlaywrightPageFetcher(PageFetcher):
    """
    Renders pages in headless Chromium, one browser context per fetch.

    Use as a context manager so the browser is closed when the run ends.
    """

    def __init__(self, *, settings: CompetitorScanSettings) -> None:
        self._settings = settings
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    def __enter__(self) -> "PlaywrightPageFetcher":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def start(self) -> None:
        if self._browser is not None:
            return
        self._playwright = sync_playwright().start()
        self._browser = self._playwright.chromium.launch(
            headless=self._settings.headless,
            args=BROWSER_ARGS,
        )
        log_event(logger, logging.INFO, "browser_launched", headless=self._settings.headless)

    def close(self) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
                log_event(logger, logging.INFO, "browser_closed")
        finally:
            self._browser = None
            if self._playwright is not None:
                self._playwright.stop()
                self._playwright = None

    def fetch(self, url: str, *, timeout_seconds: float) -> RenderedPage:
        if self._browser is None:
            raise RuntimeError("Browser is not started; use PlaywrightPageFetcher as a context manager.")

        context = self._browser.new_context(user_agent=self._settings.user_agent)
        try:
            page = context.new_page()
            page.goto(url, wait_until="networkidle", timeout=timeout_seconds * 1000)
            if self._settings.settle_delay_seconds > 0:
                page.wait_for_timeout(self._settings.settle_delay_seconds * 1000)
            return RenderedPage(url=page.url, html=page.content())
        finally:
            context.close()
