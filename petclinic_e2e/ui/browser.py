"""
Browser session management on Playwright's async API
"""

import logging
from typing import List, Optional

import httpx
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright, Error as PlaywrightError

from petclinic_e2e.config import TestConfig, get_config

logger = logging.getLogger(__name__)


class BrowserUnavailableError(RuntimeError):
    """Browser binary could not be launched"""


class BrowserSession:
    """One browser process, a fresh context per test"""

    def __init__(self, config: Optional[TestConfig] = None):
        self.config = config or get_config()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    @property
    def started(self) -> bool:
        return self._browser is not None

    async def start(self) -> "BrowserSession":
        if self.started:
            return self

        self._playwright = await async_playwright().start()
        browser_type = getattr(self._playwright, self.config.browser)
        try:
            self._browser = await browser_type.launch(headless=self.config.headless)
        except PlaywrightError as e:
            await self._playwright.stop()
            self._playwright = None
            raise BrowserUnavailableError(f"Could not launch {self.config.browser}: {e}") from e

        logger.info("Launched %s (headless=%s)", self.config.browser, self.config.headless)
        return self

    async def new_page(self) -> Page:
        """Open an isolated context, like a fresh driver per test"""
        if not self.started:
            raise RuntimeError("BrowserSession.start() must be called first")

        context = await self._browser.new_context(base_url=self.config.ui_base_url)
        context.set_default_timeout(self.config.ui_timeout * 1000)
        self._contexts.append(context)
        return await context.new_page()

    async def close_page(self, page: Page) -> None:
        context = page.context
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    async def close(self) -> None:
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    async def __aenter__(self) -> "BrowserSession":
        return await self.start()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


async def frontend_reachable(config: TestConfig) -> bool:
    """Check that the Angular dev server answers at all"""
    try:
        async with httpx.AsyncClient(timeout=config.request_timeout) as client:
            response = await client.get(config.ui_base_url)
    except httpx.HTTPError as e:
        logger.warning("Frontend at %s unreachable: %s", config.ui_base_url, e)
        return False
    return response.status_code < 500
