# policy_scout/driver/playwright_driver.py
"""
Playwright-backed page driver: one Chromium page reused for the whole run.
"""
from __future__ import annotations

from typing import Any, List, Optional

from playwright.async_api import Browser, BrowserContext, ElementHandle, Page, Playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from policy_scout.config import ScraperConfig
from policy_scout.driver.base import NavigationResult
from policy_scout.errors import DriverError
from policy_scout.logger import get_logger

__all__ = ["PlaywrightDriver"]

logger = get_logger("driver")


class PlaywrightDriver:
    """Async context manager owning the browser session.

    ``wait_until="networkidle"`` is used for every navigation.
    """

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> PlaywrightDriver:
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self.config.headless)
            context_args: dict[str, Any] = {
                "viewport": {
                    "width": self.config.viewport_width,
                    "height": self.config.viewport_height,
                },
            }
            if self.config.user_agent:
                context_args["user_agent"] = self.config.user_agent
            self._context = await self._browser.new_context(**context_args)
            self._page = await self._context.new_page()
            self._page.set_default_navigation_timeout(self.config.navigation_timeout)
        except PlaywrightError as exc:
            await self.close()
            raise DriverError(f"Could not start browser: {exc}") from exc
        logger.debug("Browser started (headless=%s)", self.config.headless)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release page, context, browser and the Playwright process."""
        try:
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
        except PlaywrightError as exc:
            logger.debug("Error while closing browser: %s", exc)
        finally:
            if self._playwright is not None:
                await self._playwright.stop()
            self._playwright = self._browser = self._context = self._page = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise DriverError("Browser session is not started")
        return self._page

    async def navigate(self, url: str) -> NavigationResult:
        page = self.page
        try:
            response = await page.goto(url, wait_until="networkidle")
        except PlaywrightError as exc:
            raise DriverError(f"Navigation to {url} failed: {exc}") from exc
        status = response.status if response is not None else None
        return NavigationResult(url=url, status=status, page=page)

    async def query(self, page: Page, xpath: str) -> List[ElementHandle]:
        try:
            return await page.query_selector_all(f"xpath={xpath}")
        except PlaywrightError as exc:
            raise DriverError(f"Query {xpath!r} failed: {exc}") from exc

    async def attribute(self, element: ElementHandle, name: str) -> Optional[str]:
        try:
            handle = await element.get_property(name)
            value = await handle.json_value()
        except PlaywrightError as exc:
            raise DriverError(f"Reading property {name!r} failed: {exc}") from exc
        return value if isinstance(value, str) and value else None

    async def click(self, element: ElementHandle) -> None:
        try:
            await element.click()
        except PlaywrightError as exc:
            raise DriverError(f"Click failed: {exc}") from exc

    async def settle(self, page: Page, timeout_ms: int) -> None:
        try:
            await page.wait_for_timeout(timeout_ms)
        except PlaywrightError as exc:
            raise DriverError(f"Waiting {timeout_ms} ms failed: {exc}") from exc
