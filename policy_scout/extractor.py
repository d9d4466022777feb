# policy_scout/extractor.py
"""
Privacy-policy link extraction from an app listing page.

The listing hides the developer's policy link behind the "See details" control
of the data-safety section: the control is clicked, a fixed settle interval is
awaited, and the "privacy policy" anchor is read. The settle interval is a
timing heuristic; on slow connections the panel may not be rendered yet and
the page is reported as having no policy.
"""
from __future__ import annotations

from typing import Any, Optional

from policy_scout.config import ScraperConfig
from policy_scout.driver.base import PageDriver
from policy_scout.errors import ExtractionError
from policy_scout.logger import get_logger
from policy_scout.utils import xpath_literal

__all__ = ["PolicyExtractor"]

logger = get_logger("extractor")


class PolicyExtractor:
    """Finds the privacy-policy URL declared on a loaded page."""

    def __init__(
        self,
        driver: PageDriver,
        *,
        settle_timeout: int = 2000,
        see_details_text: str = "See details",
        policy_link_text: str = "privacy policy",
    ) -> None:
        self.driver = driver
        self.settle_timeout = settle_timeout
        self.see_details_xpath = f"//span[text()={xpath_literal(see_details_text)}]"
        self.policy_link_xpath = f"//a[text()={xpath_literal(policy_link_text)}]"

    @classmethod
    def from_config(cls, driver: PageDriver, config: ScraperConfig) -> PolicyExtractor:
        return cls(
            driver,
            settle_timeout=config.settle_timeout,
            see_details_text=config.see_details_text,
            policy_link_text=config.policy_link_text,
        )

    async def extract(self, page: Any) -> Optional[str]:
        """Return the policy URL, or None when the page declares none or cannot be read."""
        try:
            return await self.extract_or_raise(page)
        except ExtractionError as exc:
            logger.warning("Could not read policy: %s", exc)
            return None

    async def extract_or_raise(self, page: Any) -> Optional[str]:
        """Like :meth:`extract`, but a failure raises ExtractionError instead of returning None."""
        try:
            return await self._extract(page)
        except Exception as exc:
            raise ExtractionError(f"{type(exc).__name__}: {exc}") from exc

    async def _extract(self, page: Any) -> Optional[str]:
        see_details = await self.driver.query(page, self.see_details_xpath)
        if not see_details:
            logger.info("Could not find policy. Skipping")
            return None

        await self.driver.click(see_details[0])
        await self.driver.settle(page, self.settle_timeout)

        links = await self.driver.query(page, self.policy_link_xpath)
        if not links:
            logger.info("Could not find policy. Skipping")
            return None

        policy = await self.driver.attribute(links[0], "href")
        if policy is None:
            logger.info("Could not find policy. Skipping")
        return policy
