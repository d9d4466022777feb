# policy_scout/neighbors.py
"""
Discovery of related-app links ("Similar apps" / "Similar games") on a listing page.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from policy_scout.driver.base import PageDriver
from policy_scout.logger import get_logger
from policy_scout.utils import xpath_literal

__all__ = ["APP_DETAILS_PATH", "DEFAULT_LABELS", "neighbor_xpath", "discover_neighbors"]

logger = get_logger("neighbors")

APP_DETAILS_PATH = "/store/apps/details?id"
DEFAULT_LABELS: Sequence[str] = ("Similar games", "Similar apps")


def neighbor_xpath(labels: Sequence[str] = DEFAULT_LABELS) -> str:
    """XPath of app links inside the section whose heading span matches one of *labels*."""
    condition = " or ".join(f"text()={xpath_literal(label)}" for label in labels)
    # the heading span sits five levels below the section container
    return (
        f"//span[{condition}]"
        f"/../../../../..//a[contains(@href, {xpath_literal(APP_DETAILS_PATH)})]"
    )


async def discover_neighbors(
    driver: PageDriver,
    page: Any,
    labels: Sequence[str] = DEFAULT_LABELS,
) -> List[str]:
    """
    Return related-app URLs found on *page*, in document order.

    Duplicates are kept; an empty list means the page has no related section.
    """
    elements = await driver.query(page, neighbor_xpath(labels))
    if not elements:
        return []

    apps: List[str] = []
    for element in elements:
        href = await driver.attribute(element, "href")
        if href:
            apps.append(href)
    logger.debug("Found %d related apps", len(apps))
    return apps
