# File: policy_scout/engine.py
"""policy_scout.engine: orchestration of a run.

:func:`search_for_policies` works on an already loaded seed page;
:func:`start_scan` owns the browser session and the seed navigation.
"""

from __future__ import annotations

from typing import Any, Callable

from policy_scout.config import ScraperConfig
from policy_scout.driver.base import PageDriver
from policy_scout.driver.playwright_driver import PlaywrightDriver
from policy_scout.extractor import PolicyExtractor
from policy_scout.logger import get_logger
from policy_scout.models import RunResult
from policy_scout.store import PersistMode, VisitedSet, load_visited_policies, persist_policies
from policy_scout.traversal import PolicyTraversal, navigate_checked

__all__ = ["search_for_policies", "start_scan"]

logger = get_logger("engine")


async def search_for_policies(
    driver: PageDriver,
    page: Any,
    config: ScraperConfig,
    *,
    seed_url: str | None = None,
) -> RunResult:
    """Collect policies starting from the loaded *page* and persist them.

    In append mode the existing store is loaded first and written back in
    append mode; otherwise the run starts empty and replaces the file.
    """
    output = config.output_path
    visited = load_visited_policies(output) if config.append else VisitedSet()

    extractor = PolicyExtractor.from_config(driver, config)
    traversal = PolicyTraversal(
        driver,
        extractor,
        labels=config.neighbor_labels,
        skip_visited_pages=config.skip_visited_pages,
    )

    seed_policy = await extractor.extract(page)
    if seed_policy is not None:
        traversal.record_policy(seed_policy, visited)

    stats = await traversal.traverse(page, visited, config.depth, url=seed_url)

    mode = PersistMode.APPEND if config.append else PersistMode.REPLACE
    persist_policies(visited, output, mode)
    logger.info(
        "Run finished: %d policies (%d new), %d navigations, %d failed",
        len(visited),
        stats.policies_added,
        stats.navigations,
        stats.failed_navigations,
    )
    return RunResult(policies=visited, output_path=output, stats=stats)


async def start_scan(
    config: ScraperConfig,
    driver_factory: Callable[[ScraperConfig], Any] = PlaywrightDriver,
) -> RunResult:
    """Open the browser, load the seed URL and run :func:`search_for_policies`.

    A non-200 answer for the seed page raises BadConnectionError and aborts the run.
    """
    if config.url is None:
        raise ValueError("A seed URL is required")
    seed_url = str(config.url)
    logger.info("Starting scan from %s (depth %d)", seed_url, config.depth)

    async with driver_factory(config) as driver:
        result = await navigate_checked(driver, seed_url)
        return await search_for_policies(driver, result.page, config, seed_url=seed_url)
