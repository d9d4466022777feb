# File: policy_scout/traversal.py
"""policy_scout.traversal: depth-bounded walk over the related-app graph.

Nodes are app listing pages, edges are the links of their "Similar apps"
section. The walk is depth-first and left-to-right over discovery order. It is
driven by an explicit stack of ``(url, remaining_depth)`` items, so the call
stack does not grow with the depth budget.

Every edge is isolated: a failed navigation or extraction skips that neighbor
(and its subtree) and the walk continues with the next one. There are no
retries.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from policy_scout.driver.base import NavigationResult, PageDriver
from policy_scout.errors import BadConnectionError, DriverError, ExtractionError
from policy_scout.extractor import PolicyExtractor
from policy_scout.logger import get_logger
from policy_scout.models import TraversalStats
from policy_scout.neighbors import DEFAULT_LABELS, discover_neighbors
from policy_scout.store import VisitedSet
from policy_scout.utils import normalize_app_url

__all__ = ["PolicyTraversal", "navigate_checked"]

logger = get_logger("traversal")

_WorkItem = Tuple[str, int]


async def navigate_checked(driver: PageDriver, url: str) -> NavigationResult:
    """Navigate to *url*; raise BadConnectionError unless the status is 200."""
    logger.info("Navigating to %s", url)
    result = await driver.navigate(url)
    if not result.ok:
        logger.warning("Connection was unsuccessful")
        raise BadConnectionError(url, result.status)
    logger.info("Connection was successful")
    return result


class PolicyTraversal:
    """Collects policies from every app reachable within a depth budget."""

    def __init__(
        self,
        driver: PageDriver,
        extractor: PolicyExtractor,
        *,
        labels: Sequence[str] = DEFAULT_LABELS,
        skip_visited_pages: bool = True,
    ) -> None:
        self.driver = driver
        self.extractor = extractor
        self.labels = tuple(labels)
        self.skip_visited_pages = skip_visited_pages
        self.stats = TraversalStats()
        self._visited_pages: Dict[str, int] = {}

    def mark_page(self, url: str, remaining: int) -> bool:
        """Record a visit to *url* with *remaining* depth budget.

        False when the page was already reached with at least that budget,
        so a second visit could not reach anything new.
        """
        key = normalize_app_url(url)
        if self._visited_pages.get(key, -1) >= remaining:
            return False
        self._visited_pages[key] = remaining
        return True

    def record_policy(self, policy: str, visited: VisitedSet) -> bool:
        if visited.add(policy):
            self.stats.policies_added += 1
            logger.info("Adding policy: %s", policy)
            return True
        self.stats.policies_seen += 1
        logger.info("Policy has already been seen. Skipping")
        return False

    async def traverse(
        self,
        page: Any,
        visited: VisitedSet,
        depth: int,
        *,
        url: Optional[str] = None,
    ) -> TraversalStats:
        """Walk the neighbors of the loaded *page* up to *depth* levels deep.

        *visited* is mutated in place. The policy of *page* itself is not
        extracted here. *url*, when given, marks the starting page as already
        navigated with the full *depth*.
        """
        if depth < 0:
            raise ValueError("depth must be >= 0")
        if depth == 0:
            return self.stats
        if url is not None:
            self.mark_page(url, depth)

        stack: List[_WorkItem] = []
        await self._push_neighbors(page, depth, stack)

        while stack:
            next_url, remaining = stack.pop()
            if self.skip_visited_pages and not self.mark_page(next_url, remaining):
                self.stats.pages_skipped += 1
                logger.debug("Already visited %s with depth >= %d. Skipping", next_url, remaining)
                continue

            self.stats.navigations += 1
            try:
                result = await navigate_checked(self.driver, next_url)
            except (BadConnectionError, DriverError) as exc:
                self.stats.failed_navigations += 1
                logger.warning("Skipping %s: %s", next_url, exc)
                continue

            try:
                policy = await self.extractor.extract_or_raise(result.page)
            except ExtractionError as exc:
                self.stats.failed_extractions += 1
                logger.warning("Something went wrong on %s (%s). Skipping", next_url, exc)
                continue

            if policy is not None:
                self.record_policy(policy, visited)

            if remaining > 0:
                await self._push_neighbors(result.page, remaining, stack)

        return self.stats

    async def _push_neighbors(self, page: Any, depth: int, stack: List[_WorkItem]) -> None:
        try:
            apps = await discover_neighbors(self.driver, page, self.labels)
        except DriverError as exc:
            logger.warning("Could not read related apps: %s", exc)
            return
        # reversed, so the first discovered app is popped first
        stack.extend((app, depth - 1) for app in reversed(apps))
