# policy_scout/driver/base.py
"""
Driver interface: what the traversal needs from a page-rendering backend.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, runtime_checkable

__all__ = ["NavigationResult", "PageDriver"]


@dataclass(slots=True)
class NavigationResult:
    """HTTP status of the main document (None if there was no response) and the loaded page."""

    url: str
    status: Optional[int]
    page: Any

    @property
    def ok(self) -> bool:
        return self.status == 200


@runtime_checkable
class PageDriver(Protocol):
    """Loads pages and evaluates XPath queries against the rendered DOM.

    Implementations raise :class:`policy_scout.errors.DriverError` on backend
    failures.
    """

    async def navigate(self, url: str) -> NavigationResult:
        """Load *url* and wait until the network settles."""
        ...

    async def query(self, page: Any, xpath: str) -> List[Any]:
        """Return element handles matching *xpath*, in document order."""
        ...

    async def attribute(self, element: Any, name: str) -> Optional[str]:
        """Return the resolved DOM property *name* of *element* (absolute for ``href``)."""
        ...

    async def click(self, element: Any) -> None:
        ...

    async def settle(self, page: Any, timeout_ms: int) -> None:
        """Wait a fixed interval for content revealed by a click to render."""
        ...
