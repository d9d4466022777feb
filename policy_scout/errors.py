"""Exception types raised by PolicyScout."""
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

__all__ = ["PolicyScoutError", "BadConnectionError", "DriverError", "ExtractionError", "reason_phrase"]


def reason_phrase(status: Optional[int]) -> str:
    """Return the standard reason phrase for *status*, or ``"Unknown"``."""
    if status is None:
        return "No Response"
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Unknown"


class PolicyScoutError(Exception):
    """Base class for all PolicyScout errors."""


class BadConnectionError(PolicyScoutError):
    """Navigation answered with an unexpected HTTP status."""

    def __init__(self, url: str, actual: Optional[int], expected: int = HTTPStatus.OK) -> None:
        self.url = url
        self.expected = int(expected)
        self.actual = actual
        super().__init__(
            f"Status expected HTTP {self.expected} {reason_phrase(self.expected)}, "
            f"but was HTTP {actual if actual is not None else '-'} {reason_phrase(actual)}"
        )


class DriverError(PolicyScoutError):
    """The page driver failed to load a page or evaluate a query."""


class ExtractionError(PolicyScoutError):
    """Reading the policy link of a loaded page failed."""
