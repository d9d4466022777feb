# File: policy_scout/utils.py
"""policy_scout.utils: URL normalization and XPath helpers."""

from __future__ import annotations

from typing import Sequence
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from policy_scout.logger import get_logger

__all__: Sequence[str] = (
    "normalize_app_url",
    "xpath_literal",
)

logger = get_logger("utils")


def normalize_app_url(url: str) -> str:
    """Canonical key of an app page: lowercase scheme/host, sorted query, no fragment.

    Query values are kept, so ``?id=a&hl=en`` and ``?hl=en&id=a`` collapse while
    different ``id`` values stay distinct.
    """
    parsed = urlparse(url.strip())
    path = parsed.path.rstrip("/") or "/"
    query = urlencode(sorted(parse_qsl(parsed.query, keep_blank_values=True)))
    normalized = urlunparse((parsed.scheme.lower(), parsed.netloc.lower(), path, "", query, ""))
    logger.debug("Normalized URL: %s -> %s", url, normalized)
    return normalized


def xpath_literal(text: str) -> str:
    """Quote *text* as an XPath 1.0 string literal."""
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = ", '\"', ".join(f'"{chunk}"' for chunk in text.split('"'))
    return f"concat({parts})"
