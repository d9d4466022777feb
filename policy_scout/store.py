# File: policy_scout/store.py
"""policy_scout.store: the visited-policy set and its plain-text storage.

The file format is one policy URL per line, joined with ``"\\n"``, without a
header or escaping.
"""
from __future__ import annotations

import enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, Union

from policy_scout.logger import get_logger

__all__ = ["VisitedSet", "PersistMode", "load_visited_policies", "persist_policies"]

logger = get_logger("store")

STORE_SUFFIX = ".txt"


class VisitedSet:
    """Insertion-ordered set of policy URLs compared by exact string equality."""

    __slots__ = ("_items",)

    def __init__(self, urls: Iterable[str] = ()) -> None:
        self._items: Dict[str, None] = dict.fromkeys(urls)

    def add(self, url: str) -> bool:
        """Insert *url*; return False when it was already present."""
        if url in self._items:
            return False
        self._items[url] = None
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VisitedSet):
            return self._items.keys() == other._items.keys()
        if isinstance(other, (set, frozenset)):
            return self._items.keys() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"VisitedSet({list(self._items)!r})"


class PersistMode(enum.Enum):
    REPLACE = "replace"
    APPEND = "append"


def _read_lines(path: Path) -> list[str]:
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line]


def load_visited_policies(path: Union[str, Path]) -> VisitedSet:
    """Load previously recorded policies from *path*.

    A path without the ``.txt`` suffix or a missing file yields an empty set.
    Blank lines are skipped.
    """
    p = Path(path)
    if p.suffix != STORE_SUFFIX:
        logger.warning("Could not parse file %s, starting with an empty set", p)
        return VisitedSet()
    if not p.exists():
        logger.info("No existing data at %s", p)
        return VisitedSet()
    policies = VisitedSet(_read_lines(p))
    logger.info("Loaded %d policies from %s", len(policies), p)
    return policies


def persist_policies(
    policies: Iterable[str],
    path: Union[str, Path],
    mode: PersistMode = PersistMode.REPLACE,
) -> Path:
    """Write *policies* to *path* and return the path.

    ``REPLACE`` rewrites the file. ``APPEND`` adds only the entries the file
    does not already hold, so the file read back is the union of both.
    The parent directory is created when missing.
    """
    p = Path(path)
    directory = p.parent
    if directory.exists():
        logger.info("%s was found", directory)
    else:
        directory.mkdir(parents=True, exist_ok=True)
        logger.info("%s was created successfully", directory)

    logger.info("Started writing data to %s", p)
    if mode is PersistMode.APPEND and p.exists():
        existing = p.read_text(encoding="utf-8")
        known = set(existing.splitlines())
        fresh = [url for url in policies if url not in known]
        if fresh:
            separator = "\n" if existing and not existing.endswith("\n") else ""
            with p.open("a", encoding="utf-8") as fh:
                fh.write(separator + "\n".join(fresh))
        logger.info("Finished writing data (%d new entries)", len(fresh))
        return p

    entries = list(policies)
    p.write_text("\n".join(entries), encoding="utf-8")
    logger.info("Finished writing data (%d entries)", len(entries))
    return p
