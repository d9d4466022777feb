# policy_scout/models.py
"""
Data models for a PolicyScout run.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict

from policy_scout.store import VisitedSet


@dataclass(slots=True)
class TraversalStats:
    """Counters collected while walking the related-app graph."""

    navigations: int = 0
    failed_navigations: int = 0
    failed_extractions: int = 0
    policies_added: int = 0
    policies_seen: int = 0
    pages_skipped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(slots=True)
class RunResult:
    """Outcome of one run: the final policy set, where it went, and the counters."""

    policies: VisitedSet
    output_path: Path
    stats: TraversalStats = field(default_factory=TraversalStats)

    def summary(self) -> Dict[str, Any]:
        return {
            "output": str(self.output_path),
            "policies": len(self.policies),
            **self.stats.as_dict(),
        }
