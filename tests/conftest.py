# File: tests/conftest.py
from __future__ import annotations

import pytest

from fakes import SEED_URL
from policy_scout.config import ScraperConfig


@pytest.fixture()
def base_config(tmp_path) -> ScraperConfig:
    """
    Config writing into a temporary directory, without settle delay.
    """
    return ScraperConfig(
        url=SEED_URL,
        depth=1,
        directory=tmp_path / "data",
        filename="policy.txt",
        settle_timeout=0,
    )
