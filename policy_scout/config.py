# === FILE: policy_scout/config.py ===
"""
Loading and validation of the PolicyScout scraper configuration.
The schema is described with Pydantic; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

__all__ = ["ScraperConfig", "load_config"]


class ScraperConfig(BaseModel):
    """Settings for a single scraping run."""
    model_config = ConfigDict(extra="forbid")

    url: Optional[HttpUrl] = Field(None, description="Seed app-listing URL.")
    depth: int = Field(10, ge=0, description="Maximum traversal depth.")
    directory: Path = Field(Path("./data/"), description="Output directory.")
    filename: str = Field("policy.txt", min_length=1, description="Output file name.")
    append: bool = Field(False, description="Append to the output file instead of rewriting it.")

    settle_timeout: int = Field(2000, ge=0, description="Wait after opening the details panel (ms).")
    navigation_timeout: int = Field(30000, ge=0, description="Per-navigation timeout (ms), 0 disables it.")
    headless: bool = Field(True, description="Run the browser without a window.")
    viewport_width: int = Field(1366, gt=0)
    viewport_height: int = Field(768, gt=0)
    user_agent: Optional[str] = Field(None, min_length=1, description="User-Agent override.")
    skip_visited_pages: bool = Field(True, description="Never navigate the same app page twice in a run.")

    see_details_text: str = Field("See details", min_length=1)
    policy_link_text: str = Field("privacy policy", min_length=1)
    neighbor_labels: Tuple[str, ...] = Field(("Similar games", "Similar apps"), min_length=1)

    @field_validator("filename")
    def _plain_filename(cls, v: str) -> str:
        if Path(v).name != v:
            raise ValueError("filename must not contain a directory part")
        return v

    @property
    def output_path(self) -> Path:
        """Path of the policy file: ``directory / filename``."""
        return self.directory / self.filename


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None], **overrides: Any) -> ScraperConfig:
    """
    Read YAML or JSON and return a validated ScraperConfig.

    Without *path* the defaults are used. Keyword *overrides* whose value is
    not None replace values from the file. A missing file raises
    FileNotFoundError, an invalid schema raises pydantic.ValidationError.
    """
    data: Dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    data.update({k: v for k, v in overrides.items() if v is not None})

    return ScraperConfig(**data)
