# === FILE: site_indexer/config.py ===
"""
Loading and validation of the SiteIndexer configuration.
The schema is described and checked with Pydantic.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, field_validator

from site_indexer.parser.html_parser import NOISE_TAGS


class IndexerConfig(BaseModel):
    """Settings for one crawl or corpus rebuild."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    concurrency: int = Field(5, ge=1, description="Pages fetched concurrently per wave.")
    output_dir: Path = Field(Path("output"), description="Root directory for crawl output.")
    timeout: Optional[PositiveFloat] = Field(30.0, description="Per-request timeout in seconds; None disables it.")
    user_agent: str = Field("SiteIndexer/1.0", min_length=1, description="User-Agent header.")
    heading_style: Literal["ATX", "ATX_CLOSED", "SETEXT", "UNDERLINED"] = Field(
        "ATX", description="Markdown heading style."
    )
    noise_tags: tuple[str, ...] = Field(NOISE_TAGS, description="Elements removed before conversion.")

    @field_validator("noise_tags", mode="before")
    def _lowercase_tags(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(str(tag).strip().lower() for tag in v)
        return v


_DEFAULT_CFG = Path("configs/default.yaml")

_LOADERS = {
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".json": ("JSON", json.loads, json.JSONDecodeError),
}


def _read_mapping(path: Path) -> dict[str, Any]:
    """Parse *path* with the loader its suffix selects; the top level must be a mapping."""
    suffix = path.suffix.lower()
    if suffix not in _LOADERS:
        raise ValueError(f"Unsupported config format: {suffix}")
    kind, loads, error = _LOADERS[suffix]
    try:
        data = loads(path.read_text(encoding="utf-8")) or {}
    except error as exc:
        raise ValueError(f"Invalid {kind} in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of {kind} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> IndexerConfig:
    """
    Read a YAML or JSON file and return a validated IndexerConfig.
    Without a path, ``configs/default.yaml`` is used when present and the
    built-in defaults otherwise. An explicit path that does not exist raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return IndexerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    return IndexerConfig(**_read_mapping(path_obj))
