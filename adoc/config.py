"""
Loading and validation of the adoc crawler configuration.
The schema is described with Pydantic, which also checks the values.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from adoc import __version__

DEFAULT_DOMAIN = "developer.apple.com"
DEFAULT_SEARCH_URL = "https://developer.apple.com/search/index.php?q={query}"


class CrawlerConfig(BaseModel):
    """Settings for one crawler instance. Never mutated during a crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_retries: int = Field(3, ge=0, description="Retries after the first attempt.")
    concurrency: int = Field(4, ge=1, description="Simultaneous in-flight fetches during fan-out.")
    timeout: float = Field(30.0, gt=0, description="Per-request timeout and retry budget (seconds).")
    domain: str = Field(DEFAULT_DOMAIN, min_length=1, description="Host links must belong to.")
    search_url: str = Field(DEFAULT_SEARCH_URL, description="Search endpoint, {query} is substituted.")
    user_agent: str = Field(f"adoc/{__version__}", min_length=1, description="User-Agent header.")

    initial_interval: float = Field(0.5, gt=0, description="First backoff delay (seconds).")
    multiplier: float = Field(1.5, ge=1, description="Backoff growth factor.")
    max_interval: float = Field(60.0, gt=0, description="Upper bound for one backoff delay.")
    randomization_factor: float = Field(0.5, ge=0, lt=1, description="Backoff jitter.")

    @field_validator("domain", mode="before")
    def _normalize_domain(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("search_url")
    def _check_placeholder(cls, v: str) -> str:
        if "{query}" not in v:
            raise ValueError("search_url must contain a {query} placeholder")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    Without a path the project default file is used when present, otherwise
    the built-in defaults. An explicit path that does not exist raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
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

    return CrawlerConfig(**data)


__all__ = ["CrawlerConfig", "ValidationError", "load_config"]
