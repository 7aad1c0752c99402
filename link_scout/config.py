"""
Loading and validation of the LinkScout scan configuration.
Pydantic describes the schema; settings can come from a YAML or JSON file
and be overridden from the command line.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

DEFAULT_USER_AGENTS: List[str] = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_4) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.4 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64; rv:125.0) Gecko/20100101 Firefox/125.0",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36 Edg/124.0.0.0",
]


_HTTP_URL = TypeAdapter(HttpUrl)


class ScannerConfig(BaseModel):
    """Settings for a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(..., description="URL the crawl starts from, kept as given.")
    concurrency: int = Field(4, ge=1, description="Pages fetched in parallel per batch.")
    timeout: float = Field(10.0, gt=0, description="Timeout for a single request (seconds).")
    user_agents: List[str] = Field(
        default_factory=lambda: list(DEFAULT_USER_AGENTS),
        min_length=1,
        description="User-Agent headers picked at random per request.",
    )
    report_file: Optional[Path] = Field(
        Path("report.txt"), description="Text report destination; None for console only."
    )

    @field_validator("base_url")
    def _check_http_url(cls, v: str) -> str:
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError as exc:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {v!r}") from exc
        return v

    @field_validator("user_agents")
    def _no_blank_agents(cls, v: List[str]) -> List[str]:
        if any(not ua.strip() for ua in v):
            raise ValueError("user_agents must not contain blank entries")
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


def read_config_file(path: Union[str, Path, None]) -> dict[str, Any]:
    """
    Read raw settings from a YAML or JSON file.

    With no *path* the default ``configs/default.yaml`` is used if present,
    otherwise an empty mapping is returned. An explicit missing path raises
    FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> ScannerConfig:
    """
    Build a validated ScannerConfig from an optional file plus overrides.

    Overrides whose value is None are ignored, so unset CLI options never
    mask file values.
    """
    data = read_config_file(path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ScannerConfig(**data)
