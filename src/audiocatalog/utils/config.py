"""Configuration helpers for drive-audio-catalog."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_PATH = Path("audiocatalog.yml")


class AppConfig(BaseModel):
    """Application level configuration."""

    root_id: Optional[str] = None
    output_path: Path = Field(default=Path("list.tsv"))
    credentials_path: Path = Field(default=Path("credentials.json"))
    token_path: Path = Field(default=Path("token.json"))
    page_size: int = Field(default=1000, ge=1, le=1000)
    order_by: str = "name asc"
    log_level: str = "INFO"


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
