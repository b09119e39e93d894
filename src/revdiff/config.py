"""Application configuration: settings schema and revdiff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "revdiff.yaml"


class Settings(BaseModel):
    app_name:     str = "revdiff"
    db_url:       str = "sqlite:///revdiff.db"
    context:      int = Field(default=3,          ge=0, description="Unchanged lines kept around each change in unified output")
    max_cells:    int = Field(default=25_000_000, ge=0, description="Max LCS table cells per diff; 0 = unlimited")
    max_versions: int = Field(default=10,         ge=0, description="Max stored versions per doc; 0 disables pruning")
    log_level:    str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    json_logs:    bool = Field(default=False,     description="Render log records as JSON instead of console text")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from revdiff.yaml, then REVDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"REVDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    if isinstance(data.get("log_level"), str):
        data["log_level"] = data["log_level"].upper()
    return Settings(**data)
