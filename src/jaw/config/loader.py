from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from jaw.config.models import ReaderConfig


# ConfigError is raised for invalid configuration: fail fast, never fall back to defaults silently.
class ConfigError(ValueError):
    pass


def parse_config(raw: Any) -> ReaderConfig:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return ReaderConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path) -> ReaderConfig:
    # Empty file yields the all-defaults config.
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    return parse_config(raw)
