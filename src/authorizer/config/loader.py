from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from authorizer.usecases.config_models import AppConfig

BASELINE_CONFIG = "baseline_config.yml"


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader; returns a validated AppConfig.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    return parse_config(text)


def load_baseline_config() -> AppConfig:
    # The baseline config ships inside the package.
    text = resources.files("authorizer").joinpath(BASELINE_CONFIG).read_text(encoding="utf-8")
    return parse_config(text)


def parse_config(text: str) -> AppConfig:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    allowed = {"version", "scenario", "pipeline", "rules", "input", "output", "logging"}
    unknown = set(raw.keys()) - allowed
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    if "version" not in raw:
        raise ConfigError("Missing required top-level key: version")

    pipeline = raw.get("pipeline")
    if pipeline is not None:
        if not isinstance(pipeline, dict) or "steps" not in pipeline:
            raise ConfigError("pipeline.steps is required")
        if not isinstance(pipeline.get("steps"), list):
            raise ConfigError("pipeline.steps must be a list")
