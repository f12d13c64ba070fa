"""YAML-backed simulation configuration loader."""

from __future__ import annotations

from importlib.resources import as_file, files
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from build_pool_sim.core.models import SimulationConfig

DEFAULT_CONFIG_FILENAME = "default_simulation.yaml"


def load_config(path: str | Path) -> SimulationConfig:
    """Load and validate a simulation configuration file."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw_data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse YAML config at {config_path}: {exc}") from exc
    except OSError as exc:
        raise OSError(f"Failed to read config file {config_path}: {exc}") from exc

    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise ValueError(f"Invalid config file at {config_path}: root must be a YAML mapping")

    return parse_config(raw_data, source=str(config_path))


def load_default_config() -> SimulationConfig:
    """Load the packaged default simulation configuration."""
    resource = files("build_pool_sim").joinpath(DEFAULT_CONFIG_FILENAME)
    with as_file(resource) as default_path:
        return load_config(default_path)


def parse_config(raw: dict[str, Any], source: str = "<input>") -> SimulationConfig:
    """Validate a raw mapping into a ``SimulationConfig``."""
    try:
        return SimulationConfig.model_validate(raw)
    except ValidationError as exc:
        detail_text = _format_validation_errors(exc)
        raise ValueError(f"Invalid config at {source}:\n{detail_text}") from exc


def apply_overrides(config: SimulationConfig, **overrides: Any) -> SimulationConfig:
    """Return ``config`` with non-None overrides applied and re-validated.

    A ``profile`` override also discards any custom ``build_types`` so the
    named catalogue is the one simulated.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    merged = config.model_dump()
    merged.update(updates)
    if "profile" in updates:
        merged["build_types"] = None
    return parse_config(merged, source="command-line overrides")


def _format_validation_errors(exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        details.append(f"{location}: {error['msg']}")
    return "\n".join(f"- {line}" for line in details)
