"""Shared CLI plumbing: config resolution, errors and output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from build_pool_sim.adapters.config_loader import (
    apply_overrides,
    load_config,
    load_default_config,
)
from build_pool_sim.core import SimulationConfig
from build_pool_sim.render import (
    SimulationReport,
    render_json_report,
    render_markdown_report,
)

logger = logging.getLogger("build_pool_sim")

OUTPUT_FORMATS = ("markdown", "json")


def _error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)


def resolve_config(
    config: Optional[Path],
    agents: Optional[int],
    verifies: Optional[int],
    profile: Optional[str],
) -> SimulationConfig:
    """Load the config file (or packaged default) and apply CLI overrides."""
    try:
        cfg = load_config(config) if config else load_default_config()
    except FileNotFoundError:
        _error(f"Config file not found: {config}", 2)
    except ValueError as exc:
        _error(f"Config validation error: {exc}", 2)

    try:
        cfg = apply_overrides(cfg, agents=agents, verifies=verifies, profile=profile)
    except ValueError as exc:
        _error(f"Invalid option: {exc}", 2)

    logger.debug(
        "Resolved config: agents=%d verifies=%d profile=%s custom=%s",
        cfg.agents,
        cfg.verifies,
        cfg.profile.value,
        cfg.build_types is not None,
    )
    return cfg


def emit_report(report: SimulationReport, format: str) -> None:
    """Write a report to stdout in the requested format."""
    if format == "markdown":
        typer.echo(render_markdown_report(report))
    elif format == "json":
        typer.echo(render_json_report(report), nl=False)
    else:
        _error(f"Unknown format: {format!r}. Use markdown or json.", 2)
