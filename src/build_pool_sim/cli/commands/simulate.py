"""Simulate command — one run of the build pool."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from build_pool_sim.cli.commands._pipeline import (
    OUTPUT_FORMATS,
    _error,
    emit_report,
    resolve_config,
)
from build_pool_sim.core import simulate
from build_pool_sim.render import build_simulation_report


def run(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to simulation config YAML."
    ),
    agents: Optional[int] = typer.Option(
        None, "--agents", "-a", help="Number of build agents (>= 1)."
    ),
    verifies: Optional[int] = typer.Option(
        None, "--verifies", "-n", help="Number of verifies to enqueue (>= 0)."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Build profile: small, standard or large."
    ),
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
    title: str = typer.Option(
        "Build Pool Simulation Report", "--title", "-t", help="Report title."
    ),
) -> None:
    """Simulate the build queue on a pool of agents."""
    if format not in OUTPUT_FORMATS:
        _error(f"Unknown format: {format!r}. Use markdown or json.", 2)

    cfg = resolve_config(config, agents, verifies, profile)
    result = simulate(cfg)
    emit_report(build_simulation_report(result, title=title), format)
