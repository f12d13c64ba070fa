"""Sweep command — compare pool sizes on the same workload."""

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
from build_pool_sim.core import simulate, sweep_agent_counts
from build_pool_sim.render import build_simulation_report


def run(
    max_agents: int = typer.Option(
        8, "--max-agents", "-m", help="Largest pool size to simulate (>= 1)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to simulation config YAML."
    ),
    agents: Optional[int] = typer.Option(
        None, "--agents", "-a", help="Pool size used for the detailed tables."
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
        "Build Pool Sweep Report", "--title", "-t", help="Report title."
    ),
) -> None:
    """Simulate pool sizes 1..max-agents and tabulate verify latency."""
    if max_agents < 1:
        _error(f"--max-agents must be >= 1, got {max_agents}", 2)
    if format not in OUTPUT_FORMATS:
        _error(f"Unknown format: {format!r}. Use markdown or json.", 2)

    cfg = resolve_config(config, agents, verifies, profile)
    points = sweep_agent_counts(cfg, range(1, max_agents + 1))
    report = build_simulation_report(simulate(cfg), title=title, sweep=points)
    emit_report(report, format)
