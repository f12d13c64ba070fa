"""Profiles command — list the build-type catalogues."""

from __future__ import annotations

import typer

from build_pool_sim.core import PROFILE_CATALOGUE, Duration


def run() -> None:
    """List the available build profiles and their sub-builds."""
    for profile, build_types in PROFILE_CATALOGUE.items():
        total = sum((bt.duration for bt in build_types), Duration.zero())
        typer.echo(f"{profile.value} ({len(build_types)} builds, {total.minutes}m per verify)")
        for build_type in build_types:
            typer.echo(f"  - {build_type.name}: {build_type.duration.minutes}m")
