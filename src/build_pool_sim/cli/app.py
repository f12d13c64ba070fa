"""Command-line entrypoint for running build pool simulations."""

import logging
from typing import Optional

import typer

from build_pool_sim.cli.commands.profiles import run as run_profiles
from build_pool_sim.cli.commands.simulate import run as run_simulate
from build_pool_sim.cli.commands.sweep import run as run_sweep
from build_pool_sim.version import __version__

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help=(
        "Drain a queue of verify builds onto a pool of build agents "
        "(least-loaded first) and report per-verify completion times."
    ),
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"build-pool-sim {__version__}")
        raise typer.Exit()


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every scheduling decision to stderr."
    ),
    version: Optional[bool] = typer.Option(  # noqa: ARG001
        None,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Print the simulator version and exit.",
    ),
) -> None:
    """Simulate build agents: `simulate` for one pool, `sweep` to compare pool sizes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s", force=True)


app.command("simulate")(run_simulate)
app.command("sweep")(run_sweep)
app.command("profiles")(run_profiles)


def main() -> None:
    """Console-script entry for ``build-pool-sim``."""
    app()


if __name__ == "__main__":
    main()
