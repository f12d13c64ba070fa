"""Greedy build-agent pool simulator."""

from build_pool_sim.version import __version__

__all__ = ["__version__"]
