"""Simulation facade: workload -> scheduler -> statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from build_pool_sim.core.agent_pool import create_pool
from build_pool_sim.core.models import SimulationConfig, SimulationResult, SweepPoint
from build_pool_sim.core.scheduler import process_queue
from build_pool_sim.core.statistics import build_times_by_verify, summarize
from build_pool_sim.core.workload import generate_queue

logger = logging.getLogger("build_pool_sim")


def simulate(config: SimulationConfig) -> SimulationResult:
    """Run one simulation from scratch for ``config``."""
    workload = config.build_types if config.build_types is not None else config.profile
    queue = generate_queue(config.verifies, workload)
    logger.debug(
        "Simulating %d builds (%d verifies) on %d agents",
        len(queue),
        config.verifies,
        config.agents,
    )

    pool = process_queue(queue, create_pool(config.agents))
    summary = summarize(pool)
    logger.info(
        "Simulation done: makespan=%ss, mean verify=%.1fs",
        summary.makespan.seconds,
        summary.mean_verify_seconds,
    )
    return SimulationResult(
        config=config,
        queue=queue,
        pool=pool,
        verify_stats=build_times_by_verify(pool),
        summary=summary,
    )


def sweep_agent_counts(
    config: SimulationConfig,
    agent_counts: Iterable[int],
) -> tuple[SweepPoint, ...]:
    """Re-run the same workload once per pool size.

    Raises:
        ValueError: If an agent count is below 1.
    """
    points: list[SweepPoint] = []
    for count in agent_counts:
        if count < 1:
            raise ValueError(f"agent counts must be >= 1, got {count}")
        summary = simulate(config.model_copy(update={"agents": count})).summary
        points.append(
            SweepPoint(
                agent_count=count,
                makespan=summary.makespan,
                mean_verify_seconds=summary.mean_verify_seconds,
                max_verify_time=summary.max_verify_time,
            )
        )
    return tuple(points)
