"""Derived per-agent and per-verify statistics over a finished pool."""

from __future__ import annotations

from collections import defaultdict

from build_pool_sim.core.models import (
    Agent,
    AgentId,
    AgentPool,
    Duration,
    ProcessedBuild,
    SimulationSummary,
    VerifyId,
)


def agent_total_time(agent: Agent) -> Duration:
    """Total busy time of an agent."""
    return agent.total_time


def agent_build_stats(agent: Agent) -> tuple[ProcessedBuild, ...]:
    """Place each of the agent's builds on its timeline, in assignment order."""
    stats: list[ProcessedBuild] = []
    elapsed = Duration.zero()
    for build in agent.builds:
        stats.append(
            ProcessedBuild(
                verify_id=build.verify_id,
                queue_time=elapsed,
                build_time=build.duration,
                agent_id=agent.agent_id,
                name=build.name,
            )
        )
        elapsed = elapsed + build.duration
    return tuple(stats)


def _agents_by_id(pool: AgentPool) -> list[Agent]:
    return sorted(pool, key=lambda agent: agent.agent_id)


def build_times_by_verify(pool: AgentPool) -> tuple[ProcessedBuild, ...]:
    """Return the critical (latest-finishing) build of every verify.

    When several builds of a verify finish at the same time, the one on the
    lowest agent id wins, then the earliest on that agent. The result is
    ordered by completion time, then verify id.
    """
    critical: dict[VerifyId, ProcessedBuild] = {}
    for agent in _agents_by_id(pool):
        for processed in agent_build_stats(agent):
            current = critical.get(processed.verify_id)
            if current is None or processed.total > current.total:
                critical[processed.verify_id] = processed
    return tuple(sorted(critical.values(), key=lambda p: (p.total, p.verify_id)))


def verify_build_breakdown(pool: AgentPool) -> dict[VerifyId, tuple[ProcessedBuild, ...]]:
    """Group every processed build by verify, agents in id order."""
    grouped: dict[VerifyId, list[ProcessedBuild]] = defaultdict(list)
    for agent in _agents_by_id(pool):
        for processed in agent_build_stats(agent):
            grouped[processed.verify_id].append(processed)
    return {verify_id: tuple(grouped[verify_id]) for verify_id in sorted(grouped)}


def summarize(pool: AgentPool) -> SimulationSummary:
    """Compute aggregate metrics for a finished pool."""
    totals: dict[AgentId, Duration] = {agent.agent_id: agent_total_time(agent) for agent in pool}
    makespan = max(totals.values())
    total_busy = sum(totals.values(), Duration.zero())
    verify_stats = build_times_by_verify(pool)

    if makespan.seconds > 0:
        utilization = {aid: busy.seconds / makespan.seconds for aid, busy in totals.items()}
        efficiency = total_busy.seconds / (len(pool) * makespan.seconds)
    else:
        utilization = {aid: 0.0 for aid in totals}
        efficiency = 0.0

    if verify_stats:
        mean_verify = sum(p.total.seconds for p in verify_stats) / len(verify_stats)
        max_verify = max(p.total for p in verify_stats)
    else:
        mean_verify = 0.0
        max_verify = Duration.zero()

    return SimulationSummary(
        agent_count=len(pool),
        build_count=sum(len(agent.builds) for agent in pool),
        verify_count=len(verify_stats),
        makespan=makespan,
        total_busy_time=total_busy,
        agent_utilization=utilization,
        mean_verify_seconds=mean_verify,
        max_verify_time=max_verify,
        parallel_efficiency=efficiency,
    )
