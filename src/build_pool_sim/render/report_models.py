"""Shared report data models for renderers."""

from __future__ import annotations

from dataclasses import dataclass

from build_pool_sim.core.models import SimulationResult, SweepPoint


@dataclass(frozen=True)
class ReportAgent:
    """Per-agent load row."""

    agent_id: int
    build_count: int
    total_seconds: int
    utilization: float

    @property
    def total_minutes(self) -> int:
        return self.total_seconds // 60


@dataclass(frozen=True)
class ReportVerify:
    """Per-verify critical build row."""

    verify_id: int
    agent_id: int
    build_name: str
    queue_seconds: int
    build_seconds: int

    @property
    def total_seconds(self) -> int:
        return self.queue_seconds + self.build_seconds

    @property
    def queue_minutes(self) -> int:
        return self.queue_seconds // 60

    @property
    def build_minutes(self) -> int:
        return self.build_seconds // 60

    @property
    def total_minutes(self) -> int:
        return self.total_seconds // 60


@dataclass(frozen=True)
class ReportSummary:
    """Headline metrics for the run."""

    agents: int
    verifies: int
    builds: int
    profile: str
    makespan_seconds: int
    mean_verify_seconds: float
    max_verify_seconds: int
    parallel_efficiency: float


@dataclass(frozen=True)
class SimulationReport:
    """Renderer input bundle for one simulation run."""

    summary: ReportSummary
    agents: tuple[ReportAgent, ...]
    verifies: tuple[ReportVerify, ...]
    sweep: tuple[SweepPoint, ...] = ()
    title: str = "Build Pool Simulation Report"


def build_simulation_report(
    result: SimulationResult,
    title: str = "Build Pool Simulation Report",
    sweep: tuple[SweepPoint, ...] = (),
) -> SimulationReport:
    """Flatten a ``SimulationResult`` into renderer rows."""
    summary = result.summary
    profile = "custom" if result.config.build_types is not None else result.config.profile.value
    return SimulationReport(
        title=title,
        summary=ReportSummary(
            agents=summary.agent_count,
            verifies=summary.verify_count,
            builds=summary.build_count,
            profile=profile,
            makespan_seconds=summary.makespan.seconds,
            mean_verify_seconds=summary.mean_verify_seconds,
            max_verify_seconds=summary.max_verify_time.seconds,
            parallel_efficiency=summary.parallel_efficiency,
        ),
        agents=tuple(
            ReportAgent(
                agent_id=agent.agent_id,
                build_count=len(agent.builds),
                total_seconds=agent.total_time.seconds,
                utilization=summary.agent_utilization[agent.agent_id],
            )
            for agent in result.pool
        ),
        verifies=tuple(
            ReportVerify(
                verify_id=processed.verify_id,
                agent_id=processed.agent_id,
                build_name=processed.name,
                queue_seconds=processed.queue_time.seconds,
                build_seconds=processed.build_time.seconds,
            )
            for processed in result.verify_stats
        ),
        sweep=sweep,
    )
