"""Core simulation models and algorithms."""

from build_pool_sim.core.agent_pool import FIRST_AGENT_ID, create_pool
from build_pool_sim.core.models import (
    Agent,
    AgentId,
    AgentPool,
    Assignment,
    Build,
    BuildProfile,
    BuildType,
    Duration,
    ProcessedBuild,
    SimulationConfig,
    SimulationResult,
    SimulationSummary,
    SweepPoint,
    VerifyId,
)
from build_pool_sim.core.scheduler import iter_assignments, process_queue
from build_pool_sim.core.simulation import simulate, sweep_agent_counts
from build_pool_sim.core.statistics import (
    agent_build_stats,
    agent_total_time,
    build_times_by_verify,
    summarize,
    verify_build_breakdown,
)
from build_pool_sim.core.workload import PROFILE_CATALOGUE, generate_queue, get_build_types

__all__ = [
    "Agent",
    "AgentId",
    "AgentPool",
    "Assignment",
    "Build",
    "BuildProfile",
    "BuildType",
    "Duration",
    "FIRST_AGENT_ID",
    "PROFILE_CATALOGUE",
    "ProcessedBuild",
    "SimulationConfig",
    "SimulationResult",
    "SimulationSummary",
    "SweepPoint",
    "VerifyId",
    "agent_build_stats",
    "agent_total_time",
    "build_times_by_verify",
    "create_pool",
    "generate_queue",
    "get_build_types",
    "iter_assignments",
    "process_queue",
    "simulate",
    "summarize",
    "sweep_agent_counts",
    "verify_build_breakdown",
]
