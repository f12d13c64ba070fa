"""Domain value types, pydantic config models and result dataclasses."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Annotated, NewType

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

VerifyId = NewType("VerifyId", int)
AgentId = NewType("AgentId", int)

SECONDS_PER_MINUTE = 60


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative whole number of seconds with additive semantics."""

    seconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise TypeError(f"seconds must be an int, got {type(self.seconds).__name__}")
        if self.seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {self.seconds}")

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0)

    @property
    def minutes(self) -> int:
        """Whole minutes, truncated."""
        return self.seconds // SECONDS_PER_MINUTE

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __radd__(self, other: object) -> "Duration":
        # Lets builtin sum() start from 0.
        if other == 0:
            return self
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(other.seconds + self.seconds)


def _require_positive_id(kind: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{kind} must be >= 1, got {value}")


@dataclass(frozen=True)
class Build:
    """One unit of work belonging to a verify."""

    verify_id: VerifyId
    duration: Duration
    name: str = ""

    def __post_init__(self) -> None:
        _require_positive_id("verify_id", self.verify_id)
        if not isinstance(self.duration, Duration):
            raise TypeError(f"duration must be a Duration, got {type(self.duration).__name__}")


@dataclass(frozen=True)
class Agent:
    """A worker executing its assigned builds sequentially, in order."""

    agent_id: AgentId
    builds: tuple[Build, ...] = ()

    def __post_init__(self) -> None:
        _require_positive_id("agent_id", self.agent_id)
        # Accept any sequence but always store a tuple.
        object.__setattr__(self, "builds", tuple(self.builds))

    @property
    def total_time(self) -> Duration:
        return sum((build.duration for build in self.builds), Duration.zero())

    def with_build(self, build: Build) -> "Agent":
        """Return a copy of this agent with ``build`` appended."""
        return Agent(agent_id=self.agent_id, builds=(*self.builds, build))


@dataclass(frozen=True)
class AgentPool:
    """Non-empty ordered collection of agents with unique ids.

    The pool is built from a ``head`` agent plus the ``rest`` so that an
    empty pool cannot be constructed.
    """

    head: Agent
    rest: tuple[Agent, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rest", tuple(self.rest))
        seen: set[int] = set()
        for agent in self.agents:
            if agent.agent_id in seen:
                raise ValueError(f"Duplicate agent id in pool: {agent.agent_id}")
            seen.add(agent.agent_id)

    @classmethod
    def from_agents(cls, agents: Sequence[Agent]) -> "AgentPool":
        if not agents:
            raise ValueError("An agent pool requires at least one agent.")
        return cls(head=agents[0], rest=tuple(agents[1:]))

    @property
    def agents(self) -> tuple[Agent, ...]:
        return (self.head, *self.rest)

    @property
    def agent_ids(self) -> tuple[AgentId, ...]:
        return tuple(agent.agent_id for agent in self.agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self.agents)

    def __len__(self) -> int:
        return 1 + len(self.rest)

    def get(self, agent_id: int) -> Agent:
        for agent in self.agents:
            if agent.agent_id == agent_id:
                return agent
        raise KeyError(f"No agent with id {agent_id} in pool")

    def replace(self, agent: Agent) -> "AgentPool":
        """Return a new pool with the same-id agent swapped for ``agent``."""
        if agent.agent_id not in self.agent_ids:
            raise KeyError(f"No agent with id {agent.agent_id} in pool")
        return AgentPool.from_agents(
            [agent if a.agent_id == agent.agent_id else a for a in self.agents]
        )


@dataclass(frozen=True)
class ProcessedBuild:
    """A build placed on its agent's timeline.

    ``queue_time`` is the sum of durations of the builds that ran before it
    on the same agent; ``total`` is its completion time relative to the
    agent's start.
    """

    verify_id: VerifyId
    queue_time: Duration
    build_time: Duration
    agent_id: AgentId
    name: str = ""

    @property
    def total(self) -> Duration:
        return self.queue_time + self.build_time


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class BuildProfile(enum.Enum):
    """Named workload catalogue; each maps to a fixed list of build types."""

    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"


# ---------------------------------------------------------------------------
# Pydantic config models (input validation)
# ---------------------------------------------------------------------------


class BuildType(BaseModel):
    """One named sub-build of a verify with a fixed duration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: NonEmptyStr
    duration_seconds: Annotated[int, Field(ge=0)]

    @property
    def duration(self) -> Duration:
        return Duration(self.duration_seconds)


class SimulationConfig(BaseModel):
    """Inputs for one simulation run."""

    model_config = ConfigDict(extra="forbid")

    agents: Annotated[int, Field(ge=1)] = 1
    verifies: Annotated[int, Field(ge=0)] = 0
    profile: BuildProfile = BuildProfile.STANDARD
    build_types: Annotated[list[BuildType], Field(min_length=1)] | None = None


# ---------------------------------------------------------------------------
# Result dataclasses (frozen, output-only)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Assignment:
    """One greedy scheduling decision."""

    build: Build
    agent_id: AgentId
    load_before: Duration


@dataclass(frozen=True)
class SimulationSummary:
    """Aggregate metrics over a finished pool."""

    agent_count: int
    build_count: int
    verify_count: int
    makespan: Duration
    total_busy_time: Duration
    agent_utilization: Mapping[AgentId, float]
    mean_verify_seconds: float
    max_verify_time: Duration
    parallel_efficiency: float


@dataclass(frozen=True)
class SimulationResult:
    """Everything derived from one simulation run."""

    config: SimulationConfig
    queue: tuple[Build, ...]
    pool: AgentPool
    verify_stats: tuple[ProcessedBuild, ...]
    summary: SimulationSummary


@dataclass(frozen=True)
class SweepPoint:
    """Headline metrics for one pool size in a sweep."""

    agent_count: int
    makespan: Duration
    mean_verify_seconds: float
    max_verify_time: Duration
