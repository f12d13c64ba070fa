"""Greedy least-loaded-first scheduling of a build queue onto an agent pool."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterator, Sequence

from build_pool_sim.core.models import (
    AgentId,
    AgentPool,
    Assignment,
    Build,
    Duration,
)

logger = logging.getLogger("build_pool_sim")


def iter_assignments(queue: Sequence[Build], pool: AgentPool) -> Iterator[Assignment]:
    """Yield the greedy assignment decision for each build, in queue order.

    Each build goes to the agent with the smallest total busy time; ties go
    to the lowest agent id. Builds already held by the pool count toward
    their agent's load.
    """
    # Heap entries are (total_seconds, agent_id), so equal loads pop in
    # ascending id order.
    heap: list[tuple[int, AgentId]] = [
        (agent.total_time.seconds, agent.agent_id) for agent in pool
    ]
    heapq.heapify(heap)

    for build in queue:
        load, agent_id = heapq.heappop(heap)
        logger.debug(
            "Assigning %ss build of verify %d to agent %d (load %ss)",
            build.duration.seconds,
            build.verify_id,
            agent_id,
            load,
        )
        yield Assignment(build=build, agent_id=agent_id, load_before=Duration(load))
        heapq.heappush(heap, (load + build.duration.seconds, agent_id))


def process_queue(queue: Sequence[Build], pool: AgentPool) -> AgentPool:
    """Drain ``queue`` into ``pool`` and return the resulting pool.

    Neither argument is modified; the returned pool keeps the input's agent
    order and ids.

    Args:
        queue: Builds in submission order.
        pool: Starting pool state.

    Returns:
        A new ``AgentPool`` with every build appended to its chosen agent.
    """
    result = pool
    for assignment in iter_assignments(queue, pool):
        chosen = result.get(assignment.agent_id)
        result = result.replace(chosen.with_build(assignment.build))
    return result
