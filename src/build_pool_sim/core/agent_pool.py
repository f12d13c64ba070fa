"""Agent pool construction."""

from __future__ import annotations

import logging

from build_pool_sim.core.models import Agent, AgentId, AgentPool

logger = logging.getLogger("build_pool_sim")

FIRST_AGENT_ID = AgentId(1)


def create_pool(size: int) -> AgentPool:
    """Create a pool of idle agents numbered ``1..size``.

    Agent 1 is always present, so a size of 0 still yields a single agent.

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"pool size must be >= 0, got {size}")
    if size == 0:
        logger.warning("Pool size 0 requested; using the first agent only.")

    first = Agent(agent_id=FIRST_AGENT_ID)
    additional = tuple(Agent(agent_id=AgentId(i)) for i in range(2, size + 1))
    return AgentPool(head=first, rest=additional)
