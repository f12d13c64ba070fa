"""Tests for pool construction."""

from __future__ import annotations

import pytest

from build_pool_sim.core.agent_pool import FIRST_AGENT_ID, create_pool


@pytest.mark.parametrize("size", [1, 2, 5, 16])
def test_create_pool_numbers_agents_from_one(size: int) -> None:
    pool = create_pool(size)
    assert pool.agent_ids == tuple(range(1, size + 1))
    assert pool.head.agent_id == FIRST_AGENT_ID
    assert all(agent.builds == () for agent in pool)


def test_size_zero_keeps_first_agent(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="build_pool_sim"):
        pool = create_pool(0)
    assert pool.agent_ids == (1,)
    assert "first agent only" in caplog.text


def test_negative_size_raises() -> None:
    with pytest.raises(ValueError, match="pool size"):
        create_pool(-1)
