"""Shared fixtures for build_pool_sim test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from build_pool_sim.core.models import Build, Duration, VerifyId


def _build(verify_id: int, seconds: int, name: str = "") -> Build:
    return Build(verify_id=VerifyId(verify_id), duration=Duration(seconds), name=name)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo root logger changes made by the CLI --verbose flag."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def scenario_queue() -> tuple[Build, ...]:
    """Verify 1 then verify 2, each with builds of 5, 3 and 7 seconds."""
    return tuple(
        _build(verify, seconds)
        for verify in (1, 2)
        for seconds in (5, 3, 7)
    )


@pytest.fixture
def single_verify_queue() -> tuple[Build, ...]:
    """One verify with builds of 5, 3 and 7 seconds."""
    return tuple(_build(1, seconds) for seconds in (5, 3, 7))
