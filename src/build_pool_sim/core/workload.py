"""Build-type catalogues and build queue generation."""

from __future__ import annotations

from collections.abc import Sequence

from build_pool_sim.core.models import Build, BuildProfile, BuildType, VerifyId


def _catalogue(*entries: tuple[str, int]) -> tuple[BuildType, ...]:
    return tuple(BuildType(name=name, duration_seconds=secs) for name, secs in entries)


# Sub-builds run for every verify, in this order (durations in seconds).
PROFILE_CATALOGUE: dict[BuildProfile, tuple[BuildType, ...]] = {
    BuildProfile.SMALL: _catalogue(
        ("compile", 300),
        ("unit-tests", 420),
        ("lint", 120),
    ),
    BuildProfile.STANDARD: _catalogue(
        ("compile", 600),
        ("unit-tests", 900),
        ("integration-tests", 1200),
        ("lint", 180),
    ),
    BuildProfile.LARGE: _catalogue(
        ("compile", 900),
        ("unit-tests", 1500),
        ("integration-tests", 2400),
        ("e2e-tests", 3000),
        ("static-analysis", 600),
        ("packaging", 300),
    ),
}


def get_build_types(profile: BuildProfile) -> tuple[BuildType, ...]:
    """Return the ordered catalogue for a profile."""
    return PROFILE_CATALOGUE[profile]


def generate_queue(
    verify_count: int,
    workload: BuildProfile | Sequence[BuildType],
) -> tuple[Build, ...]:
    """Produce the build queue for ``verify_count`` verifies.

    Verifies are numbered from 1; each contributes one build per catalogue
    entry, in catalogue order.

    Args:
        verify_count: Number of verifies to enqueue.
        workload: A named profile, or an explicit build-type catalogue.

    Raises:
        ValueError: If ``verify_count`` is negative.
    """
    if verify_count < 0:
        raise ValueError(f"verify_count must be >= 0, got {verify_count}")

    build_types = (
        get_build_types(workload) if isinstance(workload, BuildProfile) else tuple(workload)
    )
    return tuple(
        Build(verify_id=VerifyId(verify), duration=build_type.duration, name=build_type.name)
        for verify in range(1, verify_count + 1)
        for build_type in build_types
    )
