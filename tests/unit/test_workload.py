"""Tests for build catalogues and queue generation."""

from __future__ import annotations

import pytest

from build_pool_sim.core.models import BuildProfile, BuildType, Duration
from build_pool_sim.core.workload import PROFILE_CATALOGUE, generate_queue, get_build_types


class TestCatalogue:
    def test_every_profile_has_a_catalogue(self) -> None:
        assert set(PROFILE_CATALOGUE) == set(BuildProfile)

    def test_catalogues_are_non_empty_and_named(self) -> None:
        for build_types in PROFILE_CATALOGUE.values():
            assert build_types
            assert all(bt.name for bt in build_types)

    def test_standard_profile_contents(self) -> None:
        standard = get_build_types(BuildProfile.STANDARD)
        assert [(bt.name, bt.duration_seconds) for bt in standard] == [
            ("compile", 600),
            ("unit-tests", 900),
            ("integration-tests", 1200),
            ("lint", 180),
        ]


class TestGenerateQueue:
    def test_verifies_in_order_with_catalogue_order(self) -> None:
        queue = generate_queue(2, BuildProfile.SMALL)
        assert [(b.verify_id, b.name, b.duration.seconds) for b in queue] == [
            (1, "compile", 300),
            (1, "unit-tests", 420),
            (1, "lint", 120),
            (2, "compile", 300),
            (2, "unit-tests", 420),
            (2, "lint", 120),
        ]

    def test_zero_verifies_gives_empty_queue(self) -> None:
        assert generate_queue(0, BuildProfile.LARGE) == ()

    def test_negative_verifies_raises(self) -> None:
        with pytest.raises(ValueError, match="verify_count"):
            generate_queue(-1, BuildProfile.SMALL)

    def test_custom_build_types(self) -> None:
        custom = [
            BuildType(name="a", duration_seconds=5),
            BuildType(name="b", duration_seconds=3),
            BuildType(name="c", duration_seconds=7),
        ]
        queue = generate_queue(1, custom)
        assert [b.duration for b in queue] == [Duration(5), Duration(3), Duration(7)]

    def test_queue_length(self) -> None:
        large = get_build_types(BuildProfile.LARGE)
        assert len(generate_queue(10, BuildProfile.LARGE)) == 10 * len(large)
