"""End-to-end CLI integration tests using Typer's CliRunner."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from build_pool_sim.cli.app import app

runner = CliRunner()
FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version_flag_prints_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "build-pool-sim" in result.output


# ---------------------------------------------------------------------------
# Simulate
# ---------------------------------------------------------------------------


class TestSimulate:
    def test_default_config(self) -> None:
        result = runner.invoke(app, ["simulate"])
        assert result.exit_code == 0
        assert "Build Pool Simulation Report" in result.output
        assert "| Agents | 4 |" in result.output

    def test_fixture_config_json(self) -> None:
        config = str(FIXTURES / "two_agents.yaml")
        result = runner.invoke(app, ["simulate", "--config", config, "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [a["total_seconds"] for a in payload["agents"]] == [13, 17]
        assert [v["total_seconds"] for v in payload["verifies"]] == [10, 17]

    def test_flags_override_config(self) -> None:
        config = str(FIXTURES / "two_agents.yaml")
        result = runner.invoke(
            app, ["simulate", "-c", config, "--agents", "1", "--format", "json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [a["total_seconds"] for a in payload["agents"]] == [30]

    def test_profile_flag(self) -> None:
        result = runner.invoke(
            app,
            ["simulate", "--agents", "1", "--verifies", "1", "--profile", "small", "--format", "json"],
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["summary"]["profile"] == "small"
        assert payload["summary"]["makespan_minutes"] == 14

    def test_profile_flag_overrides_config_build_types(self) -> None:
        config = str(FIXTURES / "two_agents.yaml")
        result = runner.invoke(
            app, ["simulate", "-c", config, "--profile", "small", "--format", "json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["summary"]["profile"] == "small"
        assert payload["summary"]["builds"] == 6
        # Two verifies of 840s small-profile work spread over two agents.
        assert sum(a["total_seconds"] for a in payload["agents"]) == 2 * 840

    def test_custom_title(self) -> None:
        result = runner.invoke(app, ["simulate", "--title", "Nightly"])
        assert result.exit_code == 0
        assert "# Nightly" in result.output

    def test_zero_agents_rejected(self) -> None:
        result = runner.invoke(app, ["simulate", "--agents", "0"])
        assert result.exit_code == 2
        assert "Invalid option" in result.output

    def test_unknown_profile_rejected(self) -> None:
        result = runner.invoke(app, ["simulate", "--profile", "huge"])
        assert result.exit_code == 2

    def test_unknown_format_rejected(self) -> None:
        result = runner.invoke(app, ["simulate", "--format", "xml"])
        assert result.exit_code == 2
        assert "Unknown format" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["simulate", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 2
        assert "Config file not found" in result.output

    def test_invalid_config_file(self) -> None:
        config = str(FIXTURES / "invalid_agents.yaml")
        result = runner.invoke(app, ["simulate", "--config", config])
        assert result.exit_code == 2
        assert "Config validation error" in result.output

    def test_verbose_flag_enables_debug_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        result = runner.invoke(app, ["--verbose", "simulate", "--verifies", "1"])

        assert result.exit_code == 0
        assert len(calls) == 1
        assert calls[0]["level"] == logging.DEBUG


# ---------------------------------------------------------------------------
# Sweep
# ---------------------------------------------------------------------------


class TestSweep:
    def test_sweep_markdown(self) -> None:
        result = runner.invoke(app, ["sweep", "--max-agents", "3", "--verifies", "2"])
        assert result.exit_code == 0
        assert "## Pool Size Sweep" in result.output

    def test_sweep_json_points(self) -> None:
        config = str(FIXTURES / "two_agents.yaml")
        result = runner.invoke(
            app, ["sweep", "-c", config, "--max-agents", "2", "--format", "json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [p["agents"] for p in payload["sweep"]] == [1, 2]
        assert [p["makespan_seconds"] for p in payload["sweep"]] == [30, 17]

    def test_max_agents_must_be_positive(self) -> None:
        result = runner.invoke(app, ["sweep", "--max-agents", "0"])
        assert result.exit_code == 2
        assert "--max-agents" in result.output


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def test_profiles_lists_catalogues() -> None:
    result = runner.invoke(app, ["profiles"])
    assert result.exit_code == 0
    assert "small (3 builds, 14m per verify)" in result.output
    assert "  - e2e-tests: 50m" in result.output
