"""JSON report renderer."""

from __future__ import annotations

import json
from typing import Any

from build_pool_sim.render.report_models import SimulationReport


def render_json_report(report: SimulationReport) -> str:
    """Render a simulation report as canonical JSON."""
    payload = _build_payload(report)
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def _build_payload(report: SimulationReport) -> dict[str, Any]:
    summary = report.summary
    return {
        "title": report.title,
        "summary": {
            "agents": summary.agents,
            "verifies": summary.verifies,
            "builds": summary.builds,
            "profile": summary.profile,
            "makespan_seconds": summary.makespan_seconds,
            "makespan_minutes": summary.makespan_seconds // 60,
            "mean_verify_seconds": summary.mean_verify_seconds,
            "max_verify_seconds": summary.max_verify_seconds,
            "max_verify_minutes": summary.max_verify_seconds // 60,
            "parallel_efficiency": summary.parallel_efficiency,
        },
        "agents": [
            {
                "agent_id": agent.agent_id,
                "build_count": agent.build_count,
                "total_seconds": agent.total_seconds,
                "total_minutes": agent.total_minutes,
                "utilization": agent.utilization,
            }
            for agent in sorted(report.agents, key=lambda agent: agent.agent_id)
        ],
        "verifies": [
            {
                "verify_id": verify.verify_id,
                "agent_id": verify.agent_id,
                "build": verify.build_name,
                "queue_seconds": verify.queue_seconds,
                "build_seconds": verify.build_seconds,
                "total_seconds": verify.total_seconds,
                "queue_minutes": verify.queue_minutes,
                "build_minutes": verify.build_minutes,
                "total_minutes": verify.total_minutes,
            }
            for verify in report.verifies
        ],
        "sweep": [
            {
                "agents": point.agent_count,
                "makespan_seconds": point.makespan.seconds,
                "mean_verify_seconds": point.mean_verify_seconds,
                "max_verify_seconds": point.max_verify_time.seconds,
            }
            for point in report.sweep
        ],
    }
