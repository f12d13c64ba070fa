"""Output rendering modules."""

from build_pool_sim.render.json_report import render_json_report
from build_pool_sim.render.markdown_report import render_markdown_report
from build_pool_sim.render.report_models import (
    ReportAgent,
    ReportSummary,
    ReportVerify,
    SimulationReport,
    build_simulation_report,
)

__all__ = [
    "ReportAgent",
    "ReportSummary",
    "ReportVerify",
    "SimulationReport",
    "build_simulation_report",
    "render_json_report",
    "render_markdown_report",
]
