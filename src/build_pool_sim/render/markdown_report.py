"""Markdown report renderer."""

from __future__ import annotations

from build_pool_sim.render.report_models import SimulationReport


def render_markdown_report(report: SimulationReport) -> str:
    """Render a simulation report as GitHub-compatible Markdown."""
    lines: list[str] = [
        f"# {report.title}",
        "",
    ]
    lines.extend(_render_summary(report))
    lines.extend([""])
    lines.extend(_render_agent_table(report))
    lines.extend([""])
    lines.extend(_render_verify_table(report))
    if report.sweep:
        lines.extend([""])
        lines.extend(_render_sweep_table(report))
    lines.append("")
    return "\n".join(lines)


def _render_summary(report: SimulationReport) -> list[str]:
    summary = report.summary
    return [
        "## Summary",
        "",
        "| Metric | Value |",
        "| --- | --- |",
        f"| Agents | {summary.agents} |",
        f"| Verifies | {summary.verifies} |",
        f"| Builds | {summary.builds} |",
        f"| Profile | {_escape_cell(summary.profile)} |",
        f"| Makespan | {_format_minutes(summary.makespan_seconds)} |",
        f"| Mean verify completion | {_format_minutes(int(summary.mean_verify_seconds))} |",
        f"| Slowest verify | {_format_minutes(summary.max_verify_seconds)} |",
        f"| Parallel efficiency | {summary.parallel_efficiency:.0%} |",
    ]


def _render_agent_table(report: SimulationReport) -> list[str]:
    lines = [
        "## Agent Load",
        "",
        "| Agent | Builds | Busy Time | Utilization |",
        "| --- | --- | --- | --- |",
    ]
    for agent in report.agents:
        lines.append(
            f"| {agent.agent_id} | {agent.build_count} | "
            f"{_format_minutes(agent.total_seconds)} | {agent.utilization:.0%} |"
        )
    return lines


def _render_verify_table(report: SimulationReport) -> list[str]:
    lines = ["## Verify Completion", ""]
    if not report.verifies:
        lines.append("No verifies were simulated.")
        return lines
    lines.extend(
        [
            "| Verify | Critical Build | Agent | Queue Time | Build Time | Total |",
            "| --- | --- | --- | --- | --- | --- |",
        ]
    )
    for verify in report.verifies:
        name = _escape_cell(verify.build_name) if verify.build_name else "N/A"
        lines.append(
            f"| {verify.verify_id} | {name} | {verify.agent_id} | "
            f"{_format_minutes(verify.queue_seconds)} | {_format_minutes(verify.build_seconds)} | "
            f"{_format_minutes(verify.total_seconds)} |"
        )
    return lines


def _render_sweep_table(report: SimulationReport) -> list[str]:
    lines = [
        "## Pool Size Sweep",
        "",
        "| Agents | Makespan | Mean Verify | Slowest Verify |",
        "| --- | --- | --- | --- |",
    ]
    for point in report.sweep:
        lines.append(
            f"| {point.agent_count} | {_format_minutes(point.makespan.seconds)} | "
            f"{_format_minutes(int(point.mean_verify_seconds))} | "
            f"{_format_minutes(point.max_verify_time.seconds)} |"
        )
    return lines


def _format_minutes(seconds: int) -> str:
    return f"{seconds // 60}m"


def _escape_cell(value: str) -> str:
    normalized = value.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    return normalized.replace("|", "\\|")
