from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List


@dataclass
class ElevatorSummary:
    elevator_id: int
    energy: float
    floors_travelled: int


@dataclass
class SimulationReport:
    """Final aggregates handed to a reporter once a run completes."""

    steps: int
    delivered: int
    waiting: int
    in_transit: int
    total_energy: float
    average_wait: float
    wait_p95: float
    hourly_average_wait: Dict[int, float] = field(default_factory=dict)
    elevators: List[ElevatorSummary] = field(default_factory=list)


def render_report(report: SimulationReport) -> str:
    lines = [
        f"Steps simulated: {report.steps}",
        f"Passengers delivered: {report.delivered}",
        f"Passengers still waiting: {report.waiting}",
        f"Passengers in transit: {report.in_transit}",
        f"Total energy: {report.total_energy:.2f}",
        f"Average wait time: {report.average_wait:.2f}",
        f"Wait time p95: {report.wait_p95:.2f}",
    ]
    if report.hourly_average_wait:
        lines.append("Average wait by hour:")
        for hour, average in sorted(report.hourly_average_wait.items()):
            lines.append(f"  {hour:02d}:00  {average:.2f}")
    if report.elevators:
        lines.append("Elevators:")
        for summary in report.elevators:
            lines.append(
                f"  #{summary.elevator_id}: energy {summary.energy:.2f}, "
                f"floors travelled {summary.floors_travelled}"
            )
    return "\n".join(lines)


def print_report(report: SimulationReport) -> None:
    print(render_report(report))


def report_to_dict(report: SimulationReport) -> Dict:
    data = asdict(report)
    # JSON object keys are strings; keep the hour ordering readable.
    data["hourly_average_wait"] = {
        f"{hour:02d}": value for hour, value in sorted(report.hourly_average_wait.items())
    }
    return data
