from simulation import SimulationReport, render_report
from simulation.report import ElevatorSummary


def test_render_report_lists_hours_and_cars():
    report = SimulationReport(
        steps=7200,
        delivered=12,
        waiting=1,
        in_transit=2,
        total_energy=153.25,
        average_wait=3.5,
        wait_p95=11.0,
        hourly_average_wait={1: 9.0, 0: 6.5},
        elevators=[ElevatorSummary(elevator_id=0, energy=153.25, floors_travelled=80)],
    )
    text = render_report(report)
    assert "Total energy: 153.25" in text
    assert "Average wait time: 3.50" in text
    assert text.index("00:00  6.50") < text.index("01:00  9.00")
    assert "#0: energy 153.25, floors travelled 80" in text


def test_render_report_without_samples():
    report = SimulationReport(
        steps=10, delivered=0, waiting=0, in_transit=0, total_energy=0.0, average_wait=0.0, wait_p95=0.0
    )
    text = render_report(report)
    assert "Average wait by hour" not in text
    assert "Elevators:" not in text
