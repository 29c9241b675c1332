"""Simulation primitives for the elevator energy simulator."""

from .config import ConfigurationError, ElevatorConstraints, EnergyCosts, SimulationConfig
from .elevator import DoorOpen, Elevator, ElevatorFullError, Idle, Moving
from .frequency import ArrivalFrequencyModel, PeakWindow
from .passenger import Direction, Passenger, PassengerState, PassengerStateError
from .report import SimulationReport, print_report, render_report, report_to_dict
from .simulation import MetricsSnapshot, Simulation, run_simulation

__all__ = [
    "ArrivalFrequencyModel",
    "ConfigurationError",
    "Direction",
    "DoorOpen",
    "Elevator",
    "ElevatorConstraints",
    "ElevatorFullError",
    "EnergyCosts",
    "Idle",
    "MetricsSnapshot",
    "Moving",
    "Passenger",
    "PassengerState",
    "PassengerStateError",
    "PeakWindow",
    "Simulation",
    "SimulationConfig",
    "SimulationReport",
    "print_report",
    "render_report",
    "report_to_dict",
    "run_simulation",
]
