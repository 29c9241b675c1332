from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .frequency import ArrivalFrequencyModel, PeakWindow


class ConfigurationError(ValueError):
    """Raised when a simulation is configured in a way it cannot run."""


@dataclass
class ElevatorConstraints:
    """Physical constraints shared by every car in the fleet."""

    capacity: int = 10
    load_factor: float = 0.8
    door_duration: int = 3
    starting_floor: int = 0

    @property
    def usable_capacity(self) -> int:
        return math.floor(self.capacity * self.load_factor)


@dataclass
class EnergyCosts:
    """Energy charged per door cycle, per start from rest and per floor moved."""

    door_operation: float = 2.0
    acceleration: float = 5.0
    movement_base: float = 1.0
    movement_per_passenger: float = 0.1

    def movement(self, onboard: int) -> float:
        return self.movement_base + self.movement_per_passenger * onboard


@dataclass
class SimulationConfig:
    num_floors: int = 10
    elevator_count: int = 3
    total_hours: int = 24
    steps_per_hour: int = 3600
    constraints: ElevatorConstraints = field(default_factory=ElevatorConstraints)
    energy: EnergyCosts = field(default_factory=EnergyCosts)
    frequency_model: ArrivalFrequencyModel = field(default_factory=ArrivalFrequencyModel.default)
    dispatcher_name: str = "directional"
    random_seed: Optional[int] = None
    # Reject fleets whose load factor leaves no usable slot per car.
    strict_capacity: bool = True

    def validate(self) -> None:
        if self.elevator_count < 1:
            raise ConfigurationError("Simulation requires at least one elevator")
        if self.num_floors < 2:
            raise ConfigurationError("Building must have at least two floors")
        if not 0 <= self.constraints.starting_floor < self.num_floors:
            raise ConfigurationError(
                f"Starting floor {self.constraints.starting_floor} is outside floors 0..{self.num_floors - 1}"
            )
        if self.constraints.capacity < 0:
            raise ConfigurationError("Elevator capacity cannot be negative")
        if not 0 < self.constraints.load_factor <= 1:
            raise ConfigurationError("Load factor must be within (0, 1]")
        if self.constraints.door_duration < 1:
            raise ConfigurationError("Door duration must be at least one step")
        if self.strict_capacity and self.constraints.usable_capacity < 1:
            raise ConfigurationError(
                f"Capacity {self.constraints.capacity} with load factor "
                f"{self.constraints.load_factor} leaves no usable slots"
            )
        costs = self.energy
        if min(costs.door_operation, costs.acceleration, costs.movement_base, costs.movement_per_passenger) < 0:
            raise ConfigurationError("Energy costs cannot be negative")
        if self.total_hours < 1:
            raise ConfigurationError("Simulation must run for at least one hour")
        if self.steps_per_hour < 1:
            raise ConfigurationError("Steps per hour must be positive")

    @property
    def total_steps(self) -> int:
        return self.total_hours * self.steps_per_hour

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "SimulationConfig":
        """Build a configuration from a JSON scenario document."""

        building_cfg = config.get("building", {})
        constraints = ElevatorConstraints(**building_cfg.get("constraints", {}))
        energy = EnergyCosts(**config.get("energy", {}))

        arrivals_cfg = config.get("arrivals")
        if arrivals_cfg is None:
            frequency_model = ArrivalFrequencyModel.default()
        else:
            peaks = [
                PeakWindow(
                    start_hour=p.get("start_hour", 0),
                    end_hour=p.get("end_hour", 0),
                    multiplier=p.get("multiplier", 1.0),
                )
                for p in arrivals_cfg.get("peaks", [])
            ]
            frequency_model = ArrivalFrequencyModel(
                base_probability=arrivals_cfg.get("base_probability", 0.01),
                peaks=peaks,
            )

        return cls(
            num_floors=building_cfg.get("num_floors", 10),
            elevator_count=building_cfg.get("elevator_count", 3),
            total_hours=config.get("total_hours", 24),
            steps_per_hour=config.get("steps_per_hour", 3600),
            constraints=constraints,
            energy=energy,
            frequency_model=frequency_model,
            dispatcher_name=config.get("dispatcher", "directional"),
            random_seed=config.get("random_seed"),
            strict_capacity=config.get("strict_capacity", True),
        )
