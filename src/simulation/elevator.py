from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Mapping, Set, Union

from dispatch import ElevatorSnapshot

from .config import EnergyCosts
from .passenger import Direction, Passenger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Moving:
    direction: Direction


@dataclass(frozen=True)
class DoorOpen:
    remaining: int
    # Sweep direction held while parked, restored when the doors close.
    heading: Direction


CarState = Union[Idle, Moving, DoorOpen]


class ElevatorFullError(RuntimeError):
    """Raised when boarding a car that has no headroom left."""


@dataclass
class Elevator:
    """A single car: position, sweep direction, door cycle and energy meter.

    Onboard riders are held as passenger ids; the simulation owns the
    passenger objects and hands them to :meth:`tick` for lookups.
    """

    elevator_id: int
    capacity: int = 10
    load_factor: float = 0.8
    door_duration: int = 3
    current_floor: int = 0
    energy_costs: EnergyCosts = field(default_factory=EnergyCosts)
    state: CarState = field(default_factory=Idle)
    stops: Set[int] = field(default_factory=set)
    passenger_ids: List[int] = field(default_factory=list)
    energy: float = 0.0
    floors_travelled: int = 0
    _moved_last_tick: bool = False

    @property
    def direction(self) -> Direction:
        if isinstance(self.state, Moving):
            return self.state.direction
        if isinstance(self.state, DoorOpen):
            return self.state.heading
        return Direction.IDLE

    @property
    def doors_open(self) -> bool:
        return isinstance(self.state, DoorOpen)

    @property
    def usable_capacity(self) -> int:
        return math.floor(self.capacity * self.load_factor)

    @property
    def load(self) -> int:
        return len(self.passenger_ids)

    def can_accept(self) -> bool:
        return self.load < self.usable_capacity

    def board(self, passenger: Passenger) -> None:
        if not self.can_accept():
            raise ElevatorFullError(
                f"Elevator {self.elevator_id} is full ({self.load}/{self.usable_capacity})"
            )
        passenger.mark_boarded(self.elevator_id)
        self.passenger_ids.append(passenger.passenger_id)
        self.stops.add(passenger.destination)
        if isinstance(self.state, Idle):
            self.state = self._state_for(self._next_direction(Direction.IDLE))

    def tick(self, passengers: Mapping[int, Passenger]) -> float:
        """Advance one step and return the energy spent during it."""

        spent_before = self.energy
        moved = False
        if isinstance(self.state, DoorOpen):
            self._advance_door(self.state, passengers)
        elif self.current_floor in self.stops:
            self._open_doors()
        elif isinstance(self.state, Moving):
            self._move(self.state.direction)
            moved = True
        self._moved_last_tick = moved
        return self.energy - spent_before

    def snapshot(self) -> ElevatorSnapshot:
        return ElevatorSnapshot(
            elevator_id=self.elevator_id,
            position=self.current_floor,
            direction=int(self.direction),
            load=self.load,
            usable_capacity=self.usable_capacity,
        )

    def _open_doors(self) -> None:
        self.state = DoorOpen(remaining=self.door_duration, heading=self.direction)
        self.energy += self.energy_costs.door_operation
        logger.debug("Elevator %d opened doors at floor %d", self.elevator_id, self.current_floor)

    def _advance_door(self, door: DoorOpen, passengers: Mapping[int, Passenger]) -> None:
        remaining = door.remaining - 1
        if remaining > 0:
            self.state = DoorOpen(remaining=remaining, heading=door.heading)
            return

        # Alight
        staying: List[int] = []
        for passenger_id in self.passenger_ids:
            passenger = passengers[passenger_id]
            if passenger.destination == self.current_floor:
                passenger.mark_delivered()
            else:
                staying.append(passenger_id)
        self.passenger_ids = staying

        self.stops.discard(self.current_floor)
        self.state = self._state_for(self._next_direction(door.heading))
        logger.debug(
            "Elevator %d closed doors at floor %d, now %s",
            self.elevator_id,
            self.current_floor,
            self.direction.name,
        )

    def _move(self, direction: Direction) -> None:
        if not self._moved_last_tick:
            self.energy += self.energy_costs.acceleration
        self.energy += self.energy_costs.movement(self.load)
        self.current_floor += int(direction)
        self.floors_travelled += 1

    def _next_direction(self, heading: Direction) -> Direction:
        if not self.stops:
            return Direction.IDLE
        above = any(floor > self.current_floor for floor in self.stops)
        below = any(floor < self.current_floor for floor in self.stops)
        if heading is Direction.UP:
            return Direction.UP if above else Direction.DOWN
        if heading is Direction.DOWN:
            return Direction.DOWN if below else Direction.UP
        nearest = min(self.stops, key=lambda floor: (abs(floor - self.current_floor), floor))
        return Direction.UP if nearest > self.current_floor else Direction.DOWN

    @staticmethod
    def _state_for(direction: Direction) -> CarState:
        if direction is Direction.IDLE:
            return Idle()
        return Moving(direction)
