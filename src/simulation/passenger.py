from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Direction(IntEnum):
    """Travel direction; the integer values match the +1/-1/0 convention."""

    DOWN = -1
    IDLE = 0
    UP = 1


class PassengerState(str, Enum):
    WAITING = "waiting"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"


class PassengerStateError(RuntimeError):
    """Raised when a passenger is moved backwards through its lifecycle."""


@dataclass
class Passenger:
    """Represents a rider moving between floors."""

    passenger_id: int
    origin: int
    destination: int
    request_time: int
    state: PassengerState = PassengerState.WAITING
    elevator_id: Optional[int] = None

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.destination > self.origin else Direction.DOWN

    def mark_boarded(self, elevator_id: int) -> None:
        if self.state is not PassengerState.WAITING:
            raise PassengerStateError(
                f"Passenger {self.passenger_id} cannot board from state {self.state.value}"
            )
        self.state = PassengerState.IN_TRANSIT
        self.elevator_id = elevator_id

    def mark_delivered(self) -> None:
        if self.state is not PassengerState.IN_TRANSIT:
            raise PassengerStateError(
                f"Passenger {self.passenger_id} cannot be delivered from state {self.state.value}"
            )
        self.state = PassengerState.DELIVERED

    @property
    def is_waiting(self) -> bool:
        return self.state is PassengerState.WAITING

    @property
    def is_delivered(self) -> bool:
        return self.state is PassengerState.DELIVERED
