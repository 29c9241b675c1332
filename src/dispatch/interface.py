from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for dispatch decisions."""

    elevator_id: int
    position: int
    direction: int
    load: int
    usable_capacity: int

    @property
    def available_capacity(self) -> int:
        return max(0, self.usable_capacity - self.load)

    @property
    def has_headroom(self) -> bool:
        return self.available_capacity > 0


@dataclass(frozen=True)
class PendingRequest:
    """Representation of an unassigned passenger for dispatchers."""

    passenger_id: int
    origin: int
    direction: int
    requested_at: int


class Dispatcher(Protocol):
    """Strategy interface for choosing the car that serves a passenger."""

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        """
        Return the id of the elevator that should board the passenger.

        ``None`` means no car has headroom; the caller keeps the passenger
        waiting and asks again on a later step.
        """
        ...
