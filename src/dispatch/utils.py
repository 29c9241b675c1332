from __future__ import annotations

from .interface import ElevatorSnapshot, PendingRequest

SAME_DIRECTION_MULTIPLIER = 0.5
OPPOSITE_DIRECTION_MULTIPLIER = 2.0
IDLE_MULTIPLIER = 1.0


def directional_multiplier(elevator: ElevatorSnapshot, request: PendingRequest) -> float:
    """Favour cars already travelling the passenger's way."""

    if elevator.direction == 0:
        return IDLE_MULTIPLIER
    if elevator.direction == request.direction:
        return SAME_DIRECTION_MULTIPLIER
    return OPPOSITE_DIRECTION_MULTIPLIER


def directional_score(elevator: ElevatorSnapshot, request: PendingRequest) -> float:
    """Score a car for a request; lower is better.

    The distance term is weighted by 1.5, then scaled by the direction
    multiplier: 0.5 when the car already heads the passenger's way, 2.0
    when it heads the other way and 1.0 when it is idle.
    """

    distance = abs(elevator.position - request.origin)
    return (distance + 0.5 * distance) * directional_multiplier(elevator, request)
