from __future__ import annotations

from typing import Iterable, Optional

from .interface import ElevatorSnapshot, PendingRequest
from .utils import directional_score


class DirectionalScoreDispatcher:
    """Assigns the car with the lowest distance-and-direction score."""

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        feasible = [e for e in elevator_state if e.has_headroom]
        if not feasible:
            return None
        best = min(feasible, key=lambda e: (directional_score(e, request), e.elevator_id))
        return best.elevator_id
