"""Passenger-to-elevator dispatch strategies."""

from __future__ import annotations

from typing import Dict, List, Type

from .directional import DirectionalScoreDispatcher
from .interface import Dispatcher, ElevatorSnapshot, PendingRequest
from .utils import directional_score

__all__ = [
    "DirectionalScoreDispatcher",
    "Dispatcher",
    "ElevatorSnapshot",
    "PendingRequest",
    "available_dispatchers",
    "directional_score",
    "get_dispatcher",
]


DISPATCHER_REGISTRY: Dict[str, Type[Dispatcher]] = {
    "directional": DirectionalScoreDispatcher,
}


def get_dispatcher(name: str, **kwargs) -> Dispatcher:
    cls = DISPATCHER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown dispatcher '{name}'. Available: {', '.join(DISPATCHER_REGISTRY)}")
    return cls(**kwargs)


def available_dispatchers() -> List[str]:
    return sorted(DISPATCHER_REGISTRY)
