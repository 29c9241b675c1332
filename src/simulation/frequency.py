from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

HOURS_PER_DAY = 24
# Probabilities must stay strictly below one.
MAX_PROBABILITY = 0.999


@dataclass
class PeakWindow:
    start_hour: int
    end_hour: int
    multiplier: float

    def active(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


@dataclass
class ArrivalFrequencyModel:
    """Per-step arrival probability as a function of the hour of day."""

    base_probability: float = 0.01
    peaks: List[PeakWindow] = field(default_factory=list)

    @classmethod
    def default(cls) -> "ArrivalFrequencyModel":
        return cls(
            base_probability=0.01,
            peaks=[
                PeakWindow(start_hour=7, end_hour=9, multiplier=3.0),
                PeakWindow(start_hour=12, end_hour=13, multiplier=1.5),
                PeakWindow(start_hour=17, end_hour=19, multiplier=2.5),
            ],
        )

    def get_frequency(self, hour: int) -> float:
        if not 0 <= hour < HOURS_PER_DAY:
            raise ValueError(f"Hour of day must be within 0..23, got {hour}")
        multiplier = next((p.multiplier for p in self.peaks if p.active(hour)), 1.0)
        probability = self.base_probability * multiplier
        return min(max(probability, 0.0), MAX_PROBABILITY)

    def hourly_table(self) -> List[float]:
        return [self.get_frequency(hour) for hour in range(HOURS_PER_DAY)]
