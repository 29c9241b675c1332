from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from dispatch import Dispatcher, PendingRequest, get_dispatcher

from .config import SimulationConfig
from .elevator import Elevator
from .frequency import HOURS_PER_DAY
from .passenger import Passenger, PassengerState
from .report import ElevatorSummary, SimulationReport, print_report

logger = logging.getLogger(__name__)


@dataclass
class MetricsSnapshot:
    time_step: int
    total_energy: float
    total_wait_steps: int
    delivered: int
    average_wait: float
    wait_p95: float


class MetricsTracker:
    def __init__(self) -> None:
        self.total_energy: float = 0.0
        self.total_wait_steps: int = 0
        self.delivered: int = 0
        self.hourly_waits: Dict[int, List[int]] = {hour: [] for hour in range(HOURS_PER_DAY)}

    def record_energy(self, amount: float) -> None:
        self.total_energy += amount

    def record_waiting_step(self) -> None:
        self.total_wait_steps += 1

    def record_delivery(self, hour: int, wait_time: int) -> None:
        self.hourly_waits[hour].append(wait_time)
        self.delivered += 1

    @property
    def average_wait(self) -> float:
        if not self.delivered:
            return 0.0
        return self.total_wait_steps / self.delivered

    def hourly_average_wait(self) -> Dict[int, float]:
        return {hour: self._average(waits) for hour, waits in self.hourly_waits.items() if waits}

    def all_wait_samples(self) -> List[int]:
        return [wait for waits in self.hourly_waits.values() for wait in waits]

    def _average(self, values: List[int]) -> float:
        if not values:
            return 0.0
        return sum(values) / len(values)

    def _percentile(self, values: List[int], percentile: float) -> float:
        if not values:
            return 0.0
        sorted_vals = sorted(values)
        k = (len(sorted_vals) - 1) * percentile
        f = math.floor(k)
        c = math.ceil(k)
        if f == c:
            return float(sorted_vals[int(k)])
        d0 = sorted_vals[int(f)] * (c - k)
        d1 = sorted_vals[int(c)] * (k - f)
        return float(d0 + d1)

    def snapshot(self, time_step: int) -> MetricsSnapshot:
        return MetricsSnapshot(
            time_step=time_step,
            total_energy=self.total_energy,
            total_wait_steps=self.total_wait_steps,
            delivered=self.delivered,
            average_wait=self.average_wait,
            wait_p95=self._percentile(self.all_wait_samples(), 0.95),
        )


class Simulation:
    """Time-stepped elevator bank simulation measuring energy and waiting time.

    Each step runs, in order: arrival generation, one tick per elevator in
    id order, a dispatch retry for every waiting passenger, and reaping of
    delivered passengers into the hourly wait statistics.
    """

    def __init__(
        self,
        config: SimulationConfig,
        dispatcher: Optional[Dispatcher] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        config.validate()
        self.config = config
        self.dispatcher = dispatcher or get_dispatcher(config.dispatcher_name)
        self.random = rng or random.Random(config.random_seed)
        self.frequency_model = config.frequency_model
        constraints = config.constraints
        self.elevators: List[Elevator] = [
            Elevator(
                elevator_id=i,
                capacity=constraints.capacity,
                load_factor=constraints.load_factor,
                door_duration=constraints.door_duration,
                current_floor=constraints.starting_floor,
                energy_costs=config.energy,
            )
            for i in range(config.elevator_count)
        ]
        self.passengers: Dict[int, Passenger] = {}
        self.current_time: int = 0
        self.metrics = MetricsTracker()
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self._next_passenger_id = 0

    @property
    def num_floors(self) -> int:
        return self.config.num_floors

    @property
    def hour_of_day(self) -> int:
        return (self.current_time // self.config.steps_per_hour) % HOURS_PER_DAY

    def run(self, total_hours: Optional[int] = None) -> SimulationReport:
        hours = self.config.total_hours if total_hours is None else total_hours
        steps = hours * self.config.steps_per_hour
        logger.info(
            "Running %d steps with %d elevators over %d floors",
            steps,
            len(self.elevators),
            self.num_floors,
        )
        for _ in range(steps):
            self.step()
        report = self.report()
        logger.info(
            "Finished at step %d: %d delivered, energy %.2f",
            self.current_time,
            report.delivered,
            report.total_energy,
        )
        return report

    def step(self) -> None:
        self._generate_arrival()
        for elevator in self.elevators:
            self.metrics.record_energy(elevator.tick(self.passengers))
        for passenger in self._waiting_passengers():
            self.metrics.record_waiting_step()
            self._dispatch(passenger)
        self._reap_delivered()
        self.current_time += 1

    def spawn_passenger(self, origin: int, destination: int) -> Passenger:
        for floor in (origin, destination):
            if not 0 <= floor < self.num_floors:
                raise ValueError(f"Floor {floor} is outside floors 0..{self.num_floors - 1}")
        if origin == destination:
            raise ValueError("Origin and destination must differ")
        passenger = Passenger(
            passenger_id=self._next_passenger_id,
            origin=origin,
            destination=destination,
            request_time=self.current_time,
        )
        self._next_passenger_id += 1
        self.passengers[passenger.passenger_id] = passenger
        self._emit("arrival", {"time": self.current_time, "passenger": passenger})
        self._dispatch(passenger)
        return passenger

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def snapshot(self) -> dict:
        return {
            "time": self.current_time,
            "hour": self.hour_of_day,
            "elevators": [
                {
                    "id": elevator.elevator_id,
                    "floor": elevator.current_floor,
                    "direction": elevator.direction.name.lower(),
                    "doors_open": elevator.doors_open,
                    "stops": sorted(elevator.stops),
                    "passenger_count": elevator.load,
                    "energy": elevator.energy,
                }
                for elevator in self.elevators
            ],
            "waiting": len(self._waiting_passengers()),
            "delivered": self.metrics.delivered,
            "total_energy": self.metrics.total_energy,
        }

    def report(self) -> SimulationReport:
        snapshot = self.metrics.snapshot(self.current_time)
        waiting = sum(1 for p in self.passengers.values() if p.state is PassengerState.WAITING)
        in_transit = sum(1 for p in self.passengers.values() if p.state is PassengerState.IN_TRANSIT)
        return SimulationReport(
            steps=self.current_time,
            delivered=snapshot.delivered,
            waiting=waiting,
            in_transit=in_transit,
            total_energy=snapshot.total_energy,
            average_wait=snapshot.average_wait,
            wait_p95=snapshot.wait_p95,
            hourly_average_wait=self.metrics.hourly_average_wait(),
            elevators=[
                ElevatorSummary(
                    elevator_id=e.elevator_id,
                    energy=e.energy,
                    floors_travelled=e.floors_travelled,
                )
                for e in self.elevators
            ],
        )

    def _generate_arrival(self) -> None:
        probability = self.frequency_model.get_frequency(self.hour_of_day)
        if self.random.random() >= probability:
            return
        origin = self.random.randrange(self.num_floors)
        destination = self.random.randrange(self.num_floors)
        if origin == destination:
            logger.debug("Discarding arrival at step %d: origin equals destination", self.current_time)
            return
        self.spawn_passenger(origin, destination)

    def _waiting_passengers(self) -> List[Passenger]:
        return [p for p in self.passengers.values() if p.is_waiting]

    def _dispatch(self, passenger: Passenger) -> Optional[Elevator]:
        request = PendingRequest(
            passenger_id=passenger.passenger_id,
            origin=passenger.origin,
            direction=int(passenger.direction),
            requested_at=passenger.request_time,
        )
        snapshots = [elevator.snapshot() for elevator in self.elevators]
        elevator_id = self.dispatcher.select_elevator(snapshots, request)
        if elevator_id is None:
            return None
        elevator = self.elevators[elevator_id]
        elevator.board(passenger)
        logger.debug(
            "Passenger %d (%d -> %d) assigned to elevator %d",
            passenger.passenger_id,
            passenger.origin,
            passenger.destination,
            elevator_id,
        )
        self._emit("dispatch", {"time": self.current_time, "passenger": passenger, "elevator_id": elevator_id})
        return elevator

    def _reap_delivered(self) -> None:
        delivered = [p for p in self.passengers.values() if p.is_delivered]
        for passenger in delivered:
            wait_time = self.current_time - passenger.request_time
            self.metrics.record_delivery(self.hour_of_day, wait_time)
            del self.passengers[passenger.passenger_id]
            self._emit(
                "delivery",
                {"time": self.current_time, "passenger": passenger, "wait_time": wait_time},
            )

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)


def run_simulation(
    config: SimulationConfig,
    reporter: Optional[Callable[[SimulationReport], None]] = print_report,
    total_hours: Optional[int] = None,
) -> SimulationReport:
    """Build a simulation from ``config``, run it and pass the report on."""

    simulation = Simulation(config)
    report = simulation.run(total_hours)
    if reporter is not None:
        reporter(report)
    return report
