from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from dispatch import available_dispatchers
from simulation import (
    ArrivalFrequencyModel,
    ElevatorConstraints,
    EnergyCosts,
    PeakWindow,
    Simulation,
    SimulationConfig,
    report_to_dict,
)

logger = logging.getLogger(__name__)

MAX_SIMULATED_HOURS = 24 * 7


class ConstraintsModel(BaseModel):
    capacity: int = 10
    load_factor: float = 0.8
    door_duration: int = 3
    starting_floor: int = 0


class EnergyModel(BaseModel):
    door_operation: float = 2.0
    acceleration: float = 5.0
    movement_base: float = 1.0
    movement_per_passenger: float = 0.1


class PeakModel(BaseModel):
    start_hour: int
    end_hour: int
    multiplier: float


class ArrivalsModel(BaseModel):
    base_probability: float = 0.01
    peaks: List[PeakModel] = []


class SimulationRequest(BaseModel):
    num_floors: int = 10
    elevator_count: int = 3
    total_hours: int = Field(default=1, ge=1, le=MAX_SIMULATED_HOURS)
    steps_per_hour: int = Field(default=3600, ge=1)
    constraints: ConstraintsModel = ConstraintsModel()
    energy: EnergyModel = EnergyModel()
    arrivals: Optional[ArrivalsModel] = None
    dispatcher: str = "directional"
    random_seed: Optional[int] = None
    strict_capacity: bool = True

    def to_config(self) -> SimulationConfig:
        if self.arrivals is None:
            frequency_model = ArrivalFrequencyModel.default()
        else:
            frequency_model = ArrivalFrequencyModel(
                base_probability=self.arrivals.base_probability,
                peaks=[
                    PeakWindow(start_hour=p.start_hour, end_hour=p.end_hour, multiplier=p.multiplier)
                    for p in self.arrivals.peaks
                ],
            )
        return SimulationConfig(
            num_floors=self.num_floors,
            elevator_count=self.elevator_count,
            total_hours=self.total_hours,
            steps_per_hour=self.steps_per_hour,
            constraints=ElevatorConstraints(
                capacity=self.constraints.capacity,
                load_factor=self.constraints.load_factor,
                door_duration=self.constraints.door_duration,
                starting_floor=self.constraints.starting_floor,
            ),
            energy=EnergyCosts(
                door_operation=self.energy.door_operation,
                acceleration=self.energy.acceleration,
                movement_base=self.energy.movement_base,
                movement_per_passenger=self.energy.movement_per_passenger,
            ),
            frequency_model=frequency_model,
            dispatcher_name=self.dispatcher,
            random_seed=self.random_seed,
            strict_capacity=self.strict_capacity,
        )


app = FastAPI(title="Elevator Energy Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/frequency")
def get_frequency() -> Dict[str, List[float]]:
    return {"hourly_probability": ArrivalFrequencyModel.default().hourly_table()}


@app.get("/dispatchers")
def get_dispatchers() -> Dict[str, List[str]]:
    return {"dispatchers": available_dispatchers()}


@app.post("/simulations")
def run_simulation_request(request: SimulationRequest) -> dict:
    # Plain def: FastAPI runs the blocking loop in its threadpool.
    try:
        simulation = Simulation(request.to_config())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    report = simulation.run()
    logger.info("Served simulation of %d steps", report.steps)
    return report_to_dict(report)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
