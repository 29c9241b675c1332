import pytest

from simulation import ArrivalFrequencyModel, ElevatorConstraints, EnergyCosts, SimulationConfig

COSTS = EnergyCosts(door_operation=2.0, acceleration=5.0, movement_base=1.0, movement_per_passenger=0.1)


@pytest.fixture
def energy_costs():
    return COSTS


@pytest.fixture
def quiet_config():
    """Config factory with arrivals switched off so scenarios are scripted."""

    def build(**overrides):
        values = dict(
            num_floors=5,
            elevator_count=1,
            total_hours=1,
            steps_per_hour=100,
            constraints=ElevatorConstraints(capacity=10, load_factor=0.8, door_duration=3, starting_floor=0),
            energy=COSTS,
            frequency_model=ArrivalFrequencyModel(base_probability=0.0),
            random_seed=1,
        )
        values.update(overrides)
        return SimulationConfig(**values)

    return build
