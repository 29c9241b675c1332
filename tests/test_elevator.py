import pytest

from simulation import Direction, DoorOpen, Elevator, ElevatorFullError, Idle, Moving, Passenger


def make_passenger(arena, origin, destination):
    passenger = Passenger(len(arena), origin=origin, destination=destination, request_time=0)
    arena[passenger.passenger_id] = passenger
    return passenger


def test_starts_idle(energy_costs):
    elevator = Elevator(0, current_floor=3, energy_costs=energy_costs)
    assert elevator.state == Idle()
    assert elevator.direction is Direction.IDLE
    assert elevator.tick({}) == 0.0
    assert elevator.current_floor == 3


def test_single_trip_trace_and_energy(energy_costs):
    arena = {}
    elevator = Elevator(0, capacity=10, door_duration=3, energy_costs=energy_costs)
    passenger = make_passenger(arena, 0, 4)
    elevator.board(passenger)
    assert passenger.elevator_id == 0
    assert elevator.state == Moving(Direction.UP)

    for expected_floor in (1, 2, 3, 4):
        elevator.tick(arena)
        assert elevator.current_floor == expected_floor
    assert not elevator.doors_open

    elevator.tick(arena)
    assert elevator.state == DoorOpen(remaining=3, heading=Direction.UP)

    elevator.tick(arena)
    elevator.tick(arena)
    assert not passenger.is_delivered
    elevator.tick(arena)
    assert passenger.is_delivered
    assert elevator.state == Idle()
    assert elevator.stops == set()
    assert elevator.passenger_ids == []

    movement = energy_costs.movement(1)
    expected = 4 * movement + energy_costs.acceleration + energy_costs.door_operation
    assert elevator.energy == pytest.approx(expected)
    assert elevator.floors_travelled == 4


def test_door_energy_charged_once_per_cycle(energy_costs):
    arena = {}
    elevator = Elevator(0, current_floor=1, door_duration=5, energy_costs=energy_costs)
    elevator.board(make_passenger(arena, 0, 1))
    spent = [elevator.tick(arena) for _ in range(6)]
    assert spent[0] == pytest.approx(energy_costs.door_operation)
    assert sum(spent[1:]) == 0.0
    assert elevator.state == Idle()


def test_acceleration_charged_after_each_stop(energy_costs):
    arena = {}
    elevator = Elevator(0, door_duration=1, energy_costs=energy_costs)
    elevator.board(make_passenger(arena, 0, 1))
    elevator.board(make_passenger(arena, 0, 2))

    first_move = elevator.tick(arena)
    assert first_move == pytest.approx(energy_costs.acceleration + energy_costs.movement(2))
    elevator.tick(arena)  # open at 1
    elevator.tick(arena)  # close, one rider leaves
    second_move = elevator.tick(arena)
    assert second_move == pytest.approx(energy_costs.acceleration + energy_costs.movement(1))


def test_continuous_movement_has_no_acceleration(energy_costs):
    arena = {}
    elevator = Elevator(0, energy_costs=energy_costs)
    elevator.board(make_passenger(arena, 0, 3))
    elevator.tick(arena)
    assert elevator.tick(arena) == pytest.approx(energy_costs.movement(1))


def test_usable_capacity_is_truncated():
    elevator = Elevator(0, capacity=5, load_factor=0.8)
    assert elevator.usable_capacity == 4
    assert Elevator(0, capacity=1, load_factor=0.8).usable_capacity == 0
    assert not Elevator(0, capacity=1, load_factor=0.8).can_accept()


def test_board_without_headroom_raises():
    arena = {}
    elevator = Elevator(0, capacity=2, load_factor=0.8)
    elevator.board(make_passenger(arena, 0, 3))
    assert not elevator.can_accept()
    with pytest.raises(ElevatorFullError):
        elevator.board(make_passenger(arena, 0, 2))


def test_duplicate_destinations_share_one_stop():
    arena = {}
    elevator = Elevator(0)
    elevator.board(make_passenger(arena, 0, 3))
    elevator.board(make_passenger(arena, 1, 3))
    assert elevator.stops == {3}
    assert elevator.load == 2


def test_idle_car_heads_to_nearest_stop():
    arena = {}
    elevator = Elevator(0, current_floor=5)
    elevator.board(make_passenger(arena, 5, 3))
    assert elevator.direction is Direction.DOWN


def test_sweep_reverses_only_when_nothing_ahead(energy_costs):
    arena = {}
    elevator = Elevator(0, current_floor=5, door_duration=1, energy_costs=energy_costs)
    elevator.board(make_passenger(arena, 5, 7))
    elevator.board(make_passenger(arena, 5, 2))
    elevator.board(make_passenger(arena, 5, 9))
    assert elevator.direction is Direction.UP

    previous = elevator.direction
    reversals = 0
    for _ in range(30):
        elevator.tick(arena)
        current = elevator.direction
        if previous is Direction.UP and current is Direction.DOWN:
            reversals += 1
            assert not any(stop > elevator.current_floor for stop in elevator.stops)
            assert elevator.current_floor == 9
        if previous is Direction.DOWN and current is Direction.UP:
            pytest.fail("car reversed upwards with no stops above")
        previous = current

    assert reversals == 1
    assert all(p.is_delivered for p in arena.values())
    assert elevator.current_floor == 2
    assert elevator.state == Idle()


def test_boarding_during_door_cycle_keeps_heading(energy_costs):
    arena = {}
    elevator = Elevator(0, door_duration=2, energy_costs=energy_costs)
    elevator.board(make_passenger(arena, 0, 1))
    elevator.tick(arena)
    elevator.tick(arena)
    assert elevator.doors_open
    elevator.board(make_passenger(arena, 1, 3))
    assert elevator.direction is Direction.UP
    elevator.tick(arena)
    elevator.tick(arena)
    assert elevator.state == Moving(Direction.UP)
    assert elevator.stops == {3}
