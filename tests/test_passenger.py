import pytest

from simulation import Direction, Passenger, PassengerState, PassengerStateError


def test_direction_follows_destination():
    assert Passenger(0, origin=2, destination=7, request_time=0).direction is Direction.UP
    assert Passenger(1, origin=7, destination=2, request_time=0).direction is Direction.DOWN


def test_forward_lifecycle():
    passenger = Passenger(0, origin=0, destination=3, request_time=5)
    assert passenger.is_waiting
    assert passenger.elevator_id is None

    passenger.mark_boarded(2)
    assert passenger.state is PassengerState.IN_TRANSIT
    assert passenger.elevator_id == 2

    passenger.mark_delivered()
    assert passenger.is_delivered


def test_delivering_twice_is_rejected():
    passenger = Passenger(0, origin=0, destination=3, request_time=0)
    passenger.mark_boarded(0)
    passenger.mark_delivered()
    with pytest.raises(PassengerStateError):
        passenger.mark_delivered()


def test_cannot_deliver_waiting_or_reboard():
    passenger = Passenger(0, origin=0, destination=3, request_time=0)
    with pytest.raises(PassengerStateError):
        passenger.mark_delivered()
    passenger.mark_boarded(0)
    with pytest.raises(PassengerStateError):
        passenger.mark_boarded(1)
