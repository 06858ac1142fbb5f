# tests/domain/test_rider.py
import pytest

from ride_share.domain.entities.ride import PREMIUM, Ride
from ride_share.domain.entities.rider import NO_RIDES_MESSAGE, Rider
from ride_share.domain.errors import InvalidArgument


def test_view_rides_reports_empty_history():
    out = Rider(201, "Alice").view_rides()
    assert out.splitlines() == [
        "Rider ID: 201",
        "Name: Alice",
        "Requested Rides History:",
        NO_RIDES_MESSAGE,
    ]


def test_view_rides_lists_rides_in_request_order():
    rider = Rider(201, "Alice")
    gym = Ride(5, "Home", "Gym", 2.0)
    dinner = Ride(6, "Gym", "Restaurant", 4.0, PREMIUM)
    for r in (gym, dinner):
        r.calculate_fare()
        rider.request_ride(r)

    out = rider.view_rides()
    assert NO_RIDES_MESSAGE not in out
    assert out.index(gym.describe()) < out.index(dinner.describe())
    assert "Fare: $3.00 (Standard Ride)" in out
    assert "Fare: $12.00 (Premium Ride)" in out


def test_request_ride_rejects_missing_ride_and_keeps_history():
    rider = Rider(201, "Alice")
    with pytest.raises(InvalidArgument, match="Invalid ride reference"):
        rider.request_ride(None)
    assert rider.rides == []
    assert NO_RIDES_MESSAGE in rider.view_rides()


def test_same_ride_can_be_shared_with_a_driver():
    from ride_share.domain.entities.driver import Driver

    r = Ride(1, "Home", "Work", 5.0)
    d = Driver(101, "John Doe", 4.8)
    rider = Rider(201, "Alice")
    d.add_ride(r)
    rider.request_ride(r)
    assert d.rides[0] is rider.rides[0]


def test_ride_history_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Rider(201, "Alice", rides=[None])
    assert Rider(201, "Alice").rides == []
