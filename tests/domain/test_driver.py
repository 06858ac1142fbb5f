# tests/domain/test_driver.py
import pytest

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import PREMIUM, Ride
from ride_share.domain.errors import InvalidArgument


@pytest.mark.parametrize("rating", [0.0, 0.01, 2.5, 4.8, 5.0])
def test_rating_in_range_is_accepted(rating):
    d = Driver(101, "John Doe", rating)
    assert d.rating == rating
    assert d.completed_rides == 0


@pytest.mark.parametrize("rating", [-0.01, 5.01, 6.0, float("nan")])
def test_rating_out_of_range_is_rejected(rating):
    with pytest.raises(InvalidArgument, match="Rating must be between 0 and 5"):
        Driver(102, "Invalid", rating)


def test_add_ride_counts_served_rides():
    d = Driver(101, "John Doe", 4.8)
    rides = [Ride(i, "A", "B", float(i)) for i in range(1, 6)]
    for r in rides:
        d.add_ride(r)
    assert d.completed_rides == 5
    assert d.rides == rides
    assert "Completed Rides: 5" in d.info()


def test_add_ride_rejects_missing_ride_and_keeps_history():
    d = Driver(101, "John Doe", 4.8)
    d.add_ride(Ride(1, "A", "B", 1.0))
    with pytest.raises(InvalidArgument, match="Invalid ride reference"):
        d.add_ride(None)
    assert d.completed_rides == 1


def test_rides_are_shared_references():
    d = Driver(101, "John Doe", 4.8)
    r = Ride(4, "Mall", "Airport", 12.0, PREMIUM)
    d.add_ride(r)
    r.calculate_fare()
    assert d.rides[0] is r
    assert d.rides[0].fare == 36.0


def test_info_layout():
    d = Driver(101, "John Doe", 4.8)
    d.add_ride(Ride(3, "Downtown", "Mall", 3.0))
    d.add_ride(Ride(4, "Mall", "Airport", 12.0, PREMIUM))
    assert d.info().splitlines() == [
        "Driver ID: 101",
        "Name: John Doe",
        "Rating: 4.80",
        "Completed Rides: 2",
    ]


def test_ride_history_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Driver(101, "John Doe", 4.8, rides=[None, "x"])


def test_each_driver_starts_with_its_own_empty_history():
    a, b = Driver(1, "A", 4.0), Driver(2, "B", 4.0)
    a.add_ride(Ride(1, "Home", "Work", 5.0))
    assert a.completed_rides == 1
    assert b.rides == []
