# ride_share/domain/state.py
from dataclasses import dataclass, field

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider


@dataclass
class WorldState:
    # ids are unique by convention; re-adding an id replaces the entry
    drivers: dict[int, Driver] = field(default_factory=dict)
    riders: dict[int, Rider] = field(default_factory=dict)
    rides: dict[int, Ride] = field(default_factory=dict)

    def add_driver(self, d: Driver) -> None:
        self.drivers[d.id] = d

    def add_rider(self, r: Rider) -> None:
        self.riders[r.id] = r

    def add_ride(self, ride: Ride) -> None:
        self.rides[ride.id] = ride

    def get_driver(self, driver_id: int) -> Driver:
        try:
            return self.drivers[driver_id]
        except KeyError:
            raise KeyError(f"Unknown driver {driver_id}") from None

    def get_rider(self, rider_id: int) -> Rider:
        try:
            return self.riders[rider_id]
        except KeyError:
            raise KeyError(f"Unknown rider {rider_id}") from None
