# ride_share/domain/entities/driver.py
from dataclasses import dataclass, field

from ride_share.domain.entities.ride import Ride
from ride_share.domain.validation import require_between, require_instance

MIN_RATING = 0.0
MAX_RATING = 5.0


@dataclass
class Driver:
    id: int
    name: str
    rating: float
    rides: list[Ride] = field(default_factory=list, init=False)  # served, append-only

    def __post_init__(self):
        require_between(self.rating, MIN_RATING, MAX_RATING, "Rating must be between 0 and 5")

    @property
    def completed_rides(self) -> int:
        return len(self.rides)

    def add_ride(self, ride: Ride) -> None:
        self.rides.append(require_instance(ride, Ride, "Invalid ride reference"))

    def info(self) -> str:
        return (
            f"Driver ID: {self.id}\n"
            f"Name: {self.name}\n"
            f"Rating: {self.rating:.2f}\n"
            f"Completed Rides: {self.completed_rides}"
        )
