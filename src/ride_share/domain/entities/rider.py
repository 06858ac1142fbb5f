# ride_share/domain/entities/rider.py
from dataclasses import dataclass, field

from ride_share.domain.entities.ride import Ride
from ride_share.domain.validation import require_instance

NO_RIDES_MESSAGE = "No rides requested yet."


@dataclass
class Rider:
    id: int
    name: str
    rides: list[Ride] = field(default_factory=list, init=False)  # requested, append-only

    def request_ride(self, ride: Ride) -> None:
        self.rides.append(require_instance(ride, Ride, "Invalid ride reference"))

    def view_rides(self) -> str:
        lines = [f"Rider ID: {self.id}", f"Name: {self.name}", "Requested Rides History:"]
        if not self.rides:
            lines.append(NO_RIDES_MESSAGE)
        else:
            lines.extend(r.describe() for r in self.rides)
        return "\n".join(lines)
