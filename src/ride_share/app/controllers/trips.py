# ride_share/app/controllers/trips.py

from ride_share.app.hooks import NoopHooks, TripHooks
from ride_share.app.protocols import PricingPolicy
from ride_share.domain.entities.ride import STANDARD, Ride
from ride_share.domain.errors import InvalidArgument
from ride_share.domain.state import WorldState


class TripHandler:
    def __init__(
        self,
        world: WorldState,
        pricing: PricingPolicy,
        hooks: TripHooks | None = None,
    ):
        self.world = world
        self.pricing = pricing
        self.hooks = hooks or NoopHooks()

    def open_ride(
        self, ride_id: int, pickup: str, dropoff: str, distance: float, variant: str = STANDARD
    ) -> Ride:
        try:
            ride = Ride(ride_id, pickup, dropoff, distance, variant=variant, pricing=self.pricing)
        except InvalidArgument as exc:
            self.hooks.error("open_ride", exc=exc, ride_id=ride_id)
            raise
        self.world.add_ride(ride)
        self.hooks.ride_created(ride)
        return ride

    def price(self, ride: Ride) -> float:
        ride.calculate_fare()
        self.hooks.fare_calculated(ride)
        return ride.fare

    def assign(self, driver_id: int, ride: Ride | None) -> None:
        d = self.world.get_driver(driver_id)
        try:
            d.add_ride(ride)
        except InvalidArgument as exc:
            self.hooks.error("assign", exc=exc, driver_id=driver_id)
            raise
        self.hooks.ride_assigned(d, ride)

    def request(self, rider_id: int, ride: Ride | None) -> None:
        r = self.world.get_rider(rider_id)
        try:
            r.request_ride(ride)
        except InvalidArgument as exc:
            self.hooks.error("request", exc=exc, rider_id=rider_id)
            raise
        self.hooks.ride_requested(r, ride)
