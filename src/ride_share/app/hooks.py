# ride_share/app/hooks.py
from typing import Protocol

from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import Ride
from ride_share.domain.entities.rider import Rider


class TripHooks(Protocol):
    def ride_created(self, ride: Ride): ...
    def fare_calculated(self, ride: Ride): ...
    def ride_assigned(self, driver: Driver, ride: Ride): ...
    def ride_requested(self, rider: Rider, ride: Ride): ...
    def error(self, op: str, *, exc: BaseException, **kw): ...


class NoopHooks:
    def ride_created(self, *_, **__):
        pass

    def fare_calculated(self, *_, **__):
        pass

    def ride_assigned(self, *_, **__):
        pass

    def ride_requested(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
