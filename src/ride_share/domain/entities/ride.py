# ride_share/domain/entities/ride.py
from dataclasses import dataclass, field

from ride_share.app.protocols import PricingPolicy
from ride_share.domain.errors import InvalidArgument
from ride_share.domain.validation import require_instance, require_positive
from ride_share.policy.pricing import DEFAULT_PRICING, PREMIUM, STANDARD

__all__ = ["Ride", "STANDARD", "PREMIUM"]


@dataclass
class Ride:
    """
    A single trip. The variant tag selects the fare tier from `pricing`;
    `fare` stays 0.0 until calculate_fare() is called.
    """

    id: int
    pickup: str
    dropoff: str
    distance: float  # miles
    variant: str = STANDARD
    pricing: PricingPolicy = field(default=DEFAULT_PRICING, repr=False, compare=False)
    fare: float = field(default=0.0, init=False)

    # assignable only during __init__
    _READ_ONLY = ("distance", "variant", "pricing")

    def __post_init__(self):
        require_positive(self.distance, "Distance must be greater than 0")
        require_instance(self.pricing, PricingPolicy, "Invalid pricing policy")
        if not self.pricing.knows(self.variant):
            raise InvalidArgument(f"Unknown ride variant {self.variant!r}")

    def __setattr__(self, name, value):
        if name in self._READ_ONLY and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed after a ride is created")
        super().__setattr__(name, value)

    @property
    def label(self) -> str:
        return self.pricing.label(self.variant)

    def calculate_fare(self) -> None:
        self.fare = self.distance * self.pricing.rate(self.variant)

    def describe(self) -> str:
        return (
            f"Ride ID: {self.id}\n"
            f"Pickup: {self.pickup}\n"
            f"Dropoff: {self.dropoff}\n"
            f"Distance: {self.distance:.2f} miles\n"
            f"Fare: ${self.fare:.2f} ({self.label})"
        )
