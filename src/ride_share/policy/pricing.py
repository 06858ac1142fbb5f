# ride_share/policy/pricing.py
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.app.protocols import PricingPolicy

STANDARD = "standard"
PREMIUM = "premium"


@dataclass(frozen=True)
class FareTier:
    rate: float  # per mile
    label: str


DEFAULT_TIERS: dict[str, FareTier] = {
    STANDARD: FareTier(rate=1.50, label="Standard Ride"),
    PREMIUM: FareTier(rate=3.00, label="Premium Ride"),
}


class TieredPricingPolicy(PricingPolicy):
    def __init__(self, tiers: Mapping[str, FareTier] | None = None):
        self.tiers = dict(DEFAULT_TIERS if tiers is None else tiers)

    def knows(self, variant: str) -> bool:
        return variant in self.tiers

    def tier(self, variant: str) -> FareTier:
        try:
            return self.tiers[variant]
        except KeyError:
            raise KeyError(f"No fare tier for variant {variant!r}") from None

    def rate(self, variant: str) -> float:
        return self.tier(variant).rate

    def label(self, variant: str) -> str:
        return self.tier(variant).label


DEFAULT_PRICING = TieredPricingPolicy()
