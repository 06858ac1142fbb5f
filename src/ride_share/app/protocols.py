# ride_share/app/protocols.py
from typing import Protocol, runtime_checkable


@runtime_checkable
class PricingPolicy(Protocol):
    """
    Tariff lookup keyed by a ride's variant tag.
    Every tag the policy knows must resolve to a positive per-mile rate and a label.
    """

    def knows(self, variant: str) -> bool: ...
    def rate(self, variant: str) -> float: ...
    def label(self, variant: str) -> str: ...
