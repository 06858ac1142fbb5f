# ride_share/io/business_events.py

from dataclasses import dataclass


# Base type for analytics records of domain actions
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within a run
    name: str  # stable event name


@dataclass
class RideCreatedBiz(BizEvent):
    ride_id: int
    variant: str
    distance: float


@dataclass
class FareCalculatedBiz(BizEvent):
    ride_id: int
    variant: str
    fare: float


@dataclass
class RideAssignedBiz(BizEvent):
    ride_id: int
    driver_id: int
    completed_rides: int


@dataclass
class RideRequestedBiz(BizEvent):
    ride_id: int
    rider_id: int
    requested_rides: int
