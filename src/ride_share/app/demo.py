# ride_share/app/demo.py
"""
Console walkthrough of the ride model: fares per variant, a driver's served
rides, a rider's history, a mixed list priced through the same call, and the
validation errors.
"""

import argparse
import sys
from pathlib import Path

from ride_share.app.build import App, build
from ride_share.config.models import LogModel, ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.ride import PREMIUM, STANDARD
from ride_share.domain.errors import InvalidArgument
from ride_share.io.event_logging import default_json_logger
from ride_share.io.recorder import JsonlEventSink, Recorder

RULE = "------------------------"

DEMO_SCENARIO = {
    "name": "demo",
    "run_id": "demo",
    "log": {"enabled": False},
    "drivers": [{"id": 101, "name": "John Doe", "rating": 4.8}],
    "riders": [{"id": 201, "name": "Alice"}],
}


def _section(title: str) -> None:
    print(title)
    print(RULE)


def basic_fares(app: App) -> None:
    _section("Test 1: Basic Ride Creation")
    standard = app.trips.open_ride(1, "Home", "Work", 5.0, STANDARD)
    premium = app.trips.open_ride(2, "Home", "Airport", 15.0, PREMIUM)
    app.trips.price(standard)
    app.trips.price(premium)
    print("Standard Ride (5 miles):")
    print(standard.describe())
    print("\nPremium Ride (15 miles):")
    print(premium.describe())
    print()


def driver_with_rides(app: App, driver_id: int = 101) -> None:
    _section("Test 2: Driver with Multiple Rides")
    for ride in (
        app.trips.open_ride(3, "Downtown", "Mall", 3.0, STANDARD),
        app.trips.open_ride(4, "Mall", "Airport", 12.0, PREMIUM),
    ):
        app.trips.price(ride)
        app.trips.assign(driver_id, ride)
    print(app.world.get_driver(driver_id).info())
    print()


def rider_history(app: App, rider_id: int = 201) -> None:
    _section("Test 3: Rider with Ride History")
    for ride in (
        app.trips.open_ride(5, "Home", "Gym", 2.0, STANDARD),
        app.trips.open_ride(6, "Gym", "Restaurant", 4.0, PREMIUM),
    ):
        app.trips.price(ride)
        app.trips.request(rider_id, ride)
    print(app.world.get_rider(rider_id).view_rides())
    print()


def mixed_variants(app: App) -> None:
    _section("Test 4: Polymorphism Demonstration")
    rides = [
        app.trips.open_ride(7, "Point A", "Point B", 8.0, STANDARD),
        app.trips.open_ride(8, "Point C", "Point D", 8.0, PREMIUM),
    ]
    print("Same distance (8 miles), different ride types:")
    for ride in rides:
        app.trips.price(ride)
        print(ride.describe())
    print()


def error_handling(app: App) -> None:
    _section("Test 5: Error Handling")
    try:
        Driver(102, "Invalid", 6.0)
    except InvalidArgument as e:
        print(f"Caught expected error: {e}")
    try:
        app.trips.open_ride(9, "Start", "End", -5.0, STANDARD)
    except InvalidArgument as e:
        print(f"Caught expected error: {e}")
    print()


def run(app: App) -> None:
    print("=== Testing Common Scenarios ===\n")
    basic_fares(app)
    driver_with_rides(app)
    rider_history(app)
    mixed_variants(app)
    error_handling(app)


def _parse_args(argv):
    p = argparse.ArgumentParser(prog="ride-share-demo", description=__doc__)
    p.add_argument("--config", type=Path, help="JSON scenario file (defaults to the built-in demo)")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="emit JSON event logs to stderr at this level",
    )
    p.add_argument("--events", type=Path, help="write business events as JSON lines to this file")
    return p.parse_args(argv)


def load_scenario(path: Path | None) -> ScenarioModel:
    if path is None:
        return ScenarioModel.model_validate(DEMO_SCENARIO)
    return ScenarioModel.model_validate_json(path.read_text())


def main(argv=None) -> int:
    args = _parse_args(argv)
    try:
        model = load_scenario(args.config)
        if args.log_level:
            model = model.model_copy(update={"log": LogModel(level=args.log_level)})
        logger = (
            default_json_logger(level=model.log.level, stream=sys.stderr)
            if model.log.enabled
            else None
        )
        if args.events is None:
            run(build(model, logger=logger))
        else:
            with JsonlEventSink(args.events) as sink:
                run(build(model, logger=logger, recorder=Recorder(sink)))
    except (ValueError, KeyError, OSError) as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
