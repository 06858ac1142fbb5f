# tests/app/test_build_and_run.py
import logging

import pytest

from ride_share.app.build import build
from ride_share.app.hooks import NoopHooks
from ride_share.domain.errors import InvalidArgument
from ride_share.io.event_logging import EventLogging


def test_build_runs():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "drivers": [{"id": 101, "name": "John Doe", "rating": 4.8}],
        "riders": [{"id": 201, "name": "Alice"}],
    }
    app = build(cfg, use_logging=False)
    ride = app.trips.open_ride(1, "Home", "Work", 5.0, "standard")
    assert app.trips.price(ride) == 7.50
    app.trips.assign(101, ride)
    app.trips.request(201, ride)
    assert app.world.get_driver(101).completed_rides == 1
    assert app.world.get_rider(201).rides == [ride]
    assert isinstance(app.hooks, NoopHooks)


def test_build_without_config_uses_defaults():
    app = build(use_logging=False)
    assert app.model.name == "demo"
    assert app.pricing.rate("premium") == 3.00
    assert app.world.drivers == {}


def test_build_honours_configured_rates():
    app = build(
        {
            "pricing": {
                "kind": "tiered",
                "tiers": {"standard": {"rate": 2.0, "label": "Standard Ride"}},
            }
        },
        use_logging=False,
    )
    ride = app.trips.open_ride(1, "A", "B", 3.0)
    assert app.trips.price(ride) == 6.0
    with pytest.raises(InvalidArgument):
        app.trips.open_ride(2, "A", "B", 3.0, "premium")


def test_build_rejects_invalid_seed_driver():
    with pytest.raises(InvalidArgument, match="Rating must be between 0 and 5"):
        build({"drivers": [{"id": 102, "name": "Invalid", "rating": 6.0}]}, use_logging=False)


def test_log_config_selects_hooks():
    logger = logging.getLogger("test.ride_share.select")
    assert isinstance(build({"log": {"enabled": False}}, logger=logger).hooks, NoopHooks)
    assert isinstance(build({"log": {"level": "WARNING"}}, logger=logger).hooks, EventLogging)
