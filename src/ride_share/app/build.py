# ride_share/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ride_share.app.controllers.trips import TripHandler
from ride_share.app.hooks import NoopHooks, TripHooks
from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import ScenarioModel
from ride_share.domain.entities.driver import Driver
from ride_share.domain.entities.rider import Rider
from ride_share.domain.state import WorldState
from ride_share.io.event_logging import EventLogging
from ride_share.io.recorder import Recorder
from ride_share.runtime.policy_factory import make_pricing_policy


@dataclass
class App:
    model: ScenarioModel
    world: WorldState
    pricing: PricingPolicy
    hooks: TripHooks
    trips: TripHandler


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
    logger: logging.Logger | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    elif isinstance(cfg, ScenarioModel):
        model = cfg
    else:
        model = ScenarioModel.model_validate(cfg)

    # 1) Hooks; a recorder alone still gets business events, without log lines
    logs_on = use_logging and model.log.enabled
    if logs_on or recorder is not None:
        hooks = EventLogging(
            run_id=model.run_id,
            level=model.log.level,
            logger=logger,
            recorder=recorder,
            quiet=not logs_on,
        )
    else:
        hooks = NoopHooks()

    # 2) Pricing & world
    pricing = make_pricing_policy(model.pricing)
    world = WorldState()

    # 3) Seed entities; an out-of-range rating raises InvalidArgument here
    for d in model.drivers:
        world.add_driver(Driver(id=d.id, name=d.name, rating=d.rating))
    for r in model.riders:
        world.add_rider(Rider(id=r.id, name=r.name))

    trips = TripHandler(world=world, pricing=pricing, hooks=hooks)
    return App(model, world, pricing, hooks, trips)
