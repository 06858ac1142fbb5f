# ride_share/runtime/policy_factory.py
from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import PricingPolicyTieredModel, PricingPolicyUnion
from ride_share.policy.pricing import FareTier, TieredPricingPolicy


def make_pricing_policy(cfg: PricingPolicyUnion) -> PricingPolicy:
    if isinstance(cfg, PricingPolicyTieredModel):
        tiers = {tag: FareTier(rate=t.rate, label=t.label) for tag, t in cfg.tiers.items()}
        pp = TieredPricingPolicy(tiers=tiers)
        return pp
    else:
        raise TypeError(cfg)
