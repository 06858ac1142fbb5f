# ride_share/config/models.py
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    enabled: bool = True


# ------------------ PRICING -----------------------------


class FareTierModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    rate: float  # per mile
    label: str

    @field_validator("rate")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("label")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("label must not be empty")
        return v


def _default_tiers() -> dict[str, FareTierModel]:
    return {
        "standard": FareTierModel(rate=1.50, label="Standard Ride"),
        "premium": FareTierModel(rate=3.00, label="Premium Ride"),
    }


class PricingPolicyTieredModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["tiered"] = "tiered"
    tiers: dict[str, FareTierModel] = Field(default_factory=_default_tiers)

    @field_validator("tiers")
    @classmethod
    def _at_least_one(cls, v: dict[str, FareTierModel]) -> dict[str, FareTierModel]:
        if not v:
            raise ValueError("tiers must define at least one variant")
        return v


PricingPolicyUnion = Annotated[PricingPolicyTieredModel, Field(discriminator="kind")]


# ------------------ SEED ENTITIES -----------------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rating: float  # range is enforced by the Driver entity


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "demo"
    run_id: str = "local"
    log: LogModel = LogModel()
    pricing: PricingPolicyUnion = Field(default_factory=PricingPolicyTieredModel)
    drivers: list[DriverModel] = Field(default_factory=list)
    riders: list[RiderModel] = Field(default_factory=list)
