"""Typed location constraint: the single tier that decides a match."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .locations import VolunteerLocationProfile


class LocationTier(str, Enum):
    """Location tiers, least to most specific."""

    none = "none"
    country = "country"
    state = "state"
    lga = "lga"


# Profile field checked for each tier
TIER_FIELDS: dict[LocationTier, str] = {
    LocationTier.country: "volunteer_countries",
    LocationTier.state: "volunteer_states",
    LocationTier.lga: "volunteer_lgas",
}


class LocationConstraint(BaseModel):
    """The active tier and the canonical value a volunteer must list for it."""

    model_config = ConfigDict(frozen=True)

    tier: LocationTier = Field(..., description="Active tier")
    value: str = Field(default="", description="Canonical name required at that tier")

    @classmethod
    def none(cls) -> LocationConstraint:
        return cls(tier=LocationTier.none)

    @classmethod
    def country(cls, name: str) -> LocationConstraint:
        return cls(tier=LocationTier.country, value=name)

    @classmethod
    def state(cls, name: str) -> LocationConstraint:
        return cls(tier=LocationTier.state, value=name)

    @classmethod
    def lga(cls, name: str) -> LocationConstraint:
        return cls(tier=LocationTier.lga, value=name)

    @property
    def is_open(self) -> bool:
        return self.tier is LocationTier.none

    @property
    def profile_field(self) -> str | None:
        return TIER_FIELDS.get(self.tier)

    def declared(self, profile: VolunteerLocationProfile) -> list[str]:
        """Return the profile's list for this tier (empty for the none tier)."""
        field = self.profile_field
        if field is None:
            return []
        return getattr(profile, field, None) or []


class UnresolvedCode(BaseModel):
    """Non-fatal warning: a code with no entry in the region table."""

    model_config = ConfigDict(frozen=True)

    tier: LocationTier = Field(..., description="Tier the code was given for")
    code: str = Field(..., description="Normalized code as looked up")

    def __str__(self) -> str:
        return f"unresolved {self.tier.value} code {self.code!r}"


class ResolvedLocation(BaseModel):
    """Outcome of normalizing a project location against the region table."""

    constraint: LocationConstraint = Field(..., description="Active constraint")
    country_name: str | None = Field(default=None, description="Resolved country name")
    state_name: str | None = Field(default=None, description="Resolved state name")
    lga: str | None = Field(default=None, description="Trimmed LGA")
    warnings: list[UnresolvedCode] = Field(default_factory=list, description="Unresolved codes")
