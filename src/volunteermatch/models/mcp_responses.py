"""MCP response DTOs for the match tools."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..domain.constraints import LocationTier


class MatchStatus(str, Enum):
    """Outcome of a match call.

    ``resolution_failure`` means eligibility could not be determined and
    must not be read as "nobody is eligible".
    """

    matched = "matched"
    no_matches = "no_matches"
    resolution_failure = "resolution_failure"
    invalid_location = "invalid_location"


class VolunteerCandidate(BaseModel):
    """A single volunteer recommended for the project."""

    volunteer_id: str = Field(..., description="Volunteer identifier")
    full_name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Contact email")
    residence_country: str | None = Field(default=None, description="Country of residence")
    residence_state: str | None = Field(default=None, description="State of residence")
    volunteer_countries: list[str] = Field(default_factory=list, description="Countries served")
    volunteer_states: list[str] = Field(default_factory=list, description="States served")
    volunteer_lgas: list[str] = Field(default_factory=list, description="LGAs served")
    average_rating: float = Field(default=0.0, ge=0, description="Average agency rating")
    matched_skills: list[str] = Field(default_factory=list, description="Volunteer skills the project requires")


class MatchResponse(BaseModel):
    """Output DTO for the match tools."""

    request_id: str = Field(..., description="Trace ID for this request")
    project_id: str | None = Field(default=None, description="Project that was matched, if any")
    status: MatchStatus = Field(..., description="Outcome of the match")
    tier: LocationTier = Field(default=LocationTier.none, description="Tier that decided the match")
    constraint_value: str = Field(default="", description="Canonical value required at that tier")
    candidates: list[VolunteerCandidate] = Field(default_factory=list, description="Eligible volunteers, input order")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal resolution warnings")
    error: str | None = Field(default=None, description="Why eligibility could not be determined")
