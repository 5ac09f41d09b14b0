"""MCP request DTOs for the match tools."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..domain.locations import LocationDescriptor


class ProjectMatchRequest(BaseModel):
    """Input DTO for the volunteers.match tool."""

    project_id: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Project whose location drives the match",
    )


class LocationMatchRequest(BaseModel):
    """Input DTO for the volunteers.match_location tool."""

    location: LocationDescriptor = Field(
        default_factory=LocationDescriptor,
        description="Ad-hoc project location (lga/state/country)",
    )
    required_skills: list[str] = Field(
        default_factory=list,
        description="Skills used to annotate matched_skills",
    )
