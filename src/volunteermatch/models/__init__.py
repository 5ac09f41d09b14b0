"""Domain and MCP request/response models."""

from ..domain.locations import (
    LocationDescriptor,
    ProjectRecord,
    Volunteer,
    VolunteerLocationProfile,
)
from .mcp_requests import LocationMatchRequest, ProjectMatchRequest
from .mcp_responses import MatchResponse, MatchStatus, VolunteerCandidate

__all__ = [
    # Domain
    "LocationDescriptor",
    "ProjectRecord",
    "Volunteer",
    "VolunteerLocationProfile",
    # MCP requests
    "LocationMatchRequest",
    "ProjectMatchRequest",
    # MCP responses
    "MatchResponse",
    "MatchStatus",
    "VolunteerCandidate",
]
