"""volunteermatch: location-based volunteer recommendation for projects."""

from .domain import (
    LocationConstraint,
    LocationDescriptor,
    LocationMatcher,
    LocationTier,
    ProjectRecord,
    RegionTable,
    Volunteer,
    VolunteerLocationProfile,
)

__version__ = "0.1.0"
__all__ = [
    "LocationConstraint",
    "LocationDescriptor",
    "LocationMatcher",
    "LocationTier",
    "ProjectRecord",
    "RegionTable",
    "Volunteer",
    "VolunteerLocationProfile",
]
