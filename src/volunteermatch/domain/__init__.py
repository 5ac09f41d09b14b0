"""Domain layer for volunteermatch."""

from .constraint_resolver import resolve_location
from .constraints import (
    LocationConstraint,
    LocationTier,
    ResolvedLocation,
    UnresolvedCode,
)
from .location_matcher import LocationMatcher
from .locations import (
    LocationDescriptor,
    ProjectRecord,
    Volunteer,
    VolunteerLocationProfile,
)
from .match_semantics import (
    RULE_COUNTRY_CANONICAL,
    RULE_EMPTY_LIST_NEVER_MATCHES,
    RULE_LGA_EXACT,
    RULE_NONE_MATCHES_NOBODY,
    RULE_PRECEDENCE,
    RULE_STATE_CANONICAL,
    RULE_UNRESOLVED_FALLTHROUGH,
)
from .regions import RegionTable

__all__ = [
    "LocationConstraint",
    "LocationDescriptor",
    "LocationMatcher",
    "LocationTier",
    "ProjectRecord",
    "RegionTable",
    "ResolvedLocation",
    "UnresolvedCode",
    "Volunteer",
    "VolunteerLocationProfile",
    "resolve_location",
    "RULE_COUNTRY_CANONICAL",
    "RULE_EMPTY_LIST_NEVER_MATCHES",
    "RULE_LGA_EXACT",
    "RULE_NONE_MATCHES_NOBODY",
    "RULE_PRECEDENCE",
    "RULE_STATE_CANONICAL",
    "RULE_UNRESOLVED_FALLTHROUGH",
]
