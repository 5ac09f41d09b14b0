"""Error types raised across volunteermatch layers."""

from __future__ import annotations


class VolunteerMatchError(Exception):
    """Base class for volunteermatch errors."""


class ProjectLookupError(VolunteerMatchError):
    """The project record could not be loaded from the backend."""


class VolunteerLookupError(VolunteerMatchError):
    """The volunteer list could not be loaded from the backend."""


class RegionTableError(VolunteerMatchError):
    """The region code table is missing or malformed."""


class UnresolvedCodeError(VolunteerMatchError, ValueError):
    """A region code has no entry in the table (strict mode only)."""

    def __init__(self, tier: str, code: str) -> None:
        super().__init__(f"unresolved {tier} code: {code!r}")
        self.tier = tier
        self.code = code
