"""LocationMatcher: filter volunteers by a project's most specific location tier."""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from .constraint_resolver import resolve_location
from .constraints import LocationConstraint, ResolvedLocation
from .locations import LocationDescriptor, VolunteerLocationProfile
from .regions import RegionTable

P = TypeVar("P", bound=VolunteerLocationProfile)

_LOGGER = logging.getLogger("volunteermatch.matching")


class LocationMatcher:
    """Stable filter of candidate volunteers against one project location.

    Pure: inputs are read-only snapshots and nothing is written, so one
    instance can serve concurrent calls for different projects.
    """

    def __init__(
        self,
        regions: RegionTable | None = None,
        *,
        default_country: str | None = None,
        strict_codes: bool = False,
        open_call_matches_all: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._regions = regions or RegionTable.default()
        self._default_country = default_country
        self._strict = strict_codes
        self._open_call = open_call_matches_all
        self._logger = logger or _LOGGER

    @property
    def regions(self) -> RegionTable:
        return self._regions

    def resolve(self, project: LocationDescriptor) -> ResolvedLocation:
        """Resolve the active constraint; unresolved codes are logged, not fatal."""
        resolved = resolve_location(
            project,
            self._regions,
            default_country=self._default_country,
            strict=self._strict,
        )
        for warning in resolved.warnings:
            self._logger.warning(
                "unresolved_region_code",
                extra={"tier": warning.tier.value, "code": warning.code},
            )
        return resolved

    def match_volunteers(
        self,
        project: LocationDescriptor,
        candidates: Sequence[P],
    ) -> list[P]:
        """Return the candidates eligible for ``project``, in input order."""
        return self.apply(self.resolve(project).constraint, candidates)

    def apply(self, constraint: LocationConstraint, candidates: Sequence[P]) -> list[P]:
        eligible: list[P] = []
        for candidate in candidates:
            if self.allows(constraint, candidate):
                eligible.append(candidate)
        return eligible

    def allows(self, constraint: LocationConstraint, candidate: VolunteerLocationProfile) -> bool:
        if constraint.is_open:
            return self._open_call
        return constraint.value in constraint.declared(candidate)

    def reason(self, constraint: LocationConstraint, candidate: VolunteerLocationProfile) -> str:
        """Return audit reason for this candidate: 'allowed' or 'denied: <reason>'."""
        if constraint.is_open:
            return "allowed" if self._open_call else "denied: no_location"
        declared = constraint.declared(candidate)
        if not declared:
            return f"denied: no_{constraint.tier.value}_declared"
        if constraint.value not in declared:
            return f"denied: {constraint.tier.value}_mismatch"
        return "allowed"
