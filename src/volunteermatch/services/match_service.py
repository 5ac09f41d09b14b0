"""MatchService: project-to-volunteer recommendation by location.

Two public methods, ``match_project`` and ``match_location``, each returning
``(MatchResponse, audit_trace)``. MCP tools and the CLI are thin wrappers.

Backend failures never surface as an empty "no matches" answer: they yield
``MatchStatus.resolution_failure`` with the error attached.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..domain.constraints import ResolvedLocation
from ..domain.location_matcher import LocationMatcher
from ..domain.locations import LocationDescriptor, Volunteer
from ..domain.match_semantics import RULES_BY_TIER
from ..errors import ProjectLookupError, UnresolvedCodeError, VolunteerLookupError
from ..models.mcp_responses import MatchResponse, MatchStatus, VolunteerCandidate
from ..observability import count_unresolved_code
from ..ports.id_gen import RequestIdProvider, UuidRequestIdProvider
from ..ports.project_store import ProjectStorePort
from ..ports.volunteer_directory import VolunteerDirectoryPort

# Projects without required skills are treated as needing general help
DEFAULT_REQUIRED_SKILLS = ["general"]


class MatchService:
    """Orchestrates fetch -> resolve -> filter -> annotate."""

    def __init__(
        self,
        project_store: ProjectStorePort,
        volunteer_directory: VolunteerDirectoryPort,
        matcher: LocationMatcher | None = None,
        request_id_provider: RequestIdProvider | None = None,
        logger: Any = None,
        max_candidates: int | None = None,
    ) -> None:
        self._projects = project_store
        self._volunteers = volunteer_directory
        self._matcher = matcher or LocationMatcher()
        self._req_id = request_id_provider or UuidRequestIdProvider()
        self._logger = logger
        self._max_candidates = max_candidates

    @property
    def matcher(self) -> LocationMatcher:
        return self._matcher

    def match_project(self, project_id: str) -> tuple[MatchResponse, dict[str, Any]]:
        """Recommend volunteers for a stored project."""
        request_id = self._req_id.new_request_id()
        self._log("match_start", request_id, project_id=project_id)

        try:
            project = self._projects.find_project_by_id(project_id)
        except ProjectLookupError as exc:
            return self._failure(request_id, project_id, str(exc))
        if project is None:
            return self._failure(request_id, project_id, f"project not found: {project_id}")

        try:
            volunteers = self._volunteers.list_volunteers()
        except VolunteerLookupError as exc:
            return self._failure(request_id, project_id, str(exc))

        return self._run(
            request_id,
            project.location,
            volunteers,
            required_skills=project.required_skills,
            project_id=project_id,
        )

    def match_location(
        self,
        location: LocationDescriptor,
        volunteers: Sequence[Volunteer] | None = None,
        required_skills: list[str] | None = None,
    ) -> tuple[MatchResponse, dict[str, Any]]:
        """Recommend volunteers for an ad-hoc location.

        ``volunteers`` defaults to the full directory listing.
        """
        request_id = self._req_id.new_request_id()
        self._log("match_start", request_id, project_id=None)

        if volunteers is None:
            try:
                volunteers = self._volunteers.list_volunteers()
            except VolunteerLookupError as exc:
                return self._failure(request_id, None, str(exc))

        return self._run(request_id, location, volunteers, required_skills=required_skills or [])

    # ------------------------------------------------------------------

    def _run(
        self,
        request_id: str,
        location: LocationDescriptor,
        volunteers: Sequence[Volunteer],
        *,
        required_skills: list[str],
        project_id: str | None = None,
    ) -> tuple[MatchResponse, dict[str, Any]]:
        try:
            resolved = self._matcher.resolve(location)
        except UnresolvedCodeError as exc:
            response = MatchResponse(
                request_id=request_id,
                project_id=project_id,
                status=MatchStatus.invalid_location,
                error=str(exc),
            )
            self._log("match_invalid_location", request_id, project_id=project_id, error=str(exc))
            return response, self._trace(response, location, None, [])

        for warning in resolved.warnings:
            count_unresolved_code(warning.tier.value, warning.code)

        constraint = resolved.constraint
        eligible = self._matcher.apply(constraint, volunteers)
        truncated = 0
        if self._max_candidates is not None and len(eligible) > self._max_candidates:
            truncated = len(eligible) - self._max_candidates
            eligible = eligible[: self._max_candidates]
        decisions = [
            {
                "volunteer_id": v.volunteer_id,
                "reason": self._matcher.reason(constraint, v),
            }
            for v in volunteers
        ]

        required = required_skills or DEFAULT_REQUIRED_SKILLS
        candidates = [self._to_candidate(v, required) for v in eligible]
        response = MatchResponse(
            request_id=request_id,
            project_id=project_id,
            status=MatchStatus.matched if candidates else MatchStatus.no_matches,
            tier=constraint.tier,
            constraint_value=constraint.value,
            candidates=candidates,
            warnings=[str(w) for w in resolved.warnings],
        )
        self._log(
            "match_done",
            request_id,
            project_id=project_id,
            tier=constraint.tier.value,
            candidates_count=len(candidates),
            truncated=truncated,
        )
        trace = self._trace(response, location, resolved, decisions)
        trace["rule"] = RULES_BY_TIER[constraint.tier.value]
        trace["truncated"] = truncated
        return response, trace

    def _failure(
        self,
        request_id: str,
        project_id: str | None,
        error: str,
    ) -> tuple[MatchResponse, dict[str, Any]]:
        if self._logger:
            self._logger.warning(
                "match_resolution_failure",
                extra={"trace_id": request_id, "project_id": project_id, "error": error},
            )
        response = MatchResponse(
            request_id=request_id,
            project_id=project_id,
            status=MatchStatus.resolution_failure,
            error=error,
        )
        return response, self._trace(response, None, None, [])

    @staticmethod
    def _to_candidate(volunteer: Volunteer, required_skills: list[str]) -> VolunteerCandidate:
        return VolunteerCandidate(
            volunteer_id=volunteer.volunteer_id,
            full_name=volunteer.full_name,
            email=volunteer.email,
            residence_country=volunteer.residence_country,
            residence_state=volunteer.residence_state,
            volunteer_countries=list(volunteer.volunteer_countries),
            volunteer_states=list(volunteer.volunteer_states),
            volunteer_lgas=list(volunteer.volunteer_lgas),
            average_rating=volunteer.average_rating,
            matched_skills=[s for s in volunteer.skills if s in required_skills],
        )

    @staticmethod
    def _trace(
        response: MatchResponse,
        location: LocationDescriptor | None,
        resolved: ResolvedLocation | None,
        decisions: list[dict[str, Any]],
    ) -> dict[str, Any]:
        return {
            "request_id": response.request_id,
            "project_id": response.project_id,
            "status": response.status.value,
            "location": location.model_dump() if location is not None else None,
            "resolved": resolved.model_dump(mode="json") if resolved is not None else None,
            "decisions": decisions,
        }

    def _log(self, event: str, request_id: str, **fields: Any) -> None:
        if self._logger:
            self._logger.info(event, extra={"trace_id": request_id, **fields})
