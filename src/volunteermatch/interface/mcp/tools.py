"""Tool registry for the MCP server.

Strict JSON schemas via Pydantic; response allowlists (field-level).
"""

from __future__ import annotations

import json
import time
from typing import Any

from ...config.runtime import get_settings
from ...domain.constraints import LocationTier
from ...domain.locations import LocationDescriptor
from ...errors import RegionTableError, UnresolvedCodeError
from ...models.mcp_requests import LocationMatchRequest, ProjectMatchRequest
from ...observability import log_tool_invocation, metrics_snapshot

# ---------------------------------------------------------------------------
# Response allowlists (field-level)
# ---------------------------------------------------------------------------
ALLOWED_CANDIDATE_KEYS = frozenset({
    "volunteer_id", "full_name", "residence_country", "residence_state",
    "volunteer_countries", "volunteer_states", "volunteer_lgas",
    "average_rating", "matched_skills",
})
ALLOWED_MATCH_RESPONSE_KEYS = frozenset({
    "request_id", "project_id", "status", "tier", "constraint_value",
    "candidates", "warnings", "error",
})
ALLOWED_RESOLVE_KEYS = frozenset({"constraint", "country_name", "state_name", "lga", "warnings"})

ALLOWED_TOOLS = frozenset({
    "volunteers_match",
    "volunteers_match_location",
    "volunteers_explain",
    "location_resolve",
    "regions_list",
    "matcher_health",
})

# In-memory trace store for volunteers_explain (request_id -> audit_trace)
_trace_store: dict[str, dict[str, Any]] = {}
_TRACE_STORE_MAX = 10_000


def _shape_match_response(response: Any) -> dict:
    """Return only allowed fields for match responses (no contact emails)."""
    d = response.model_dump(mode="json") if hasattr(response, "model_dump") else response
    out: dict = {k: d[k] for k in ALLOWED_MATCH_RESPONSE_KEYS if k in d}
    if "candidates" in out:
        out["candidates"] = [
            {k: c.get(k) for k in ALLOWED_CANDIDATE_KEYS if k in c}
            for c in out["candidates"]
        ]
    return out


def _shape_resolved(resolved: Any) -> dict:
    d = resolved.model_dump(mode="json") if hasattr(resolved, "model_dump") else resolved
    return {k: d[k] for k in ALLOWED_RESOLVE_KEYS if k in d}


def _store_trace(request_id: str, audit_trace: dict[str, Any]) -> None:
    _trace_store[request_id] = audit_trace
    while len(_trace_store) > _TRACE_STORE_MAX:
        # Drop oldest (insertion order)
        _trace_store.pop(next(iter(_trace_store)))


def _get_match_service():
    from ...wiring import build_match_service
    return build_match_service()


def _get_matcher():
    from ...wiring import build_matcher
    return build_matcher()


def register_tools(mcp):
    """Register the read-only matching tools."""

    @mcp.tool()
    def volunteers_match(project_id: str) -> str:
        """Recommend volunteers for a project by its location (lga > state > country).

        Args:
            project_id: Project identifier

        Returns:
            JSON with status (matched, no_matches, resolution_failure, invalid_location),
            tier, constraint_value, candidates, warnings, error, request_id
        """
        t0 = time.monotonic()
        request = ProjectMatchRequest(project_id=project_id.strip())
        response, audit_trace = _get_match_service().match_project(request.project_id)
        _store_trace(response.request_id, audit_trace)
        latency_ms = (time.monotonic() - t0) * 1000
        log_tool_invocation(
            "volunteers_match",
            response.request_id,
            latency_ms,
            error=response.error,
            extra={"status": response.status.value, "candidates_count": len(response.candidates)},
        )
        return json.dumps(_shape_match_response(response), indent=2)

    @mcp.tool()
    def volunteers_match_location(
        lga: str | None = None,
        state: str | None = None,
        country: str | None = None,
        required_skills: list[str] | None = None,
    ) -> str:
        """Recommend volunteers for an ad-hoc location without a stored project.

        Args:
            lga: Local government area / city (exact, case-sensitive)
            state: State code (e.g. 'LA')
            country: Country code or name (e.g. 'NG')
            required_skills: Skills used to annotate matched_skills

        Returns:
            JSON shaped like volunteers_match
        """
        t0 = time.monotonic()
        request = LocationMatchRequest(
            location=LocationDescriptor(lga=lga, state=state, country=country),
            required_skills=required_skills or [],
        )
        response, audit_trace = _get_match_service().match_location(
            request.location,
            required_skills=request.required_skills,
        )
        _store_trace(response.request_id, audit_trace)
        latency_ms = (time.monotonic() - t0) * 1000
        log_tool_invocation(
            "volunteers_match_location",
            response.request_id,
            latency_ms,
            error=response.error,
            extra={"status": response.status.value, "candidates_count": len(response.candidates)},
        )
        return json.dumps(_shape_match_response(response), indent=2)

    @mcp.tool()
    def volunteers_explain(request_id: str) -> str:
        """Return the audit trace for a prior match (per-volunteer allow/deny reasons).

        Args:
            request_id: request_id returned by a match tool
        """
        trace = _trace_store.get(request_id)
        if trace is None:
            return json.dumps({"error": "request_id not found", "request_id": request_id})
        return json.dumps(trace, indent=2)

    @mcp.tool()
    def location_resolve(
        lga: str | None = None,
        state: str | None = None,
        country: str | None = None,
    ) -> str:
        """Show which tier and canonical value a location resolves to.

        Args:
            lga: Local government area / city
            state: State code
            country: Country code or name
        """
        t0 = time.monotonic()
        descriptor = LocationDescriptor(lga=lga, state=state, country=country)
        try:
            resolved = _get_matcher().resolve(descriptor)
        except UnresolvedCodeError as exc:
            log_tool_invocation("location_resolve", None, (time.monotonic() - t0) * 1000, error=str(exc))
            return json.dumps({"error": str(exc), "tier": exc.tier, "code": exc.code})
        log_tool_invocation("location_resolve", None, (time.monotonic() - t0) * 1000)
        return json.dumps(_shape_resolved(resolved), indent=2)

    @mcp.tool()
    def regions_list(tier: str = "state") -> str:
        """List supported region codes and canonical names.

        Args:
            tier: 'state' or 'country'
        """
        if tier not in (LocationTier.state.value, LocationTier.country.value):
            raise ValueError(f"tier must be 'state' or 'country', got {tier!r}")
        regions = _get_matcher().regions
        table = regions.states if tier == LocationTier.state.value else regions.countries
        return json.dumps({"tier": tier, "regions": dict(sorted(table.items()))}, indent=2)

    @mcp.tool()
    def matcher_health() -> str:
        """Readiness: region table loads and backend snapshots are present; counters."""
        settings = get_settings()
        try:
            regions = _get_matcher().regions
        except RegionTableError as e:
            return json.dumps({"ok": False, "error": str(e)})
        snapshots = {
            "projects": settings.projects_path.exists(),
            "volunteers": settings.volunteers_path.exists(),
        }
        return json.dumps({
            "ok": all(snapshots.values()),
            "snapshots": snapshots,
            "region_counts": {"countries": len(regions.countries), "states": len(regions.states)},
            "policy": {
                "default_country": settings.default_country,
                "strict_region_codes": settings.strict_region_codes,
                "open_call_matches_all": settings.open_call_matches_all,
                "max_candidates": settings.max_candidates,
            },
            "metrics": metrics_snapshot(),
        })
