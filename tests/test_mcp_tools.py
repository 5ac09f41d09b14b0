"""MCP tool tests: registered tool set, response shaping, explain traces.

Services are replaced with fakes; no snapshot files are read.
"""

import json

import pytest

from volunteermatch.domain.location_matcher import LocationMatcher
from volunteermatch.domain.locations import ProjectRecord, Volunteer
from volunteermatch.domain.regions import RegionTable
from volunteermatch.interface.mcp import tools
from volunteermatch.interface.mcp.server import create_server
from volunteermatch.services.match_service import MatchService

# Tools that must never appear: the server is read-only
FORBIDDEN_TOOLS = {"projects_update", "volunteers_delete", "regions_update", "send_email"}


class _Projects:
    def find_project_by_id(self, project_id):
        if project_id == "p1":
            return ProjectRecord(id="p1", required_skills=["teaching"], location={"state": "LA"})
        return None


class _Volunteers:
    def list_volunteers(self):
        return [
            Volunteer(
                volunteer_id="v1",
                full_name="Ada",
                email="ada@example.com",
                skills=["teaching"],
                volunteer_states=["Lagos"],
            ),
            Volunteer(volunteer_id="v2", full_name="Bola", volunteer_states=["Oyo"]),
        ]


@pytest.fixture
def server(monkeypatch):
    matcher = LocationMatcher(RegionTable.default())
    monkeypatch.setattr(
        tools,
        "_get_match_service",
        lambda: MatchService(_Projects(), _Volunteers(), matcher=matcher),
    )
    monkeypatch.setattr(tools, "_get_matcher", lambda: matcher)
    return create_server()


def _tool_names(server) -> set[str]:
    return set(server._tool_manager._tools.keys())


def _call(server, name: str, **kwargs) -> dict:
    return json.loads(server._tool_manager._tools[name].fn(**kwargs))


class TestRegistration:
    def test_exposes_exactly_allowed_tools(self, server):
        assert _tool_names(server) == tools.ALLOWED_TOOLS

    def test_no_mutating_tools(self, server):
        assert not (_tool_names(server) & FORBIDDEN_TOOLS)


class TestVolunteersMatch:
    def test_match_shapes_response(self, server):
        out = _call(server, "volunteers_match", project_id="p1")
        assert out["status"] == "matched"
        assert out["tier"] == "state"
        assert out["constraint_value"] == "Lagos"
        assert [c["volunteer_id"] for c in out["candidates"]] == ["v1"]
        assert out["candidates"][0]["matched_skills"] == ["teaching"]

    def test_email_not_exposed(self, server):
        out = _call(server, "volunteers_match", project_id="p1")
        assert "email" not in out["candidates"][0]

    def test_unknown_project_is_resolution_failure(self, server):
        out = _call(server, "volunteers_match", project_id="nope")
        assert out["status"] == "resolution_failure"
        assert out["candidates"] == []
        assert out["error"]

    def test_explain_returns_trace(self, server):
        out = _call(server, "volunteers_match", project_id="p1")
        trace = _call(server, "volunteers_explain", request_id=out["request_id"])
        reasons = {d["volunteer_id"]: d["reason"] for d in trace["decisions"]}
        assert reasons == {"v1": "allowed", "v2": "denied: state_mismatch"}

    def test_explain_unknown_request(self, server):
        out = _call(server, "volunteers_explain", request_id="missing")
        assert out["error"] == "request_id not found"


class TestLocationTools:
    def test_match_location(self, server):
        out = _call(server, "volunteers_match_location", state="oy")
        assert [c["volunteer_id"] for c in out["candidates"]] == ["v2"]

    def test_resolve_unknown_state_falls_through(self, server):
        out = _call(server, "location_resolve", state="ZZ", country="NG")
        assert out["constraint"] == {"tier": "country", "value": "Nigeria"}
        assert out["warnings"] == [{"tier": "state", "code": "ZZ"}]

    def test_regions_list_states(self, server):
        out = _call(server, "regions_list", tier="state")
        assert out["regions"]["LA"] == "Lagos"

    def test_regions_list_rejects_unknown_tier(self, server):
        with pytest.raises(ValueError):
            server._tool_manager._tools["regions_list"].fn(tier="lga")
