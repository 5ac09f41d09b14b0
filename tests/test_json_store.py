"""JSON snapshot adapter tests."""

import json

import pytest

from volunteermatch.adapters.json_store import JsonProjectStore, JsonVolunteerDirectory
from volunteermatch.errors import ProjectLookupError, VolunteerLookupError


def _write(path, rows) -> None:
    path.write_text(json.dumps(rows), encoding="utf-8")


class TestJsonProjectStore:
    """findProjectById over a JSON list of project rows."""

    def test_location_json_string_decoded(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1", "title": "T", "location": '{"lga": "Ikeja", "state": "LA", "country": "NG"}'}])
        project = JsonProjectStore(path).find_project_by_id("p1")
        assert project.location.lga == "Ikeja"
        assert project.location.state == "LA"

    def test_flat_location_columns_lifted(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1", "lga": None, "state": "RI", "country": "NG"}])
        project = JsonProjectStore(path).find_project_by_id("p1")
        assert project.location.state == "RI"
        assert project.location.lga is None

    def test_null_required_skills(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1", "required_skills": None}])
        assert JsonProjectStore(path).find_project_by_id("p1").required_skills == []

    def test_null_title(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1", "title": None, "location": '{"state": "LA"}'}])
        project = JsonProjectStore(path).find_project_by_id("p1")
        assert project.title == ""
        assert project.location.state == "LA"

    def test_not_found_is_none(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1"}])
        assert JsonProjectStore(path).find_project_by_id("p2") is None

    def test_unparsable_location_raises(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, [{"id": "p1", "location": "{lga: Ikeja"}])
        with pytest.raises(ProjectLookupError):
            JsonProjectStore(path).find_project_by_id("p1")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ProjectLookupError):
            JsonProjectStore(tmp_path / "absent.json").find_project_by_id("p1")

    def test_non_list_raises(self, tmp_path):
        path = tmp_path / "projects.json"
        _write(path, {"id": "p1"})
        with pytest.raises(ProjectLookupError):
            JsonProjectStore(path).find_project_by_id("p1")


class TestJsonVolunteerDirectory:
    """Volunteer rows filtered to active volunteers."""

    def test_filters_role_and_status(self, tmp_path):
        path = tmp_path / "volunteers.json"
        _write(path, [
            {"volunteer_id": "v1"},
            {"volunteer_id": "a1", "role": "agency"},
            {"volunteer_id": "v2", "status": "suspended"},
            {"volunteer_id": "v3", "role": "volunteer", "status": "active"},
        ])
        volunteers = JsonVolunteerDirectory(path).list_volunteers()
        assert [v.volunteer_id for v in volunteers] == ["v1", "v3"]

    def test_null_lists_become_empty(self, tmp_path):
        path = tmp_path / "volunteers.json"
        _write(path, [{
            "volunteer_id": "v1",
            "volunteer_countries": None,
            "volunteer_states": None,
            "volunteer_lgas": None,
            "skills": None,
            "average_rating": None,
        }])
        volunteer = JsonVolunteerDirectory(path).list_volunteers()[0]
        assert volunteer.volunteer_countries == []
        assert volunteer.volunteer_states == []
        assert volunteer.volunteer_lgas == []
        assert volunteer.skills == []
        assert volunteer.average_rating == 0.0

    def test_null_text_columns_use_defaults(self, tmp_path):
        path = tmp_path / "volunteers.json"
        _write(path, [{
            "volunteer_id": "v1",
            "full_name": None,
            "email": None,
            "role": None,
            "status": None,
        }])
        volunteers = JsonVolunteerDirectory(path).list_volunteers()
        assert [v.volunteer_id for v in volunteers] == ["v1"]
        assert volunteers[0].full_name == ""
        assert volunteers[0].email == ""
        assert volunteers[0].role == "volunteer"
        assert volunteers[0].status == "active"

    def test_invalid_row_raises(self, tmp_path):
        path = tmp_path / "volunteers.json"
        _write(path, [{"full_name": "no id"}])
        with pytest.raises(VolunteerLookupError):
            JsonVolunteerDirectory(path).list_volunteers()

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "volunteers.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(VolunteerLookupError):
            JsonVolunteerDirectory(path).list_volunteers()
