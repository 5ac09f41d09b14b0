"""CLI tests against temporary snapshot files."""

import json

import pytest

from volunteermatch.interface.cli import main


@pytest.fixture
def snapshots(tmp_path):
    projects = tmp_path / "projects.json"
    volunteers = tmp_path / "volunteers.json"
    projects.write_text(json.dumps([
        {"id": "p1", "location": '{"lga": "Ikeja", "state": "LA", "country": "NG"}'},
    ]), encoding="utf-8")
    volunteers.write_text(json.dumps([
        {"volunteer_id": "v1", "volunteer_lgas": ["Ikeja"]},
        {"volunteer_id": "v2", "volunteer_states": ["Lagos"]},
    ]), encoding="utf-8")
    return projects, volunteers


class TestMatchCommand:
    def test_match_prints_candidates(self, snapshots, capsys):
        projects, volunteers = snapshots
        code = main(["match", "--project-id", "p1", "--projects", str(projects), "--volunteers", str(volunteers)])
        out = json.loads(capsys.readouterr().out)
        assert code == 0
        assert out["tier"] == "lga"
        assert [c["volunteer_id"] for c in out["candidates"]] == ["v1"]

    def test_missing_project_exits_nonzero(self, snapshots, capsys):
        projects, volunteers = snapshots
        code = main(["match", "--project-id", "p9", "--projects", str(projects), "--volunteers", str(volunteers)])
        captured = capsys.readouterr()
        assert code == 1
        assert json.loads(captured.out)["status"] == "resolution_failure"
        assert "p9" in captured.err

    def test_match_location(self, snapshots, capsys):
        _, volunteers = snapshots
        code = main(["match-location", "--state", "LA", "--volunteers", str(volunteers)])
        out = json.loads(capsys.readouterr().out)
        assert code == 0
        assert [c["volunteer_id"] for c in out["candidates"]] == ["v2"]


class TestResolveCommand:
    def test_resolve(self, capsys):
        code = main(["resolve", "--state", "LA", "--country", "NG"])
        out = json.loads(capsys.readouterr().out)
        assert code == 0
        assert out["constraint"] == {"tier": "state", "value": "Lagos"}

    def test_strict_rejects_unknown_code(self, capsys):
        code = main(["--strict", "resolve", "--state", "ZZ"])
        assert code == 1
        assert "ZZ" in capsys.readouterr().err


class TestRegionsCommand:
    def test_lists_states(self, capsys):
        assert main(["regions"]) == 0
        assert "LA\tLagos" in capsys.readouterr().out.splitlines()

    def test_custom_regions_file(self, tmp_path, capsys):
        path = tmp_path / "regions.json"
        path.write_text(json.dumps({"countries": {"KE": "Kenya"}, "states": {}}), encoding="utf-8")
        assert main(["--regions-file", str(path), "regions", "--tier", "country"]) == 0
        assert capsys.readouterr().out.strip() == "KE\tKenya"

    def test_bad_regions_file(self, tmp_path, capsys):
        code = main(["--regions-file", str(tmp_path / "absent.json"), "regions"])
        assert code == 1
        assert "Error" in capsys.readouterr().err
