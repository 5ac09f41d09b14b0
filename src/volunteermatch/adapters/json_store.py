"""Adapter: JSON snapshot files implementing the project and volunteer ports.

Each file holds a JSON list of backend rows (as exported from the hosted
``projects`` table or the volunteer selection RPC).
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from ..domain.locations import ProjectRecord, Volunteer
from ..errors import ProjectLookupError, VolunteerLookupError

VOLUNTEER_ROLE = "volunteer"
ACTIVE_STATUS = "active"


def _read_rows(path: Path, error_cls: type[Exception]) -> list[dict]:
    if not path.exists():
        raise error_cls(f"snapshot file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise error_cls(f"cannot read {path}: {exc}") from exc
    if not isinstance(raw, list):
        raise error_cls(f"{path} must contain a JSON list of rows")
    return raw


class JsonProjectStore:
    """Concrete ProjectStorePort backed by a JSON list of project rows."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def find_project_by_id(self, project_id: str) -> ProjectRecord | None:
        rows = _read_rows(self._path, ProjectLookupError)
        for i, row in enumerate(rows):
            if not isinstance(row, dict) or str(row.get("id")) != project_id:
                continue
            try:
                return ProjectRecord.model_validate(row)
            except ValidationError as exc:
                raise ProjectLookupError(f"invalid project row at index {i}: {exc}") from exc
        return None


class JsonVolunteerDirectory:
    """Concrete VolunteerDirectoryPort backed by a JSON list of volunteer rows.

    Only profiles with the volunteer role and active status are returned,
    in file order.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def list_volunteers(self) -> list[Volunteer]:
        rows = _read_rows(self._path, VolunteerLookupError)
        volunteers: list[Volunteer] = []
        for i, row in enumerate(rows):
            try:
                volunteer = Volunteer.model_validate(row)
            except ValidationError as exc:
                raise VolunteerLookupError(f"invalid volunteer row at index {i}: {exc}") from exc
            if volunteer.role != VOLUNTEER_ROLE or volunteer.status != ACTIVE_STATUS:
                continue
            volunteers.append(volunteer)
        return volunteers
