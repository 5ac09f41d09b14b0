"""Port: project lookup (``findProjectById``)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.locations import ProjectRecord


@runtime_checkable
class ProjectStorePort(Protocol):
    """Read-only access to project rows.

    ``find_project_by_id`` returns ``None`` when the project does not exist
    and raises ``ProjectLookupError`` when the backend call itself fails.
    """

    def find_project_by_id(self, project_id: str) -> ProjectRecord | None: ...
