"""Port: candidate volunteer list."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.locations import Volunteer


@runtime_checkable
class VolunteerDirectoryPort(Protocol):
    """Volunteers already filtered to the volunteer role and active status.

    Raises ``VolunteerLookupError`` when the backend call fails.
    """

    def list_volunteers(self) -> list[Volunteer]: ...
