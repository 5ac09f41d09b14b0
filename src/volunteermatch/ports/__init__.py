"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
The hosted backend is reached exclusively through these ports.
"""

from .id_gen import RequestIdProvider, UuidRequestIdProvider
from .project_store import ProjectStorePort
from .volunteer_directory import VolunteerDirectoryPort

__all__ = [
    "ProjectStorePort",
    "RequestIdProvider",
    "UuidRequestIdProvider",
    "VolunteerDirectoryPort",
]
