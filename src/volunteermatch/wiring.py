"""Composition root: the single place where adapters are wired.

Call ``build_match_service()`` to get a fully-constructed service.
No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .adapters.json_store import JsonProjectStore, JsonVolunteerDirectory
from .config.runtime import RuntimeSettings, get_settings
from .domain.location_matcher import LocationMatcher
from .domain.regions import RegionTable
from .observability import get_logger
from .services.match_service import MatchService


def build_region_table(settings: RuntimeSettings | None = None) -> RegionTable:
    """Load the configured region table, or the bundled one."""
    settings = settings or get_settings()
    if settings.region_table_path is None:
        return RegionTable.default()
    return RegionTable.from_file(settings.region_table_path)


def build_matcher(settings: RuntimeSettings | None = None) -> LocationMatcher:
    """Construct a LocationMatcher with the configured policy."""
    settings = settings or get_settings()
    return LocationMatcher(
        build_region_table(settings),
        default_country=settings.default_country,
        strict_codes=settings.strict_region_codes,
        open_call_matches_all=settings.open_call_matches_all,
    )


def build_match_service(settings: RuntimeSettings | None = None) -> MatchService:
    """Construct a MatchService with the JSON snapshot adapters."""
    settings = settings or get_settings()
    return MatchService(
        project_store=JsonProjectStore(settings.projects_path),
        volunteer_directory=JsonVolunteerDirectory(settings.volunteers_path),
        matcher=build_matcher(settings),
        logger=get_logger(),
        max_candidates=settings.max_candidates,
    )
