"""Pydantic-based runtime settings.

Loads from environment variables (with optional .env file).
Invalid values fail fast when settings are first read.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """All configuration for the matcher, its adapters and the MCP server."""

    model_config = {
        "env_prefix": "VOLUNTEERMATCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # --- Region table ---
    region_table_path: Path | None = Field(
        default=None,
        description="JSON region table (countries/states code -> name); bundled table if unset",
    )

    # --- Backend snapshots ---
    projects_path: Path = Field(
        default=Path("data/projects.json"),
        description="JSON list of project rows",
    )
    volunteers_path: Path = Field(
        default=Path("data/volunteers.json"),
        description="JSON list of volunteer rows",
    )

    # --- Matching policy ---
    default_country: str | None = Field(
        default=None,
        description="Country code assumed when a project has none (e.g. 'NG'); off by default",
    )
    strict_region_codes: bool = Field(
        default=False,
        description="Reject projects whose deciding state/country code is not in the region table",
    )
    open_call_matches_all: bool = Field(
        default=False,
        description="Let a project with no location match every volunteer",
    )
    max_candidates: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on candidates returned per match, in directory order; unlimited if unset",
    )

    @field_validator("default_country")
    @classmethod
    def _upper_country(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip().upper()
        return v or None


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
