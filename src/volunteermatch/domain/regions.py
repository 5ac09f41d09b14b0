"""Region code table: administrative codes to canonical display names."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import RegionTableError

DEFAULT_REGIONS_PATH = Path(__file__).resolve().parent.parent / "data" / "regions.json"


def _upper_keys(mapping: dict[str, str]) -> dict[str, str]:
    table: dict[str, str] = {}
    for code, name in mapping.items():
        code = code.strip().upper()
        name = name.strip()
        if not code or not name:
            raise ValueError(f"empty code or name in region table: {code!r} -> {name!r}")
        if code in table:
            raise ValueError(f"duplicate code in region table: {code!r}")
        table[code] = name
    return table


class RegionTable(BaseModel):
    """Code -> canonical name lookups for countries and states.

    Injected into the matcher so the supported region set can change
    without touching matching logic.
    """

    countries: dict[str, str] = Field(default_factory=dict, description="Country code -> name")
    states: dict[str, str] = Field(default_factory=dict, description="State code -> name")

    @field_validator("countries", "states")
    @classmethod
    def _normalize_codes(cls, value: dict[str, str]) -> dict[str, str]:
        return _upper_keys(value)

    def country_name(self, value: str) -> str | None:
        """Resolve a country code or name to its canonical name, or None."""
        value = value.strip()
        if not value:
            return None
        name = self.countries.get(value.upper())
        if name:
            return name
        folded = value.casefold()
        for canonical in self.countries.values():
            if canonical.casefold() == folded:
                return canonical
        return None

    def state_name(self, code: str) -> str | None:
        """Resolve a state code to its canonical name, or None."""
        code = code.strip().upper()
        if not code:
            return None
        return self.states.get(code)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"countries": dict(self.countries), "states": dict(self.states)}

    @classmethod
    def from_file(cls, path: str | Path) -> RegionTable:
        """Load a region table from a JSON file with ``countries``/``states`` objects."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise RegionTableError(f"cannot read region table {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise RegionTableError(f"region table {path} must be a JSON object")
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise RegionTableError(f"invalid region table {path}: {exc}") from exc

    @classmethod
    def default(cls) -> RegionTable:
        """Return the bundled region table (cached)."""
        return _load_default()


@lru_cache(maxsize=1)
def _load_default() -> RegionTable:
    return RegionTable.from_file(DEFAULT_REGIONS_PATH)
