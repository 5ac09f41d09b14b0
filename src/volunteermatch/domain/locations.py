"""Project and volunteer location models."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _none_to_list(value: Any) -> Any:
    if value is None:
        return []
    return value


def _none_to_default(model: type[BaseModel], value: Any, info: ValidationInfo) -> Any:
    if value is None:
        return model.model_fields[info.field_name].default
    return value


class LocationDescriptor(BaseModel):
    """Location fields attached to a project. Every field is optional."""

    model_config = ConfigDict(frozen=True)

    country: str | None = Field(default=None, description="Country code (e.g. 'NG') or name")
    state: str | None = Field(default=None, description="State/province code (e.g. 'LA')")
    lga: str | None = Field(default=None, description="Local government area / city, as stored")

    @field_validator("country", "state", "lga", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @property
    def is_empty(self) -> bool:
        return not (self.country or self.state or self.lga)


class VolunteerLocationProfile(BaseModel):
    """Service areas a volunteer has declared. The three lists are independent."""

    volunteer_countries: list[str] = Field(default_factory=list, description="Countries served")
    volunteer_states: list[str] = Field(default_factory=list, description="States/provinces served")
    volunteer_lgas: list[str] = Field(default_factory=list, description="Local government areas served")

    @field_validator("volunteer_countries", "volunteer_states", "volunteer_lgas", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return _none_to_list(value)


class Volunteer(VolunteerLocationProfile):
    """A volunteer row as returned by the backend."""

    volunteer_id: str = Field(..., description="Volunteer identifier")
    full_name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Contact email")
    skills: list[str] = Field(default_factory=list, description="Declared skills")
    availability: str | None = Field(default=None, description="Availability note")
    residence_country: str | None = Field(default=None, description="Country of residence")
    residence_state: str | None = Field(default=None, description="State of residence")
    average_rating: float = Field(default=0.0, ge=0, description="Average agency rating")
    role: str = Field(default="volunteer", description="Profile role")
    status: str = Field(default="active", description="Profile status")

    @field_validator("full_name", "email", "role", "status", mode="before")
    @classmethod
    def _null_text(cls, value: Any, info: ValidationInfo) -> Any:
        return _none_to_default(cls, value, info)

    @field_validator("skills", mode="before")
    @classmethod
    def _null_skills(cls, value: Any) -> Any:
        return _none_to_list(value)

    @field_validator("average_rating", mode="before")
    @classmethod
    def _null_rating(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class ProjectRecord(BaseModel):
    """A project row as returned by ``findProjectById``.

    The backend stores ``location`` as a JSON-encoded string; it is decoded here.
    Rows selected with flattened ``lga``/``state``/``country`` columns are
    folded into ``location`` when no ``location`` value is present.
    """

    id: str = Field(..., description="Project identifier")
    title: str = Field(default="", description="Project title")
    status: str | None = Field(default=None, description="Project status")
    organization_id: str | None = Field(default=None, description="Owning agency")
    required_skills: list[str] = Field(default_factory=list, description="Skills the project needs")
    location: LocationDescriptor = Field(default_factory=LocationDescriptor, description="Project location")

    @model_validator(mode="before")
    @classmethod
    def _lift_flat_location(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("location") is not None:
            return data
        flat = {key: data[key] for key in ("lga", "state", "country") if key in data}
        if not flat:
            return data
        return {**data, "location": flat}

    @field_validator("location", mode="before")
    @classmethod
    def _decode_location(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, str):
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError(f"location is not valid JSON: {exc.msg}") from exc
            if decoded is None:
                return {}
            return decoded
        return value

    @field_validator("title", mode="before")
    @classmethod
    def _null_title(cls, value: Any, info: ValidationInfo) -> Any:
        return _none_to_default(cls, value, info)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _null_skills(cls, value: Any) -> Any:
        return _none_to_list(value)
