"""Concrete adapters for the volunteermatch ports."""

from .json_store import JsonProjectStore, JsonVolunteerDirectory

__all__ = ["JsonProjectStore", "JsonVolunteerDirectory"]
