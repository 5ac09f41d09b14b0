"""Application services."""

from .match_service import DEFAULT_REQUIRED_SKILLS, MatchService

__all__ = ["DEFAULT_REQUIRED_SKILLS", "MatchService"]
