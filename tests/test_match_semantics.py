"""Tests that lock match semantics and prevent drift.

These tests encode the rules from domain.match_semantics as executable assertions.
"""

from volunteermatch.domain.constraints import LocationTier
from volunteermatch.domain.location_matcher import LocationMatcher
from volunteermatch.domain.locations import LocationDescriptor, Volunteer
from volunteermatch.domain.match_semantics import (
    RULE_EMPTY_LIST_NEVER_MATCHES,
    RULE_LGA_EXACT,
    RULE_NONE_MATCHES_NOBODY,
    RULE_PRECEDENCE,
    RULE_STATE_CANONICAL,
    RULE_UNRESOLVED_FALLTHROUGH,
    RULES_BY_TIER,
)


class TestRuleTable:
    """Every tier has exactly one rule."""

    def test_rules_cover_all_tiers(self):
        assert set(RULES_BY_TIER) == {t.value for t in LocationTier}

    def test_precedence_order(self):
        assert "lga > state > country" in RULE_PRECEDENCE


class TestRulesAgainstMatcher:
    """Each rule constant describes what LocationMatcher actually does."""

    def test_lga_exact(self):
        assert "case-sensitive" in RULE_LGA_EXACT
        matcher = LocationMatcher()
        project = LocationDescriptor(lga="Eti-Osa")
        assert matcher.match_volunteers(project, [Volunteer(volunteer_id="v", volunteer_lgas=["eti-osa"])]) == []

    def test_state_canonical(self):
        assert "state name" in RULE_STATE_CANONICAL
        resolved = LocationMatcher().resolve(LocationDescriptor(state="KN"))
        assert resolved.constraint.value == "Kano"

    def test_none_matches_nobody(self):
        assert "no volunteer matches" in RULE_NONE_MATCHES_NOBODY
        assert LocationMatcher().match_volunteers(LocationDescriptor(), [Volunteer(volunteer_id="v")]) == []

    def test_unresolved_fallthrough(self):
        assert "falls through to country" in RULE_UNRESOLVED_FALLTHROUGH
        resolved = LocationMatcher().resolve(LocationDescriptor(state="QQ", country="GH"))
        assert resolved.constraint.tier is LocationTier.country

    def test_empty_list_never_matches(self):
        assert "never matches" in RULE_EMPTY_LIST_NEVER_MATCHES
        project = LocationDescriptor(country="NG")
        assert LocationMatcher().match_volunteers(project, [Volunteer(volunteer_id="v")]) == []
