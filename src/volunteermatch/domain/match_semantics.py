"""Match semantics for location-based volunteer recommendation."""

# Rule names for reference in tests and audit
RULE_LGA_EXACT = "lga: volunteer.volunteer_lgas contains project.lga (exact, case-sensitive)"
RULE_STATE_CANONICAL = "state: volunteer.volunteer_states contains the state name resolved from project.state"
RULE_COUNTRY_CANONICAL = "country: volunteer.volunteer_countries contains the resolved country name"
RULE_NONE_MATCHES_NOBODY = "none: no resolvable location field, no volunteer matches"
RULE_PRECEDENCE = "precedence: lga > state > country; first populated tier decides, later tiers ignored"
RULE_UNRESOLVED_FALLTHROUGH = "unresolved state code: state tier treated as absent, falls through to country"
RULE_EMPTY_LIST_NEVER_MATCHES = "empty volunteer list for the active tier never matches"

RULES_BY_TIER = {
    "lga": RULE_LGA_EXACT,
    "state": RULE_STATE_CANONICAL,
    "country": RULE_COUNTRY_CANONICAL,
    "none": RULE_NONE_MATCHES_NOBODY,
}
