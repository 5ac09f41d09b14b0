"""Resolve a project location to the single active constraint tier."""

from __future__ import annotations

import re

from ..errors import UnresolvedCodeError
from .constraints import LocationConstraint, LocationTier, ResolvedLocation, UnresolvedCode
from .locations import LocationDescriptor
from .regions import RegionTable

# Short alphabetic values are treated as codes rather than names
_CODE_RE = re.compile(r"^[A-Za-z]{2,3}$")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _resolve_country(
    value: str | None,
    regions: RegionTable,
    warnings: list[UnresolvedCode],
) -> str | None:
    if value is None:
        return None
    name = regions.country_name(value)
    if name:
        return name
    if _CODE_RE.match(value):
        code = value.upper()
        warnings.append(UnresolvedCode(tier=LocationTier.country, code=code))
        return code
    return value


def _reject_decisive(
    warnings: list[UnresolvedCode],
    *,
    lga: str | None,
    state_name: str | None,
) -> None:
    if lga:
        return
    for warning in warnings:
        if warning.tier is LocationTier.country and state_name:
            continue
        raise UnresolvedCodeError(warning.tier.value, warning.code)


def resolve_location(
    descriptor: LocationDescriptor,
    regions: RegionTable,
    *,
    default_country: str | None = None,
    strict: bool = False,
) -> ResolvedLocation:
    """Normalize ``descriptor`` and pick the most specific resolvable tier.

    Precedence is lga, then state (only if its code resolves), then country.
    Unknown codes are reported in ``warnings``. With ``strict``, an unknown
    code raises ``UnresolvedCodeError`` when its tier would otherwise have
    decided the match; codes shadowed by a usable lga or state stay warnings.
    """
    warnings: list[UnresolvedCode] = []

    lga = _clean(descriptor.lga)
    state_code = _clean(descriptor.state)
    if state_code:
        state_code = state_code.upper()
    country = _clean(descriptor.country) or _clean(default_country)

    country_name = _resolve_country(country, regions, warnings)

    state_name = None
    if state_code:
        state_name = regions.state_name(state_code)
        if state_name is None:
            warnings.append(UnresolvedCode(tier=LocationTier.state, code=state_code))

    if lga:
        constraint = LocationConstraint.lga(lga)
    elif state_name:
        constraint = LocationConstraint.state(state_name)
    elif country_name:
        constraint = LocationConstraint.country(country_name)
    else:
        constraint = LocationConstraint.none()

    if strict:
        _reject_decisive(warnings, lga=lga, state_name=state_name)

    return ResolvedLocation(
        constraint=constraint,
        country_name=country_name,
        state_name=state_name,
        lga=lga,
        warnings=warnings,
    )
