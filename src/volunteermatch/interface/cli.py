"""CLI commands for running volunteer matches against backend snapshots."""

import argparse
import json
import sys
from pathlib import Path

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.locations import LocationDescriptor
from ..errors import RegionTableError, UnresolvedCodeError
from ..models.mcp_responses import MatchStatus
from ..wiring import build_match_service, build_matcher

_FAILED_STATUSES = {MatchStatus.resolution_failure, MatchStatus.invalid_location}


def _settings_from_args(args: argparse.Namespace) -> RuntimeSettings:
    update = {}
    if getattr(args, "projects", None) is not None:
        update["projects_path"] = args.projects
    if getattr(args, "volunteers", None) is not None:
        update["volunteers_path"] = args.volunteers
    if getattr(args, "regions_file", None) is not None:
        update["region_table_path"] = args.regions_file
    if getattr(args, "strict", False):
        update["strict_region_codes"] = True
    return get_settings().model_copy(update=update)


def _location_from_args(args: argparse.Namespace) -> LocationDescriptor:
    return LocationDescriptor(lga=args.lga, state=args.state, country=args.country)


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lga", type=str, default=None, help="Local government area / city")
    parser.add_argument("--state", type=str, default=None, help="State code (e.g. LA)")
    parser.add_argument("--country", type=str, default=None, help="Country code or name (e.g. NG)")


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2))


def run_match(args: argparse.Namespace) -> int:
    svc = build_match_service(_settings_from_args(args))
    if args.command == "match":
        response, _ = svc.match_project(args.project_id)
    else:
        response, _ = svc.match_location(_location_from_args(args))
    _print_json(response.model_dump(mode="json"))
    if response.status in _FAILED_STATUSES:
        print(f"Error: {response.error}", file=sys.stderr)
        return 1
    return 0


def run_resolve(args: argparse.Namespace) -> int:
    matcher = build_matcher(_settings_from_args(args))
    try:
        resolved = matcher.resolve(_location_from_args(args))
    except UnresolvedCodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_json(resolved.model_dump(mode="json"))
    return 0


def run_regions(args: argparse.Namespace) -> int:
    regions = build_matcher(_settings_from_args(args)).regions
    table = regions.states if args.tier == "state" else regions.countries
    for code, name in sorted(table.items()):
        print(f"{code}\t{name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recommend volunteers for projects by location")
    parser.add_argument("--regions-file", type=Path, default=None, help="JSON region table to use")
    parser.add_argument("--strict", action="store_true", help="Reject unknown state/country codes that would decide the match")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    match_parser = subparsers.add_parser("match", help="Match volunteers to a stored project")
    match_parser.add_argument("--project-id", type=str, required=True, help="Project identifier")
    match_parser.add_argument("--projects", type=Path, default=None, help="JSON list of project rows")
    match_parser.add_argument("--volunteers", type=Path, default=None, help="JSON list of volunteer rows")

    location_parser = subparsers.add_parser("match-location", help="Match volunteers to an ad-hoc location")
    _add_location_args(location_parser)
    location_parser.add_argument("--volunteers", type=Path, default=None, help="JSON list of volunteer rows")

    resolve_parser = subparsers.add_parser("resolve", help="Show the tier a location resolves to")
    _add_location_args(resolve_parser)

    regions_parser = subparsers.add_parser("regions", help="List supported region codes")
    regions_parser.add_argument("--tier", choices=["state", "country"], default="state")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command in ("match", "match-location"):
            return run_match(args)
        if args.command == "resolve":
            return run_resolve(args)
        if args.command == "regions":
            return run_regions(args)
    except RegionTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
