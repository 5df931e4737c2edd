"""benchreg CLI: inspect schemas and validate report files."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from benchreg.errors import BenchregError, ConfigError


EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _build_parser(benchreg_version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchreg",
        description="benchreg: versioned schemas for benchmark-report records"
    )
    parser.add_argument("--version", action="version", version=f"benchreg {benchreg_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=None,
        help="Logging level (defaults to BENCHREG_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "registries",
        help="List registry names",
        parents=[parent_parser]
    )

    versions_parser = subparsers.add_parser(
        "versions",
        help="List the versions of a registry",
        parents=[parent_parser]
    )
    versions_parser.add_argument("registry", help="Registry name, e.g. applications-benchmarks")

    latest_parser = subparsers.add_parser(
        "latest",
        help="Print the newest available version from an ordered list",
        parents=[parent_parser]
    )
    latest_parser.add_argument("registry", help="Registry name")
    latest_parser.add_argument(
        "--order",
        default=None,
        help="Comma-separated versions, newest first (defaults to BENCHREG_LATEST_VERSION)"
    )

    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of a registry version",
        parents=[parent_parser]
    )
    schema_parser.add_argument("registry", help="Registry name")
    schema_parser.add_argument("version_key", metavar="version", help="Version key")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON or CSV file of rows against a registry version",
        parents=[parent_parser]
    )
    validate_parser.add_argument("registry", help="Registry name")
    validate_parser.add_argument("version_key", metavar="version", help="Version key")
    validate_parser.add_argument("input", type=Path, help="Path to rows file")
    validate_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default=None,
        help="Input format (defaults to the file suffix)"
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Report undeclared fields as UNKNOWN_FIELD (defaults to BENCHREG_UNKNOWN_FIELDS)"
    )
    validate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the full table report as JSON to this path"
    )
    return parser


def _print_report(report, quiet: bool) -> None:
    if quiet:
        return
    status = "OK" if report.ok else "FAILED"
    print(f"[{status}] Validated {report.registry_name}@{report.version_key}")
    print(f"  Rows: {report.total}")
    print(f"  Accepted: {len(report.accepted)}")
    print(f"  Rejected: {len(report.rejected)}")
    for rejected in report.rejected:
        for issue in rejected.failure.issues:
            print(f"  row {rejected.index}: {issue.field}: {issue.code.value} ({issue.message})")


def main():
    """Main CLI entry point for benchreg commands."""
    try:
        benchreg_version = get_version("benchreg")
    except PackageNotFoundError:
        benchreg_version = "dev"

    parser = _build_parser(benchreg_version)
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    from benchreg.config import Settings, configure_logging

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    configure_logging(settings, args.log_level)

    from benchreg import api
    from benchreg._internal.canonical_json import canonical_dumps

    try:
        if args.command == "registries":
            for name in api.default_registry().list_registries():
                print(name)
            sys.exit(EXIT_OK)

        elif args.command == "versions":
            for version_key in sorted(api.list_versions(args.registry)):
                print(version_key)
            sys.exit(EXIT_OK)

        elif args.command == "latest":
            if args.order:
                ordered = [v.strip() for v in args.order.split(",") if v.strip()]
            elif settings.latest_version:
                ordered = [settings.latest_version]
            else:
                ordered = []
            latest = api.latest_version(args.registry, ordered)
            if latest is None:
                print(f"Error: no available version for '{args.registry}' in {ordered}", file=sys.stderr)
                sys.exit(EXIT_INVALID)
            print(latest)
            sys.exit(EXIT_OK)

        elif args.command == "schema":
            spec = api.lookup(args.registry, args.version_key)
            print(json.dumps(spec.to_json_schema(), indent=2, ensure_ascii=False))
            sys.exit(EXIT_OK)

        elif args.command == "validate":
            from benchreg._internal.io.records import load_rows

            if args.strict is None:
                unknown_fields = settings.unknown_fields
            else:
                unknown_fields = "reject"
            # Resolve the schema first so an unknown version fails before reading input
            api.lookup(args.registry, args.version_key)
            rows = load_rows(args.input, args.format)
            report = api.validate_rows(
                args.registry, args.version_key, rows, unknown_fields=unknown_fields
            )
            _print_report(report, args.quiet)
            if args.output is not None:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(
                    canonical_dumps(report.model_dump(mode="json")) + "\n", encoding="utf-8"
                )
                if not args.quiet:
                    print(f"  Report: {args.output}")
            sys.exit(EXIT_OK if report.ok else EXIT_INVALID)

    except BenchregError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
