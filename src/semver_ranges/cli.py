"""Command line interface for parsing ranges and checking versions.

Usage:
  semver-ranges parse "[1.0,2.0)" [--dialect nuget]
  semver-ranges check "^1.2.0" 1.4.2 --dialect npm
  semver-ranges scan constraints.json [--summary] [--warn-only]
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import ConfigError, Settings, load_settings
from .core import check_file
from .parsers import get_known_dialects, get_parser
from .summary import render_summary
from .validators.constraints_file import LOAD_ERRORS, describe_load_error
from .versions import try_parse

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FAILURES = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="semver-ranges", description=__doc__.splitlines()[0])
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Log parser decisions to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    dialects = get_known_dialects()

    p_parse = sub.add_parser("parse", help="Parse a range and print its canonical form")
    p_parse.add_argument("range")
    p_parse.add_argument("--dialect", choices=dialects, default=None)

    p_check = sub.add_parser("check", help="Check whether a version lies in a range")
    p_check.add_argument("range")
    p_check.add_argument("version")
    p_check.add_argument("--dialect", choices=dialects, default=None)

    p_scan = sub.add_parser("scan", help="Check every constraint in a JSON file")
    p_scan.add_argument("input", type=Path)
    p_scan.add_argument("--summary", action="store_true", help="Print Markdown instead of JSON")
    p_scan.add_argument("--warn-only", action="store_true")

    return parser


def _cmd_parse(args: argparse.Namespace, dialect: str) -> int:
    version_range = get_parser(dialect).parse(args.range)
    if version_range is None:
        print(f"ERROR: {args.range!r} is not a valid {dialect} range", file=sys.stderr)
        return EXIT_ERROR
    print(version_range)
    print(version_range.to_interval_notation())
    return EXIT_OK


def _cmd_check(args: argparse.Namespace, dialect: str) -> int:
    version_range = get_parser(dialect).parse(args.range)
    if version_range is None:
        print(f"ERROR: {args.range!r} is not a valid {dialect} range", file=sys.stderr)
        return EXIT_ERROR
    version = try_parse(args.version)
    if version is None:
        print(f"ERROR: {args.version!r} is not a valid version", file=sys.stderr)
        return EXIT_ERROR

    if version_range.contains(version):
        print(f"{version} satisfies {version_range}")
        return EXIT_OK
    print(f"{version} does not satisfy {version_range}")
    return EXIT_FAILURES


def _cmd_scan(args: argparse.Namespace, settings: Settings) -> int:
    try:
        report = check_file(args.input, settings)
    except LOAD_ERRORS as exc:
        print(describe_load_error(exc), file=sys.stderr)
        return EXIT_ERROR

    if args.summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))

    # Default behavior: fail on failures unless env override set or --warn-only
    if report.get("hasFailures") and not args.warn_only:
        warn_env = os.getenv("SEMVER_RANGES_WARN_ONLY", "").strip().lower()
        if warn_env in {"1", "true", "yes", "y"}:
            return EXIT_OK
        return EXIT_FAILURES

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.command == "scan":
        return _cmd_scan(args, settings)

    dialect = args.dialect or settings.default_dialect
    if args.command == "parse":
        return _cmd_parse(args, dialect)
    return _cmd_check(args, dialect)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
