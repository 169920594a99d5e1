"""semver-ranges core package.

Semantic version ranges and parsers for the NuGet bracket-interval dialect
and the npm operator dialect, both producing one canonical VersionRange.
"""

from __future__ import annotations

from .models.version_range import (
    UNDEFINED,
    InvalidRangeError,
    UndefinedRangeError,
    VersionRange,
    in_range,
)
from .parsers import NPM, NUGET, UnknownDialectError, get_parser, parse_range, satisfies
from .versions import SemverError, Version

__all__ = [
    "InvalidRangeError",
    "NPM",
    "NUGET",
    "SemverError",
    "UNDEFINED",
    "UndefinedRangeError",
    "UnknownDialectError",
    "Version",
    "VersionRange",
    "get_parser",
    "in_range",
    "parse_range",
    "satisfies",
]
