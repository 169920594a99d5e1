"""Range parsers and the registry of supported dialects.

Every dialect parser turns free-form text into one canonical VersionRange.
Text that is not a range in the dialect yields None; parsers never raise for
malformed input. The registry maps dialect names to stateless singletons so
callers can select a dialect from configuration.
"""

from __future__ import annotations

from typing import Protocol

from ..models.version_range import VersionRange
from ..versions import Version
from .npm import NpmRangeParser
from .nuget import NuGetRangeParser

DEFAULT_DIALECT = "nuget"


class RangeParser(Protocol):
    """Structural protocol shared by all dialect parsers."""

    dialect: str

    def parse(self, text: str | None) -> VersionRange | None: ...


NUGET: RangeParser = NuGetRangeParser()
NPM: RangeParser = NpmRangeParser()

# Registry of known parsers, keyed by dialect name.
PARSERS: dict[str, RangeParser] = {
    NUGET.dialect: NUGET,
    NPM.dialect: NPM,
}


class UnknownDialectError(ValueError):
    """Raised when a dialect name is not found in the registry."""


def get_parser(dialect: str) -> RangeParser:
    """Return the parser for the given dialect, or raise UnknownDialectError."""
    parser = PARSERS.get(dialect)
    if parser is None:
        known = ", ".join(get_known_dialects())
        raise UnknownDialectError(f"Unknown range dialect '{dialect}'. Known dialects: {known}")
    return parser


def get_known_dialects() -> list[str]:
    """Return a sorted list of all registered dialect names."""
    return sorted(PARSERS.keys())


def parse_range(text: str | None, dialect: str = DEFAULT_DIALECT) -> VersionRange | None:
    """Parse ``text`` with the parser registered for ``dialect``."""
    return get_parser(dialect).parse(text)


def satisfies(version: Version | str, expr: str, dialect: str = DEFAULT_DIALECT) -> bool:
    """Return True when ``version`` lies in the range ``expr``.

    Raises:
        ValueError: If ``expr`` is not a range in ``dialect`` or ``version``
            is not a valid version.
    """
    version_range = parse_range(expr, dialect)
    if version_range is None:
        raise ValueError(f"Not a valid {dialect} range: {expr!r}")
    return version_range.contains(version)


__all__ = [
    "DEFAULT_DIALECT",
    "NPM",
    "NUGET",
    "NpmRangeParser",
    "NuGetRangeParser",
    "PARSERS",
    "RangeParser",
    "UnknownDialectError",
    "get_known_dialects",
    "get_parser",
    "parse_range",
    "satisfies",
]
