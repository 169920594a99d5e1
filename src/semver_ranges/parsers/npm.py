"""npm operator-set range parsing.

Supported expressions:
- exact versions (e.g., "1.2.3", "=1.2.3", "v1.2.3")
- caret ranges ^x.y.z → >=x.y.z,<x+1.0.0 (leftmost non-zero component is held)
- tilde ranges ~x.y.z → >=x.y.z,<x.y+1.0
- x-ranges "1.2.x", "1.*", "1.2" → >=1.2.0,<1.3.0
- hyphen ranges "1.2.3 - 2.3.4" → >=1.2.3,<=2.3.4
- comparator sets split by spaces, e.g., ">=1.0.0 <2.0.0"

A VersionRange is a single interval, so unions ("||") and sets that leave
both sides open ("*") are not ranges. Pre-release tags are compared by plain
semver precedence; npm's rule that excludes pre-releases from other
release tuples is not applied.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..models.version_range import VersionRange
from ..versions import Version

logger = logging.getLogger(__name__)

_OPERATOR_SPACING = re.compile(r"(<=|>=|~>|<|>|=|\^|~)\s+")
_HYPHEN_RANGE = re.compile(r"^(\S+)\s+-\s+(\S+)$")
_COMPARATOR = re.compile(r"^(<=|>=|~>|<|>|=|\^|~)?(.+)$")
_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"
_PARTIAL_VERSION = re.compile(
    r"^[v=]?(?P<major>0|[1-9]\d*|[xX*])"
    r"(?:\.(?P<minor>0|[1-9]\d*|[xX*]))?"
    r"(?:\.(?P<patch>0|[1-9]\d*|[xX*]))?"
    rf"(?:-(?P<prerelease>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?$"
)
_WILDCARDS = {"x", "X", "*"}


class _NotARange(ValueError):
    """Raised internally when an expression cannot describe a single interval."""


@dataclass(frozen=True)
class _Partial:
    """A version with trailing components possibly left out or wildcarded."""

    major: int | None
    minor: int | None
    patch: int | None
    prerelease: str | None = None
    build: str | None = None

    @property
    def is_any(self) -> bool:
        return self.major is None

    @property
    def is_full(self) -> bool:
        return self.patch is not None

    def floor(self) -> Version:
        return Version(
            self.major or 0,
            self.minor or 0,
            self.patch or 0,
            self.prerelease,
            self.build,
        )

    def ceiling(self) -> Version:
        """Return the first version past every version this partial matches."""
        if self.minor is None:
            return Version(self.major + 1, 0, 0)
        return Version(self.major, self.minor + 1, 0)


@dataclass(frozen=True)
class _Bound:
    version: Version
    inclusive: bool


def _parse_partial(token: str) -> _Partial:
    match = _PARTIAL_VERSION.match(token)
    if match is None:
        raise _NotARange(f"invalid version {token!r}")

    numbers: list[int | None] = []
    for name in ("major", "minor", "patch"):
        raw = match.group(name)
        # Anything after a wildcard is a wildcard too ("1.x.3" means "1.x").
        if raw is None or raw in _WILDCARDS or (numbers and numbers[-1] is None):
            numbers.append(None)
        else:
            numbers.append(int(raw))

    major, minor, patch = numbers
    prerelease = match.group("prerelease")
    if prerelease is not None and patch is None:
        raise _NotARange(f"pre-release on a partial version {token!r}")
    return _Partial(major, minor, patch, prerelease, match.group("build"))


def _next_major(p: _Partial) -> Version:
    return Version((p.major or 0) + 1, 0, 0)


def _next_minor(p: _Partial) -> Version:
    return Version(p.major or 0, (p.minor or 0) + 1, 0)


def _caret_ceiling(p: _Partial) -> Version:
    if p.major != 0 or p.minor is None:
        return _next_major(p)
    if p.minor != 0 or p.patch is None:
        return _next_minor(p)
    return Version(0, 0, p.patch + 1)


def _tilde_ceiling(p: _Partial) -> Version:
    if p.minor is None:
        return _next_major(p)
    return _next_minor(p)


def _comparator_bounds(operator: str, p: _Partial) -> tuple[_Bound | None, _Bound | None]:
    if p.is_any:
        if operator in (">", "<"):
            raise _NotARange(f"nothing is {operator} *")
        return None, None

    lower = _Bound(p.floor(), True)

    if operator in ("", "="):
        if p.is_full:
            return lower, _Bound(p.floor(), True)
        return lower, _Bound(p.ceiling(), False)
    if operator == ">=":
        return lower, None
    if operator == ">":
        if p.is_full:
            return _Bound(p.floor(), False), None
        return _Bound(p.ceiling(), True), None
    if operator == "<":
        return None, _Bound(p.floor(), False)
    if operator == "<=":
        if p.is_full:
            return None, _Bound(p.floor(), True)
        return None, _Bound(p.ceiling(), False)
    if operator == "^":
        return lower, _Bound(_caret_ceiling(p), False)
    if operator in ("~", "~>"):
        return lower, _Bound(_tilde_ceiling(p), False)
    raise _NotARange(f"unknown operator {operator!r}")  # pragma: no cover


def _hyphen_bounds(start: str, end: str) -> tuple[_Bound | None, _Bound | None]:
    low = _parse_partial(start)
    high = _parse_partial(end)

    lower = None if low.is_any else _Bound(low.floor(), True)
    if high.is_any:
        upper = None
    elif high.is_full:
        upper = _Bound(high.floor(), True)
    else:
        upper = _Bound(high.ceiling(), False)
    return lower, upper


def _tighter_lower(a: _Bound | None, b: _Bound | None) -> _Bound | None:
    if a is None or b is None:
        return a or b
    if a.version != b.version:
        return a if a.version > b.version else b
    return a if not a.inclusive else b


def _tighter_upper(a: _Bound | None, b: _Bound | None) -> _Bound | None:
    if a is None or b is None:
        return a or b
    if a.version != b.version:
        return a if a.version < b.version else b
    return a if not a.inclusive else b


def _parse_comparator_set(expr: str) -> tuple[_Bound | None, _Bound | None]:
    hyphen = _HYPHEN_RANGE.match(expr)
    if hyphen is not None:
        return _hyphen_bounds(hyphen.group(1), hyphen.group(2))

    lower: _Bound | None = None
    upper: _Bound | None = None
    for token in _OPERATOR_SPACING.sub(r"\1", expr).split():
        match = _COMPARATOR.match(token)
        if match is None:  # pragma: no cover - split() never yields empty tokens
            raise _NotARange(f"invalid comparator {token!r}")
        low, high = _comparator_bounds(match.group(1) or "", _parse_partial(match.group(2)))
        lower = _tighter_lower(lower, low)
        upper = _tighter_upper(upper, high)
    return lower, upper


class NpmRangeParser:
    """Parser for npm version ranges. Stateless; share freely."""

    dialect = "npm"

    def parse(self, text: str | None) -> VersionRange | None:
        """Return the range described by ``text``, or None if it is not one."""
        if text is None or not isinstance(text, str) or not text.strip():
            return None
        expr = text.strip()

        if "||" in expr:
            logger.debug("Not an npm range %r: unions are not a single interval", expr)
            return None

        try:
            lower, upper = _parse_comparator_set(expr)
        except _NotARange as exc:
            logger.debug("Not an npm range %r: %s", expr, exc)
            return None

        if lower is None and upper is None:
            logger.debug("Not an npm range %r: no bounds", expr)
            return None

        if lower is not None and upper is not None:
            if lower.version > upper.version or (
                lower.version == upper.version and not (lower.inclusive and upper.inclusive)
            ):
                logger.debug("Not an npm range %r: no version satisfies it", expr)
                return None

        return VersionRange(
            lower.version if lower else None,
            upper.version if upper else None,
            lower.inclusive if lower else True,
            upper.inclusive if upper else False,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} dialect={self.dialect!r}>"
