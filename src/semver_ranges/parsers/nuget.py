"""NuGet bracket-interval range parsing.

Supported expressions (see
https://docs.microsoft.com/en-us/nuget/concepts/package-versioning):
- bare versions "1.0" → 1.0.0 <= v
- exact versions "[1.0]" → 1.0.0 <= v <= 1.0.0
- one-sided intervals "(1.0,)", "(,1.0]"
- two-sided intervals "[1.0,2.0)", "(1.0,2.0]"

Brackets are inclusive, parentheses exclusive, and each side is chosen
independently. Version tokens are parsed tolerantly, so "1.0" is accepted.
"""

from __future__ import annotations

import logging
import re

from ..models.version_range import VersionRange
from ..versions import try_parse

logger = logging.getLogger(__name__)

# Opening delimiter, body without nested brackets/parentheses, closing delimiter.
BRACKETS_PATTERN = re.compile(r"^([\[(])([^\[\]()]+)([\])])$")


class NuGetRangeParser:
    """Parser for NuGet version ranges. Stateless; share freely."""

    dialect = "nuget"

    def parse(self, text: str | None) -> VersionRange | None:
        """Return the range described by ``text``, or None if it is not one."""
        if text is None or not isinstance(text, str) or not text.strip():
            return None
        text = text.strip()

        # A plain version means "this version or later".
        version = try_parse(text)
        if version is not None:
            return VersionRange(version, None)

        return _parse_interval(text)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} dialect={self.dialect!r}>"


def _reject(text: str, reason: str) -> None:
    logger.debug("Not a NuGet range %r: %s", text, reason)
    return None


def _parse_interval(text: str) -> VersionRange | None:
    match = BRACKETS_PATTERN.match(text)
    if match is None:
        return _reject(text, "no interval brackets")

    minimum_inclusive = match.group(1) == "["
    maximum_inclusive = match.group(3) == "]"

    parts = [part.strip() for part in match.group(2).split(",")]
    if len(parts) > 2:
        return _reject(text, "more than two versions")

    first = parts[0] or None
    second = (parts[1] or None) if len(parts) > 1 else None
    if first is None and second is None:
        return _reject(text, "no versions")

    minimum = None
    if first is not None:
        minimum = try_parse(first)
        if minimum is None:
            return _reject(text, f"invalid version {first!r}")

    # Without a comma this is an exact match, which only [] can express.
    if len(parts) == 1:
        if not (minimum_inclusive and maximum_inclusive):
            return _reject(text, "exact version cannot be exclusive")
        return VersionRange.exact(minimum)

    maximum = None
    if second is not None:
        maximum = try_parse(second)
        if maximum is None:
            return _reject(text, f"invalid version {second!r}")

    if minimum is not None and maximum is not None:
        if minimum == maximum:
            if not (minimum_inclusive and maximum_inclusive):
                return _reject(text, "exact version cannot be exclusive")
            return VersionRange.exact(minimum)
        if minimum > maximum:
            return _reject(text, "minimum version is greater than maximum version")

    return VersionRange(minimum, maximum, minimum_inclusive, maximum_inclusive)
