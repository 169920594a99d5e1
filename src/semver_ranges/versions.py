"""Thin typed wrapper around the ``semver`` distribution.

Range parsing only needs two things from a version type: a fallible parse
and a total order. ``semver.Version`` provides the order; this module
provides the parse in two flavours:

- strict: full ``MAJOR.MINOR.PATCH`` form only
- tolerant (default): minor and patch may be omitted, so ``"1.0"`` becomes
  ``1.0.0``
"""

from __future__ import annotations

from semver import Version

__all__ = [
    "SemverError",
    "Version",
    "coerce",
    "parse",
    "try_parse",
]


class SemverError(ValueError):
    """Raised for semver parse failures."""


def try_parse(text: object, *, strict: bool = False) -> Version | None:
    """Parse ``text`` into a Version, returning None when it is not one."""
    if not isinstance(text, str):
        return None
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        return Version.parse(cleaned, optional_minor_and_patch=not strict)
    except ValueError:
        return None


def parse(text: str, *, strict: bool = False) -> Version:
    """Parse a version string into a semver.Version.

    Args:
        text: The version string to parse (e.g. "1.2.3", or "1.2" when not strict).
        strict: Require the full MAJOR.MINOR.PATCH form.

    Returns:
        The parsed Version object.

    Raises:
        SemverError: If the version string is not valid semver.
    """
    version = try_parse(text, strict=strict)
    if version is None:
        raise SemverError(f"Invalid semver version: {text!r}")
    return version


def coerce(value: Version | str) -> Version:
    """Return ``value`` as a Version, parsing strings tolerantly."""
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse(value)
    raise SemverError(f"Expected a version or version string, got {type(value).__name__}")
