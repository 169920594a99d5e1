from __future__ import annotations

import pytest

from semver_ranges.versions import SemverError, Version, coerce, parse, try_parse


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.2.3", "1.2.3"),
        ("1.0", "1.0.0"),
        ("1", "1.0.0"),
        ("  2.0.1  ", "2.0.1"),
        ("1.0.0-beta.1+build.5", "1.0.0-beta.1+build.5"),
    ],
)
def test_try_parse_tolerant(text, expected):
    assert str(try_parse(text)) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "1.0.0.0", "abc", "01.0.0", 3])
def test_try_parse_returns_none_for_invalid(text):
    assert try_parse(text) is None


def test_try_parse_strict_requires_full_version():
    assert try_parse("1.0", strict=True) is None
    assert try_parse("1.0.0", strict=True) == Version(1, 0, 0)


def test_parse_raises_semver_error():
    with pytest.raises(SemverError, match="Invalid semver version"):
        parse("1.0.0.0")


def test_coerce():
    version = Version(1, 2, 3)
    assert coerce(version) is version
    assert coerce("1.2") == Version(1, 2, 0)
    with pytest.raises(SemverError):
        coerce(1.2)
