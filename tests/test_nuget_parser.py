from __future__ import annotations

import logging

import pytest

from semver_ranges import NUGET, Version, VersionRange
from semver_ranges.parsers.nuget import NuGetRangeParser


# From https://docs.microsoft.com/en-us/nuget/concepts/package-versioning
@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.0", "1.0.0 <= v"),
        ("(1.0,)", "1.0.0 < v"),
        ("[1.0]", "1.0.0 <= v <= 1.0.0"),
        ("(,1.0]", "v <= 1.0.0"),
        ("(,1.0)", "v < 1.0.0"),
        ("[1.0,2.0]", "1.0.0 <= v <= 2.0.0"),
        ("(1.0,2.0)", "1.0.0 < v < 2.0.0"),
        ("[1.0,2.0)", "1.0.0 <= v < 2.0.0"),
    ],
)
def test_parses_valid_ranges(text, expected):
    version_range = NUGET.parse(text)
    assert version_range is not None
    assert str(version_range) == expected


@pytest.mark.parametrize(
    "text",
    [
        "(1.0.0)",  # exact version cannot be exclusive
        "[1.0.0)",
        "(1.0.0]",
        "[1.0,2.0,3.0]",  # at most two versions
        "[1.0.0.0,2.0.0.0]",  # four-part versions are not semver
        "InvalidFormat",
        None,
        "",
        "      ",
    ],
)
def test_rejects_invalid_ranges(text):
    assert NUGET.parse(text) is None


@pytest.mark.parametrize(
    "text",
    [
        "[,]",
        "(,)",
        "[ , ]",
        "[1.0,abc]",
        "[abc,1.0]",
        "[abc]",
        "[1.0",
        "1.0]",
        "[[1.0]]",
        "[(1.0,2.0)]",
        "{1.0,2.0}",
        "[2.0,1.0]",
        "(1.0,1.0)",
        "[1.0,1.0)",
        "(1.0,1.0]",
        "1.0.0.0",
        "v1.0",
        ">=1.0",
        "^1.0.0",
    ],
)
def test_rejects_other_malformed_input(text):
    assert NUGET.parse(text) is None


def test_bare_version_is_open_ended_minimum():
    version_range = NUGET.parse("1.2.3")
    assert version_range == VersionRange(Version(1, 2, 3), None, True, False)
    assert version_range.contains("99.0.0")
    assert not version_range.contains("1.2.2")


def test_trims_surrounding_and_inner_whitespace():
    assert NUGET.parse("  [ 1.0 , 2.0 )  ") == VersionRange("1.0.0", "2.0.0", True, False)


def test_equal_bounds_in_brackets_are_exact():
    assert NUGET.parse("[1.0,1.0.0]") == VersionRange.exact("1.0.0")


def test_exact_form_is_exact_range():
    version_range = NUGET.parse("[1.2.3]")
    assert version_range.is_exact()
    assert version_range.contains("1.2.3")
    assert not version_range.contains("1.2.4")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("[1.0,)", VersionRange("1.0.0", None, True, False)),
        ("[1.0,]", VersionRange("1.0.0", None, True, True)),
        ("(,2.0]", VersionRange(None, "2.0.0", False, True)),
        ("[,2.0)", VersionRange(None, "2.0.0", True, False)),
    ],
)
def test_one_sided_ranges_keep_both_flags(text, expected):
    assert NUGET.parse(text) == expected


def test_prerelease_bounds():
    version_range = NUGET.parse("[1.0.0-alpha,1.0.0]")
    assert version_range.contains("1.0.0-beta")
    assert not version_range.contains("0.9.9")


def test_does_not_raise_for_non_string_input():
    assert NUGET.parse(123) is None


def test_logs_rejection_reason(caplog):
    with caplog.at_level(logging.DEBUG, logger="semver_ranges.parsers.nuget"):
        assert NUGET.parse("(1.0.0)") is None
    assert "exact version cannot be exclusive" in caplog.text


def test_parser_is_stateless():
    parser = NuGetRangeParser()
    assert parser.parse("[1.0,2.0)") == NUGET.parse("[1.0,2.0)")
    assert parser.dialect == "nuget"
