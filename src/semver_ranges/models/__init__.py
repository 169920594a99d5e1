"""Data models for semantic version ranges."""

from __future__ import annotations

from .constraint_entry import ConstraintEntry
from .version_range import (
    UNDEFINED,
    InvalidRangeError,
    UndefinedRangeError,
    VersionRange,
    in_range,
)

__all__ = [
    "ConstraintEntry",
    "InvalidRangeError",
    "UNDEFINED",
    "UndefinedRangeError",
    "VersionRange",
    "in_range",
]
